"""Barcode request normalization and generation."""

from barcode_studio.modules.barcodes.schemas import (
    BarcodeRequest,
    BarcodeSuccess,
    BarcodeWarning,
    Outcome,
)
from barcode_studio.modules.barcodes.service import (
    BarcodeGenerationError,
    BarcodeGenerationService,
    generate,
    generate_many,
)

__all__ = [
    "BarcodeGenerationError",
    "BarcodeGenerationService",
    "BarcodeRequest",
    "BarcodeSuccess",
    "BarcodeWarning",
    "Outcome",
    "generate",
    "generate_many",
]
