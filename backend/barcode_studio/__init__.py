"""
Barcode Studio: ZPL barcode extraction and barcode image generation.

Caller-facing API:

- ``generate(request)`` / ``generate_many(requests)`` render barcodes
- ``interpret(zpl_text)`` extracts barcode directives from ZPL
- ``generate_template(type, data)`` builds a one-barcode ZPL label
"""

from barcode_studio.modules.barcodes import (
    BarcodeGenerationError,
    BarcodeRequest,
    BarcodeSuccess,
    BarcodeWarning,
    generate,
    generate_many,
)
from barcode_studio.modules.symbology import Symbology
from barcode_studio.modules.zpl import BarcodeDirective, generate_template, interpret
from barcode_studio.renderers import RenderContext

__all__ = [
    "BarcodeDirective",
    "BarcodeGenerationError",
    "BarcodeRequest",
    "BarcodeSuccess",
    "BarcodeWarning",
    "RenderContext",
    "Symbology",
    "generate",
    "generate_many",
    "generate_template",
    "interpret",
]
