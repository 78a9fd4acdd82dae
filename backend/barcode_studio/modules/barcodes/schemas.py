"""
Pydantic schemas and outcome types for barcode generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field

from barcode_studio.modules.symbology.rules import DEFAULT_SYMBOLOGY, Symbology, parse_symbology
from barcode_studio.renderers.images import to_data_url


class BarcodeRequest(BaseModel):
    """A single barcode to render."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(
        min_length=1,
        max_length=32,
        description="Symbology name, case-insensitive (e.g. CODE128, ean13, QR)",
    )
    data: str = Field(description="Payload to encode")
    height: int | None = Field(
        default=None,
        gt=0,
        le=1000,
        description="Bar height used when the symbology has no fixed height",
    )

    @property
    def symbology(self) -> Symbology | None:
        """Canonical symbology, or None when ``type`` is not recognized."""
        return parse_symbology(self.type)


@dataclass(frozen=True)
class BarcodeSuccess:
    """Rendered barcode image."""

    image: Image.Image
    kind: Literal["success"] = "success"

    def to_data_url(self) -> str:
        return to_data_url(self.image)


@dataclass(frozen=True)
class BarcodeWarning:
    """Recoverable input problem; nothing was rendered."""

    message: str
    fallback_type: Symbology = DEFAULT_SYMBOLOGY
    kind: Literal["warning"] = "warning"


Outcome = BarcodeSuccess | BarcodeWarning


class BarcodeOutcomeResponse(BaseModel):
    """Response model for one generated barcode."""

    kind: Literal["success", "warning", "error"]
    type: str = Field(description="Barcode type as requested")
    data_url: str | None = Field(default=None, description="PNG image as a data URI")
    message: str | None = Field(default=None, description="Warning or error explanation")
    fallback_type: Symbology | None = Field(
        default=None,
        description="Suggested symbology when the input does not fit the requested one",
    )


class BarcodeBatchRequest(BaseModel):
    """Request model for batch barcode generation."""

    requests: list[BarcodeRequest] = Field(
        min_length=1,
        description="Barcodes to generate; results keep the same order",
    )


class BarcodeBatchResponse(BaseModel):
    """Index-aligned results of a batch request."""

    items: list[BarcodeOutcomeResponse]
