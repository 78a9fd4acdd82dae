"""Schemas for ZPL interpretation and template APIs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from barcode_studio.modules.barcodes.schemas import BarcodeOutcomeResponse, BarcodeRequest
from barcode_studio.modules.symbology.rules import Symbology

DIRECTIVE_WIDTH = 2
DIRECTIVE_HEIGHT = 100


class BarcodeDirective(BaseModel):
    """A barcode found in a ZPL document, positioned by the last ``^FO``."""

    model_config = ConfigDict(frozen=True)

    type: Symbology
    data: str
    x: int = 0
    y: int = 0
    width: int = DIRECTIVE_WIDTH
    height: int = DIRECTIVE_HEIGHT
    options: dict[str, Any] = Field(default_factory=dict)

    def to_request(self) -> BarcodeRequest:
        return BarcodeRequest(type=self.type.value, data=self.data, height=self.height)


class ZPLInterpretRequest(BaseModel):
    zpl: str = Field(description="ZPL document text")


class ZPLInterpretResponse(BaseModel):
    directives: list[BarcodeDirective]
    count: int


class ZPLRenderResponse(BaseModel):
    directives: list[BarcodeDirective]
    items: list[BarcodeOutcomeResponse] = Field(
        description="Generation outcome per directive, in the same order"
    )


class ZPLTemplateResponse(BaseModel):
    type: Symbology = Field(description="Symbology of the template actually used")
    zpl: str
