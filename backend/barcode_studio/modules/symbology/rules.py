"""Symbology identifiers, renderer mapping and per-type option presets."""

from __future__ import annotations

from enum import Enum
from typing import Any

from barcode_studio.core.logging import get_logger

logger = get_logger(__name__)


class Symbology(str, Enum):
    """Barcode symbologies understood by the generator."""

    CODE128 = "CODE128"
    CODE39 = "CODE39"
    DATAMATRIX = "DATAMATRIX"
    QR = "QR"
    EAN13 = "EAN13"
    UPCA = "UPCA"
    EAN8 = "EAN8"
    CODE93 = "CODE93"
    ITF14 = "ITF14"
    PDF417 = "PDF417"


DEFAULT_SYMBOLOGY = Symbology.CODE128
DEFAULT_RENDERER_ID = "code128"

# QR has its own renderer and is intentionally absent here.
RENDERER_IDS: dict[Symbology, str] = {
    Symbology.CODE128: "code128",
    Symbology.CODE39: "code39",
    Symbology.DATAMATRIX: "datamatrix",
    Symbology.EAN13: "ean13",
    Symbology.UPCA: "upca",
    Symbology.EAN8: "ean8",
    Symbology.CODE93: "code93",
    Symbology.ITF14: "itf14",
    Symbology.PDF417: "pdf417",
}

LINEAR_SYMBOLOGIES = frozenset(
    {
        Symbology.CODE128,
        Symbology.CODE39,
        Symbology.EAN13,
        Symbology.UPCA,
        Symbology.EAN8,
        Symbology.CODE93,
        Symbology.ITF14,
    }
)


def parse_symbology(value: str | Symbology | None) -> Symbology | None:
    """Return the canonical symbology for ``value`` or ``None`` if unknown."""
    if isinstance(value, Symbology):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Symbology(value.strip().upper())
    except ValueError:
        return None


def map_to_renderer_id(value: str | Symbology | None) -> str:
    """Map a barcode type to its raster renderer id.

    Unknown types (and QR, which is rendered elsewhere) map to ``code128``.
    """
    symbology = parse_symbology(value)
    renderer_id = RENDERER_IDS.get(symbology) if symbology is not None else None
    if renderer_id is None:
        logger.debug(
            "renderer_id_defaulted",
            barcode_type=str(value),
            renderer_id=DEFAULT_RENDERER_ID,
        )
        return DEFAULT_RENDERER_ID
    return renderer_id


def type_specific_options(value: str | Symbology | None) -> dict[str, Any]:
    """Option overrides layered on top of the generic render defaults.

    Linear symbologies get a short bar height and no embedded text; the human
    readable line is drawn by the caller.
    """
    symbology = parse_symbology(value)
    if symbology is Symbology.DATAMATRIX:
        return {"sizelimit": 1, "scale": 2, "height": 80}
    if symbology is Symbology.PDF417:
        return {"columns": 2, "rows": 10}
    if symbology in LINEAR_SYMBOLOGIES:
        return {"scaleX": 2, "height": 10, "includetext": False}
    return {}
