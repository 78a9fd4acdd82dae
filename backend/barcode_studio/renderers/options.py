"""Renderer-facing option record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RenderOptions:
    """Options handed to a raster renderer for a single barcode.

    Names follow the Barcode Writer in Pure PostScript conventions
    (``bcid``, ``includetext``, ``textxalign``...). ``height`` is in
    millimetres for linear symbols; ``extras`` holds symbology-specific keys
    such as ``scaleX``, ``sizelimit``, ``columns`` and ``rows``.
    """

    bcid: str
    text: str
    scale: int = 2
    height: int = 60
    padding: int = 8
    includetext: bool = True
    textxalign: str = "center"
    backgroundcolor: str = "FFFFFF"
    width: int | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "bcid": self.bcid,
            "text": self.text,
            "scale": self.scale,
            "height": self.height,
            "padding": self.padding,
            "includetext": self.includetext,
            "textxalign": self.textxalign,
            "backgroundcolor": self.backgroundcolor,
        }
        if self.width is not None:
            data["width"] = self.width
        data.update(self.extras)
        return data
