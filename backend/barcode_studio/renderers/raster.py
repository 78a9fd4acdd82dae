"""
General raster renderer backed by treepoem.

treepoem drives Barcode Writer in Pure PostScript through Ghostscript, the
same encoder family bwip-js is built on, so ``RenderOptions`` translate almost
one to one. Options BWIPP does not understand (``scaleX``, ``sizelimit``,
``padding``) are applied here instead.
"""

from __future__ import annotations

import treepoem
from PIL import Image

from barcode_studio.core.logging import get_logger
from barcode_studio.renderers.images import apply_padding
from barcode_studio.renderers.options import RenderOptions

logger = get_logger(__name__)

MM_PER_INCH = 25.4

# Symbols whose bar height is controlled by the BWIPP ``height`` option
_LINEAR_BCIDS = frozenset({"code128", "code39", "ean13", "upca", "ean8", "code93", "itf14"})

# Extras passed through to BWIPP verbatim
_BWIPP_EXTRAS = ("columns", "rows")


def to_bwipp_options(options: RenderOptions) -> dict[str, str | bool]:
    """Translate render options into a treepoem/BWIPP options dict."""
    bwipp: dict[str, str | bool] = {"backgroundcolor": options.backgroundcolor}
    if options.includetext:
        bwipp["includetext"] = True
        bwipp["textxalign"] = options.textxalign
    if options.bcid in _LINEAR_BCIDS and options.height > 0:
        # BWIPP expects inches
        bwipp["height"] = f"{options.height / MM_PER_INCH:.3f}"
    for key in _BWIPP_EXTRAS:
        if key in options.extras:
            bwipp[key] = str(options.extras[key])
    return bwipp


class RasterRenderer:
    """Render linear and 2-D symbols (other than QR) to Pillow images."""

    def validate_options(self, options: RenderOptions) -> None:
        if not options.text:
            raise ValueError(f"{options.bcid} payload cannot be empty")
        if options.scale < 1:
            raise ValueError("scale must be at least 1")

    def render(self, options: RenderOptions) -> Image.Image:
        self.validate_options(options)
        scale = int(options.extras.get("scaleX", options.scale))
        bwipp_options = to_bwipp_options(options)

        logger.debug("raster_render", bcid=options.bcid, scale=scale, options=bwipp_options)

        image = treepoem.generate_barcode(
            barcode_type=options.bcid,
            data=options.text,
            options=bwipp_options,
            scale=scale,
        )
        return apply_padding(image, options.padding, options.backgroundcolor)
