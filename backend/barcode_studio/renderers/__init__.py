"""Renderer collaborators turning validated options into raster images."""

from barcode_studio.renderers.context import RenderContext
from barcode_studio.renderers.datamatrix import DataMatrixRenderer
from barcode_studio.renderers.options import RenderOptions
from barcode_studio.renderers.qr import QRRenderer
from barcode_studio.renderers.raster import RasterRenderer

__all__ = [
    "DataMatrixRenderer",
    "QRRenderer",
    "RasterRenderer",
    "RenderContext",
    "RenderOptions",
]
