"""Per-call bundle of renderer collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from barcode_studio.renderers.datamatrix import DataMatrixRenderer
from barcode_studio.renderers.qr import QRRenderer
from barcode_studio.renderers.raster import RasterRenderer


@dataclass(frozen=True)
class RenderContext:
    """Renderers used by one generation call.

    Passed explicitly to ``BarcodeGenerationService.generate`` so tests can
    substitute in-memory renderers. Renderers hold configuration only; every
    render allocates its own image.
    """

    qr: QRRenderer
    raster: RasterRenderer
    datamatrix: DataMatrixRenderer

    @classmethod
    def default(cls) -> RenderContext:
        return cls(
            qr=QRRenderer.from_settings(),
            raster=RasterRenderer(),
            datamatrix=DataMatrixRenderer(),
        )
