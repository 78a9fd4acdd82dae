"""
QR code renderer.

Produces a fixed-profile QR symbol: square image of ``size`` pixels, a quiet
zone of ``margin`` modules, dark modules on a light background, and the
configured error correction level (L by default).
"""

from __future__ import annotations

import qrcode  # type: ignore[import-untyped]
from PIL import Image

from barcode_studio.core.config import get_settings
from barcode_studio.core.logging import get_logger
from barcode_studio.renderers.images import hex_to_rgb

logger = get_logger(__name__)

_ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


class QRRenderer:
    """Render QR payloads to Pillow images."""

    def __init__(
        self,
        *,
        size: int = 200,
        margin: int = 2,
        error_correction: str = "L",
        foreground_color: str = "#000000",
        background_color: str = "#FFFFFF",
    ) -> None:
        level = error_correction.upper()
        if level not in _ERROR_CORRECTION_LEVELS:
            raise ValueError("error_correction must be one of L, M, Q, H")
        if size <= 0:
            raise ValueError("size must be a positive integer")
        if margin < 0:
            raise ValueError("margin cannot be negative")
        self.size = size
        self.margin = margin
        self.error_correction = level
        self._fg_color = hex_to_rgb(foreground_color)
        self._bg_color = hex_to_rgb(background_color)

    @classmethod
    def from_settings(cls) -> QRRenderer:
        settings = get_settings()
        return cls(
            size=settings.qr_size,
            margin=settings.qr_margin,
            error_correction=settings.qr_error_correction,
            foreground_color=settings.qr_foreground_color,
            background_color=settings.qr_background_color,
        )

    def validate_payload(self, payload: str) -> None:
        if not payload:
            raise ValueError("QR payload cannot be empty")

    def render(self, payload: str) -> Image.Image:
        self.validate_payload(payload)

        qr = qrcode.QRCode(
            version=None,  # Auto-determine version
            error_correction=_ERROR_CORRECTION_LEVELS[self.error_correction],
            box_size=10,
            border=self.margin,
        )
        qr.add_data(payload)
        qr.make(fit=True)

        logger.debug(
            "qr_render",
            version=qr.version,
            size=self.size,
            margin=self.margin,
            error_correction=self.error_correction,
        )

        img = qr.make_image(fill_color=self._fg_color, back_color=self._bg_color)
        return img.get_image().convert("RGB").resize((self.size, self.size), Image.NEAREST)
