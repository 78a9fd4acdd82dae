"""Pillow helpers shared by the renderers."""

from __future__ import annotations

import base64
import io

from PIL import Image, ImageOps


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., "#FF0000" or "FF0000")

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        ValueError: If hex_color is not a valid 6-character hex string
    """
    hex_color = hex_color.lstrip("#")
    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: must be 6 characters, got {len(hex_color)}")
    try:
        return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {hex_color}") from e


def apply_padding(image: Image.Image, padding: int, background: str) -> Image.Image:
    """Surround ``image`` with ``padding`` pixels of the background color."""
    image = image.convert("RGB")
    if padding <= 0:
        return image
    return ImageOps.expand(image, border=padding, fill=hex_to_rgb(background))


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG", optimize=True)
    buffer.seek(0)
    return buffer.read()


def to_data_url(image: Image.Image) -> str:
    """Encode an image as a ``data:image/png;base64,...`` URI."""
    encoded = base64.b64encode(encode_png(image)).decode("ascii")
    return f"data:image/png;base64,{encoded}"
