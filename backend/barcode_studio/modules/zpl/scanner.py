"""Line scanner for ZPL documents."""

from __future__ import annotations


def scan(text: object) -> list[str]:
    """Split ZPL text on newlines into stripped, non-empty lines in document order.

    Anything that is not a non-empty string yields an empty list.
    """
    if not isinstance(text, str) or not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]
