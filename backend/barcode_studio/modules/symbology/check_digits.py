"""
Check digit arithmetic for EAN-13 and UPC-A.

Both schemes are GS1 mod-10 checks; they differ only in which positions
(counted from the left) carry weight 3. Inputs are expected to be decimal
digit strings; a non-digit character raises ``ValueError``.
"""

from __future__ import annotations

from barcode_studio.core.logging import get_logger

logger = get_logger(__name__)

EAN13_PAYLOAD_LENGTH = 12
UPCA_PAYLOAD_LENGTH = 11


def _weighted_sum(digits: str, *, odd_weight: int, even_weight: int) -> int:
    total = 0
    for i, ch in enumerate(digits):
        weight = even_weight if i % 2 == 0 else odd_weight
        total += int(ch) * weight
    return total


def compute_ean13_checksum(digits: str) -> str | None:
    """
    Append the EAN-13 check digit to a 12 digit payload.

    Args:
        digits: The first 12 digits of the EAN-13 code

    Returns:
        The full 13 digit code, or None if ``digits`` is not 12 characters long
    """
    if len(digits) != EAN13_PAYLOAD_LENGTH:
        return None
    total = _weighted_sum(digits, odd_weight=3, even_weight=1)
    return digits + str((10 - total % 10) % 10)


def fix_ean13(code: str) -> str | None:
    """
    Validate a 13 digit EAN-13 code, replacing a wrong check digit.

    Returns:
        The corrected (or unchanged) code, or None if ``code`` is not 13 characters long
    """
    if len(code) != EAN13_PAYLOAD_LENGTH + 1:
        return None
    expected = compute_ean13_checksum(code[:EAN13_PAYLOAD_LENGTH])
    if int(code[-1]) == int(expected[-1]):  # type: ignore[index]
        return code
    logger.debug("ean13_checksum_repaired", original=code, corrected=expected)
    return expected


def compute_upca_check_digit(digits: str) -> str | None:
    """
    Append the UPC-A check digit to an 11 digit payload.

    Returns:
        The full 12 digit code, or None if ``digits`` is not 11 characters long
    """
    if len(digits) != UPCA_PAYLOAD_LENGTH:
        return None
    remainder = _weighted_sum(digits, odd_weight=1, even_weight=3) % 10
    check_digit = 0 if remainder == 0 else 10 - remainder
    return digits + str(check_digit)


def fix_upca(code: str) -> str | None:
    """Validate a 12 digit UPC-A code, replacing a wrong check digit."""
    if len(code) != UPCA_PAYLOAD_LENGTH + 1:
        return None
    expected = compute_upca_check_digit(code[:UPCA_PAYLOAD_LENGTH])
    if int(code[-1]) == int(expected[-1]):  # type: ignore[index]
        return code
    logger.debug("upca_check_digit_repaired", original=code, corrected=expected)
    return expected
