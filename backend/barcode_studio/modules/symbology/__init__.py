"""Symbology rules and check digit math."""

from barcode_studio.modules.symbology.check_digits import (
    compute_ean13_checksum,
    compute_upca_check_digit,
    fix_ean13,
    fix_upca,
)
from barcode_studio.modules.symbology.rules import (
    LINEAR_SYMBOLOGIES,
    Symbology,
    map_to_renderer_id,
    parse_symbology,
    type_specific_options,
)

__all__ = [
    "LINEAR_SYMBOLOGIES",
    "Symbology",
    "compute_ean13_checksum",
    "compute_upca_check_digit",
    "fix_ean13",
    "fix_upca",
    "map_to_renderer_id",
    "parse_symbology",
    "type_specific_options",
]
