"""
ZPL interpreter extracting barcode directives.

Only three kinds of commands are recognized:

- ``^FOx,y`` sets the field origin
- a barcode type command (``^BC``, ``^B3``, ``^BQ``, ``^BX``, ``^BE``, ``^BY``)
- ``^FD...^FS`` field data

The walk is a small state machine over scanned lines. ``step`` is pure: it
takes the current ``InterpreterState`` and one line and returns the next state
plus the directive emitted by that line, if any. Everything else in the
document is ignored; malformed commands never raise.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum

from barcode_studio.core.logging import get_logger
from barcode_studio.modules.symbology.rules import Symbology
from barcode_studio.modules.zpl.scanner import scan
from barcode_studio.modules.zpl.schemas import BarcodeDirective

logger = get_logger(__name__)

_FIELD_ORIGIN_RE = re.compile(r"\^FO(\d+),(\d+)")
_FIELD_DATA_RE = re.compile(r"\^FD(.*?)(?:\^FS|$)")

# Checked in order; the first marker contained in a line wins.
TYPE_MARKERS: tuple[tuple[str, Symbology], ...] = (
    ("^BC", Symbology.CODE128),
    ("^B3", Symbology.CODE39),
    ("^BQ", Symbology.QR),
    ("^BX", Symbology.DATAMATRIX),
    ("^BE", Symbology.EAN13),
    ("^BY", Symbology.UPCA),
)


class InterpreterPhase(str, Enum):
    IDLE = "idle"
    TYPE_PENDING = "type_pending"
    READY = "ready"


@dataclass(frozen=True)
class InterpreterState:
    x: int = 0
    y: int = 0
    pending_type: Symbology | None = None
    pending_data: str | None = None

    @property
    def phase(self) -> InterpreterPhase:
        if self.pending_type is None:
            return InterpreterPhase.IDLE
        if self.pending_data is None:
            return InterpreterPhase.TYPE_PENDING
        return InterpreterPhase.READY


def initial_state() -> InterpreterState:
    return InterpreterState()


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def match_type_marker(line: str) -> Symbology | None:
    for marker, symbology in TYPE_MARKERS:
        if marker in line:
            return symbology
    return None


def apply_position(state: InterpreterState, line: str) -> InterpreterState:
    match = _FIELD_ORIGIN_RE.search(line)
    if match is None:
        return state
    return replace(state, x=_to_int(match.group(1)), y=_to_int(match.group(2)))


def apply_type(state: InterpreterState, line: str) -> InterpreterState:
    symbology = match_type_marker(line)
    if symbology is None:
        return state
    return replace(state, pending_type=symbology)


def apply_data(state: InterpreterState, line: str) -> InterpreterState:
    """Record field data; data without a pending barcode type is dropped."""
    match = _FIELD_DATA_RE.search(line)
    if match is None or not match.group(1):
        return state
    if state.pending_type is None:
        logger.debug("zpl_orphan_field_data_dropped", data=match.group(1))
        return state
    return replace(state, pending_data=match.group(1))


def emit(state: InterpreterState) -> tuple[InterpreterState, BarcodeDirective | None]:
    """Turn a ready state into a directive and clear the pending fields."""
    if state.phase is not InterpreterPhase.READY:
        return state, None
    directive = BarcodeDirective(
        type=state.pending_type,  # type: ignore[arg-type]
        data=state.pending_data,  # type: ignore[arg-type]
        x=state.x,
        y=state.y,
    )
    return replace(state, pending_type=None, pending_data=None), directive


def step(state: InterpreterState, line: str) -> tuple[InterpreterState, BarcodeDirective | None]:
    state = apply_position(state, line)
    state = apply_type(state, line)
    state = apply_data(state, line)
    return emit(state)


def interpret(text: object) -> list[BarcodeDirective]:
    """
    Extract barcode directives from ZPL text.

    Args:
        text: ZPL document; anything other than a non-empty string yields []

    Returns:
        One directive per barcode type command followed by field data, in
        document order
    """
    lines = scan(text)
    if not lines:
        return []

    state = initial_state()
    directives: list[BarcodeDirective] = []
    for line in lines:
        state, directive = step(state, line)
        if directive is not None:
            directives.append(directive)

    if state.pending_type is not None:
        logger.debug("zpl_trailing_type_dropped", barcode_type=state.pending_type.value)
    logger.info("zpl_parse_completed", lines=len(lines), directives=len(directives))
    return directives
