"""ZPL scanning, interpretation and template generation."""

from barcode_studio.modules.zpl.interpreter import (
    InterpreterPhase,
    InterpreterState,
    interpret,
    step,
)
from barcode_studio.modules.zpl.scanner import scan
from barcode_studio.modules.zpl.schemas import BarcodeDirective
from barcode_studio.modules.zpl.templates import generate_template

__all__ = [
    "BarcodeDirective",
    "InterpreterPhase",
    "InterpreterState",
    "generate_template",
    "interpret",
    "scan",
    "step",
]
