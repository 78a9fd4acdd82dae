"""Minimal ZPL label snippets, one barcode each."""

from __future__ import annotations

from barcode_studio.modules.symbology.rules import Symbology, parse_symbology

# ``{data}`` is replaced verbatim; the caller is responsible for escaping ^ and ~.
ZPL_TEMPLATES: dict[Symbology, str] = {
    Symbology.CODE128: "^XA\n^FO50,50^BC,100,Y,N,N\n^FD{data}^FS\n^XZ",
    Symbology.CODE39: "^XA\n^FO50,50^B3N,N,100,Y,N\n^FD{data}^FS\n^XZ",
    Symbology.QR: "^XA\n^FO50,50^BQN,2,4\n^FD{data}^FS\n^XZ",
    Symbology.DATAMATRIX: "^XA\n^FO50,50^BX,N,200,200\n^FD{data}^FS\n^XZ",
    Symbology.EAN13: "^XA\n^FO50,50^BE,N,100,Y,N\n^FD{data}^FS\n^XZ",
    Symbology.UPCA: "^XA\n^FO50,50^BY,N,100,Y,N\n^FD{data}^FS\n^XZ",
}


def template_symbology(barcode_type: str | Symbology | None) -> Symbology:
    """Symbology whose template ``generate_template`` uses for ``barcode_type``."""
    symbology = parse_symbology(barcode_type)
    if symbology in ZPL_TEMPLATES:
        return symbology  # type: ignore[return-value]
    return Symbology.CODE128


def generate_template(barcode_type: str | Symbology | None, data: str) -> str:
    """Build a one-barcode ZPL label; unsupported types get the Code 128 template."""
    return ZPL_TEMPLATES[template_symbology(barcode_type)].replace("{data}", data)
