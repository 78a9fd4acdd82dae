"""Unit tests for the ZPL scanner, interpreter state machine and templates."""

from __future__ import annotations

import pytest

from barcode_studio.modules.symbology.rules import Symbology
from barcode_studio.modules.zpl.interpreter import (
    InterpreterPhase,
    InterpreterState,
    apply_data,
    initial_state,
    interpret,
    match_type_marker,
    step,
)
from barcode_studio.modules.zpl.scanner import scan
from barcode_studio.modules.zpl.templates import generate_template, template_symbology

SAMPLE_LABEL = "^XA\n^FO50,50^BC,100,Y,N,N\n^FD123456^FS\n^XZ"


class TestScan:
    def test_strips_and_drops_blank_lines(self) -> None:
        assert scan("  ^XA  \n\n\t\n^FO1,2 \r\n^XZ") == ["^XA", "^FO1,2", "^XZ"]

    @pytest.mark.parametrize("text", ["", None, 42, b"^XA", ["^XA"]])
    def test_non_string_or_empty_input(self, text: object) -> None:
        assert scan(text) == []

    @pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x85", " ", "\v", "\f"])
    def test_only_newline_separates_lines(self, separator: str) -> None:
        field = f"^FD01{separator}10LOT^FS"
        assert scan(f"^XA\n{field}\n^XZ") == ["^XA", field, "^XZ"]

    def test_field_data_keeps_group_separator(self) -> None:
        directives = interpret("^BCN,100\n^FD0104012345678901\x1d10LOT42^FS")
        assert directives[0].data == "0104012345678901\x1d10LOT42"


class TestStep:
    def test_initial_state_is_idle(self) -> None:
        state = initial_state()
        assert state == InterpreterState(x=0, y=0, pending_type=None, pending_data=None)
        assert state.phase is InterpreterPhase.IDLE

    def test_position_persists_after_emission(self) -> None:
        state, directive = step(initial_state(), "^FO10,20^BC^FDabc^FS")
        assert directive is not None
        assert (directive.x, directive.y) == (10, 20)
        assert state.phase is InterpreterPhase.IDLE
        assert (state.x, state.y) == (10, 20)

    def test_type_command_moves_to_type_pending(self) -> None:
        state, directive = step(initial_state(), "^FO5,5^B3N,N,100,Y,N")
        assert directive is None
        assert state.phase is InterpreterPhase.TYPE_PENDING
        assert state.pending_type is Symbology.CODE39

    def test_data_with_type_is_ready_before_emission(self) -> None:
        state = InterpreterState(pending_type=Symbology.QR)
        ready = apply_data(state, "^FDhello^FS")
        assert ready.phase is InterpreterPhase.READY
        assert ready.pending_data == "hello"

    def test_orphan_data_is_dropped(self) -> None:
        state, directive = step(initial_state(), "^FDorphan^FS")
        assert directive is None
        assert state.phase is InterpreterPhase.IDLE
        assert state.pending_data is None

    def test_later_type_overwrites_pending_type(self) -> None:
        state, _ = step(initial_state(), "^BC")
        state, _ = step(state, "^BE")
        assert state.pending_type is Symbology.EAN13

    def test_step_does_not_mutate_input_state(self) -> None:
        state = initial_state()
        step(state, "^FO9,9^BQ")
        assert state == initial_state()

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("^BCN,100", Symbology.CODE128),
            ("^B3N,N", Symbology.CODE39),
            ("^BQN,2,4", Symbology.QR),
            ("^BXN,10,200", Symbology.DATAMATRIX),
            ("^BEN,100", Symbology.EAN13),
            ("^BY3", Symbology.UPCA),
            ("^A0N,30,30", None),
        ],
    )
    def test_type_markers(self, line: str, expected: Symbology | None) -> None:
        assert match_type_marker(line) is expected

    def test_marker_priority_on_one_line(self) -> None:
        # ^BY appears first in the line but ^BC is earlier in the chain
        assert match_type_marker("^BY2^BCN,100") is Symbology.CODE128
        assert match_type_marker("^BX^B3") is Symbology.CODE39


class TestInterpret:
    def test_sample_label(self) -> None:
        directives = interpret(SAMPLE_LABEL)
        assert len(directives) == 1
        directive = directives[0]
        assert directive.type is Symbology.CODE128
        assert directive.data == "123456"
        assert (directive.x, directive.y) == (50, 50)
        assert (directive.width, directive.height) == (2, 100)
        assert directive.options == {}

    @pytest.mark.parametrize("text", ["", None, 42])
    def test_invalid_input_yields_nothing(self, text: object) -> None:
        assert interpret(text) == []

    def test_empty_field_without_type(self) -> None:
        assert interpret("^FD^FS") == []

    def test_empty_field_does_not_complete_pending_type(self) -> None:
        directives = interpret("^BC\n^FD^FS\n^FDlater^FS")
        assert [d.data for d in directives] == ["later"]

    def test_trailing_type_is_dropped(self) -> None:
        assert interpret("^XA\n^FO1,1^BQN,2,4\n^XZ") == []

    def test_data_without_field_separator(self) -> None:
        directives = interpret("^BEN,100\n^FD4006381333931")
        assert directives[0].data == "4006381333931"
        assert directives[0].type is Symbology.EAN13

    def test_multiple_barcodes_keep_document_order(self) -> None:
        zpl = "\n".join(
            [
                "^XA",
                "^FO10,10^BCN,100",
                "^FDFIRST^FS",
                "^FO20,200^BQN,2,4",
                "^FDhttps://example.com^FS",
                "^FDstray^FS",
                "^BXN,10,200",
                "^FDLOT-1^FS",
                "^XZ",
            ]
        )
        directives = interpret(zpl)
        assert [(d.type, d.data, d.x, d.y) for d in directives] == [
            (Symbology.CODE128, "FIRST", 10, 10),
            (Symbology.QR, "https://example.com", 20, 200),
            (Symbology.DATAMATRIX, "LOT-1", 20, 200),
        ]

    def test_directive_to_request(self) -> None:
        request = interpret(SAMPLE_LABEL)[0].to_request()
        assert request.type == "CODE128"
        assert request.data == "123456"
        assert request.height == 100

    def test_parse_calls_are_independent(self) -> None:
        interpret("^FO99,99^BC")
        directives = interpret("^BQ\n^FDx^FS")
        assert (directives[0].x, directives[0].y) == (0, 0)


class TestTemplates:
    def test_code128_template(self) -> None:
        assert generate_template("CODE128", "ABC") == (
            "^XA\n^FO50,50^BC,100,Y,N,N\n^FDABC^FS\n^XZ"
        )

    @pytest.mark.parametrize(
        ("barcode_type", "expected"),
        [
            ("code128", Symbology.CODE128),
            ("code39", Symbology.CODE39),
            ("qr", Symbology.QR),
            ("datamatrix", Symbology.DATAMATRIX),
            ("ean13", Symbology.EAN13),
            ("upca", Symbology.UPCA),
        ],
    )
    def test_templates_interpret_back_to_their_type(
        self, barcode_type: str, expected: Symbology
    ) -> None:
        directives = interpret(generate_template(barcode_type, "DATA1"))
        assert len(directives) == 1
        assert directives[0].type is expected
        assert directives[0].data == "DATA1"

    @pytest.mark.parametrize("barcode_type", ["PDF417", "aztec", None])
    def test_unsupported_types_use_code128(self, barcode_type: str | None) -> None:
        assert template_symbology(barcode_type) is Symbology.CODE128
        assert "^BC" in generate_template(barcode_type, "x")

    def test_data_with_braces_is_inserted_verbatim(self) -> None:
        assert "^FD{a}^FS" in generate_template("qr", "{a}")
