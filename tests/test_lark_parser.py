"""Tests for the Lark parser adapter (infra/lark_parser.py).

These run the real packaged grammar.  They cover:

* Well-formed documents parse with the exact root text.
* Defects are reported as diagnostics, not raised.
* End-of-input defects are anchored at the end of the document.
* Documents without elements have no root.
* Grammar assembly depends on package registration order.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from windtrader.core.models import SyntaxDiagnostic
from windtrader.exceptions import (
    BootstrapError,
    ParserConstructionError,
    ParserMessageError,
)
from windtrader.infra.lark_parser import LarkParser, LarkParserFactory
from windtrader.infra.registry import MetamodelRegistry, TypePackage

VEHICLE_MODEL = """\
package VehicleModel {
    private import ScalarValues::*;

    doc /* A minimal vehicle decomposition. */

    part def Vehicle {
        attribute mass : Real;
        part engine : Engine[1];
        part wheels : Wheel[4];
    }

    part def Engine :> Component;
    abstract part def Component;
    part def Wheel;

    port def FuelPort {
        in item fuel : Fuel;
    }

    item def Fuel;

    enum def Color {
        red;
        green;
    }

    part vehicle : Vehicle {
        attribute :>> mass = 1500.0 * 2;
    }
}
"""


# ---------------------------------------------------------------------------
# Valid documents
# ---------------------------------------------------------------------------

class TestValidDocuments:
    def test_minimal_package(self, parser: LarkParser) -> None:
        result = parser.parse("package P;")
        assert result.errors == ()
        assert result.root_text == "package P;"

    def test_root_text_keeps_surrounding_whitespace(self, parser: LarkParser) -> None:
        result = parser.parse("\n\n  package P;\n")
        assert result.root_text == "\n\n  package P;\n"

    def test_root_text_is_exact_input_slice(self, parser: LarkParser) -> None:
        text = "package   P  {\n  part   def  A ;\n}"
        result = parser.parse(text)
        assert result.errors == ()
        assert result.root_text == text

    def test_notes_are_kept_in_root_text(self, parser: LarkParser) -> None:
        text = "// leading note\n//* block\nnote */\npackage P; // trailing"
        result = parser.parse(text)
        assert result.errors == ()
        assert result.root_text == text

    def test_vehicle_model(self, parser: LarkParser) -> None:
        result = parser.parse(VEHICLE_MODEL)
        assert result.errors == ()
        assert result.root_text == VEHICLE_MODEL

    @pytest.mark.parametrize(
        "text",
        [
            "package P { import Q::*; }",
            "package P { import all Q::**; }",
            "package P { alias V for Vehicles::Vehicle; }",
            "package 'Unrestricted Name' ;",
            "package <p1> Short;",
            "library package Lib;",
            "standard library package Std;",
            "package P { comment about A /* about A */ }",
            "package P { /* anonymous comment */ }",
            "package P { action def Drive { in speed : Real; out distance : Real; } }",
            "package P { connect a.b to c.d; }",
            "package P { bind x = y; }",
            "package P { first start then done; }",
            "package P { requirement def R { subject v : Vehicle; require constraint { v.mass <= 2000 } } }",
            "package P { satisfy R by vehicle; }",
            "package P { attribute x : Boolean = not true and false; }",
            "package P { attribute y = if a > 1 ? b else c; }",
            "package P { attribute s : String default = \"hello\"; }",
            "package P { dependency A to B; }",
            "package P { @Safety; }",
            "package P { part p[0..*] : Part :> parts; }",
        ],
    )
    def test_language_constructs(self, parser: LarkParser, text: str) -> None:
        result = parser.parse(text)
        assert result.errors == (), text
        assert result.root_text == text


# ---------------------------------------------------------------------------
# Defects
# ---------------------------------------------------------------------------

class TestDefects:
    def test_missing_terminator_at_end_of_input(self, parser: LarkParser) -> None:
        result = parser.parse("package P")
        assert result.errors == (SyntaxDiagnostic(line=1, offset=9, text=""),)
        assert result.root_text is None

    def test_end_of_input_line_counts_newlines(self, parser: LarkParser) -> None:
        text = "package P {\n  part def A;\n"
        result = parser.parse(text)
        assert result.errors == (SyntaxDiagnostic(line=3, offset=len(text), text=""),)

    def test_unexpected_token(self, parser: LarkParser) -> None:
        result = parser.parse("package P { part def }")
        assert result.errors == (SyntaxDiagnostic(line=1, offset=21, text="}"),)

    def test_unexpected_token_on_later_line(self, parser: LarkParser) -> None:
        result = parser.parse("package P {\n  part def\n}")
        assert result.errors == (SyntaxDiagnostic(line=3, offset=23, text="}"),)

    def test_unexpected_character(self, parser: LarkParser) -> None:
        result = parser.parse("package P; $")
        assert result.errors == (SyntaxDiagnostic(line=1, offset=11, text="$"),)

    def test_keyword_as_name_is_rejected(self, parser: LarkParser) -> None:
        result = parser.parse("package part;")
        assert result.errors
        assert result.errors[0].text == "part"
        assert result.errors[0].offset == 8

    def test_determinism(self, parser: LarkParser) -> None:
        text = "package P {\n  part def\n}"
        assert parser.parse(text) == parser.parse(text)

    def test_other_lark_errors_become_message_errors(self) -> None:
        from lark.exceptions import LarkError

        lark = MagicMock()
        lark.parse.side_effect = LarkError("parser gave up")
        with pytest.raises(ParserMessageError, match="parser gave up") as exc_info:
            LarkParser(lark).parse("package P;")
        assert isinstance(exc_info.value.__cause__, LarkError)


# ---------------------------------------------------------------------------
# Missing root
# ---------------------------------------------------------------------------

class TestMissingRoot:
    @pytest.mark.parametrize("text", ["", "   \n\t", "// only a note\n"])
    def test_no_elements_no_root(self, parser: LarkParser, text: str) -> None:
        result = parser.parse(text)
        assert result.errors == ()
        assert result.root_text is None


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

class TestFactory:
    def test_requires_initialized_registry(self) -> None:
        factory = LarkParserFactory(MetamodelRegistry())
        with pytest.raises(BootstrapError):
            factory.create_parser()

    def test_parser_is_cached(self, registry: MetamodelRegistry) -> None:
        factory = LarkParserFactory(registry)
        assert factory.create_parser() is factory.create_parser()

    def test_without_expression_package(self) -> None:
        reg = MetamodelRegistry(
            (TypePackage("sysml", "sysml.lark"), TypePackage("types", "types.lark")),
        )
        reg.ensure_initialized()
        parser = LarkParserFactory(reg).create_parser()
        assert parser.parse("package P { attribute x = 1; }").errors == ()
        assert parser.parse("package P { attribute x = 1 + 2; }").errors

    def test_extension_before_primary_package_fails(self) -> None:
        reg = MetamodelRegistry(
            (
                TypePackage("kerml", "kerml.lark"),
                TypePackage("sysml", "sysml.lark"),
                TypePackage("types", "types.lark"),
            ),
        )
        reg.ensure_initialized()
        with pytest.raises(ParserConstructionError) as exc_info:
            LarkParserFactory(reg).create_parser()
        assert exc_info.value.__cause__ is not None
