"""Tests for the error reporter (cli/report.py)."""

from __future__ import annotations

import pytest

from windtrader.cli.report import (
    escape_newlines,
    format_diagnostic,
    render_lines,
    report_syntax_errors,
)
from windtrader.core.models import NO_ROOT_MESSAGE, SyntaxDiagnostic, SyntaxInvalid


class TestFormatting:
    def test_diagnostic_line(self) -> None:
        line = format_diagnostic(SyntaxDiagnostic(line=3, offset=42, text="}"))
        assert line == "error: line=3 offset=42 near=}"

    def test_newlines_are_escaped(self) -> None:
        line = format_diagnostic(SyntaxDiagnostic(line=1, offset=0, text="a\nb\n"))
        assert line == "error: line=1 offset=0 near=a\\nb\\n"
        assert "\n" not in line

    def test_absent_text(self) -> None:
        assert escape_newlines(None) == "null"

    def test_empty_text(self) -> None:
        line = format_diagnostic(SyntaxDiagnostic(line=1, offset=9, text=""))
        assert line == "error: line=1 offset=9 near="

    def test_markup_is_not_interpreted(self) -> None:
        line = format_diagnostic(SyntaxDiagnostic(line=1, offset=0, text="[bold]"))
        assert line.endswith("near=[bold]")


class TestRenderLines:
    def test_order_is_preserved(self) -> None:
        outcome = SyntaxInvalid(
            errors=(
                SyntaxDiagnostic(9, 100, "z"),
                SyntaxDiagnostic(1, 2, "a"),
                SyntaxDiagnostic(9, 100, "z"),
            ),
        )
        assert render_lines(outcome) == [
            "error: line=9 offset=100 near=z",
            "error: line=1 offset=2 near=a",
            "error: line=9 offset=100 near=z",
        ]

    def test_missing_root_message(self) -> None:
        outcome = SyntaxInvalid(message=NO_ROOT_MESSAGE)
        assert render_lines(outcome) == [
            "error: msg=Parsed successfully but produced no root AST element.",
        ]

    def test_no_errors_no_message(self) -> None:
        assert render_lines(SyntaxInvalid()) == []


class TestReportToStderr:
    def test_writes_lines_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        long_text = "x" * 300
        report_syntax_errors(
            SyntaxInvalid(
                errors=(
                    SyntaxDiagnostic(1, 0, "[red]"),
                    SyntaxDiagnostic(2, 5, long_text),
                ),
            ),
        )
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == (
            "error: line=1 offset=0 near=[red]\n"
            f"error: line=2 offset=5 near={long_text}\n"
        )
