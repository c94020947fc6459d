"""Error reporter: line-oriented rendering of syntax diagnostics.

Output format, one line per diagnostic::

    error: line=<line> offset=<offset> near=<text>

Message-only outcomes render as ``error: msg=<message>``.  Newlines in
the offending text are escaped as the two characters ``\\n``.  Lines
appear in the order the parser reported them.
"""

from __future__ import annotations

from windtrader.cli.console import console
from windtrader.core.models import SyntaxDiagnostic, SyntaxInvalid


def escape_newlines(text: str | None) -> str:
    if text is None:
        return "null"
    return text.replace("\n", "\\n")


def format_diagnostic(diagnostic: SyntaxDiagnostic) -> str:
    return (
        f"error: line={diagnostic.line} offset={diagnostic.offset} "
        f"near={escape_newlines(diagnostic.text)}"
    )


def format_message(message: str) -> str:
    return f"error: msg={message}"


def render_lines(outcome: SyntaxInvalid) -> list[str]:
    """Return the diagnostic lines for *outcome* without printing them."""
    lines = [format_diagnostic(diagnostic) for diagnostic in outcome.errors]
    if outcome.message is not None:
        lines.append(format_message(outcome.message))
    return lines


def report_syntax_errors(outcome: SyntaxInvalid) -> None:
    """Write the diagnostic lines for *outcome* to stderr."""
    for line in render_lines(outcome):
        console.line(line)
