"""Domain models for windtrader.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class Command(str, enum.Enum):
    """Operations understood by the command dispatcher."""

    CHECK = "check"
    ECHO = "echo"
    VERSIONS = "versions"

    @classmethod
    def from_name(cls, name: str) -> Command | None:
        """Return the command called *name*, or ``None`` if unknown.

        Matching is exact and case-sensitive.
        """
        for command in cls:
            if command.value == name:
                return command
        return None


# ---------------------------------------------------------------------------
# Parser diagnostics
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SyntaxDiagnostic:
    """One defect reported by the parser."""

    line: int
    """1-based source line of the defect."""

    offset: int
    """Absolute 0-based character offset into the input."""

    text: str | None
    """Offending text fragment, or ``None`` when the parser has none."""


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Raw result of a single parser invocation.

    ``root_text`` is ``None`` when the parser could not anchor a root
    syntax element, even if ``errors`` is empty.
    """

    errors: tuple[SyntaxDiagnostic, ...]
    root_text: str | None

    @property
    def has_syntax_errors(self) -> bool:
        return len(self.errors) > 0


# ---------------------------------------------------------------------------
# Classified outcome
# ---------------------------------------------------------------------------

NO_ROOT_MESSAGE: str = "Parsed successfully but produced no root AST element."


@dataclass(frozen=True, slots=True)
class Success:
    """The document is syntactically valid."""

    root_text: str
    """Input text covered by the root element: the whole document."""


@dataclass(frozen=True, slots=True)
class SyntaxInvalid:
    """The document is not syntactically valid.

    Either ``errors`` lists the parser diagnostics in the order they were
    reported, or ``message`` carries a single parser-level message (the
    missing-root case and aborted parses).
    """

    errors: tuple[SyntaxDiagnostic, ...] = ()
    message: str | None = None


@dataclass(frozen=True, slots=True)
class RuntimeFailure:
    """Validation could not be carried out at all."""

    cause: BaseException


ParseOutcome = Success | SyntaxInvalid | RuntimeFailure
