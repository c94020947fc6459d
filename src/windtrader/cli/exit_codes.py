"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

import enum


class ExitCode(enum.IntEnum):
    """Process exit codes.  Exactly one is returned per invocation."""

    OK = 0
    """Clean exit: valid document, or ``versions``."""

    INVALID = 2
    """The document is not syntactically valid."""

    RUNTIME = 3
    """Usage error, or validation could not be carried out."""


KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
