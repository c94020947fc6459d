"""Custom exception hierarchy for windtrader.

All exceptions that cross layer boundaries must inherit from
:class:`WindtraderError`.  Raw third-party exceptions (e.g. from Lark)
must NEVER propagate beyond the infrastructure layer: they must be
caught and re-raised as a typed subclass defined here, with the
original exception attached as ``__cause__``.

Hierarchy
---------
WindtraderError
├── UsageError
├── InputReadError
├── BootstrapError
├── ParserConstructionError
└── ParserMessageError
"""

from __future__ import annotations

import traceback


class WindtraderError(Exception):
    """Base exception for all windtrader errors.

    Every error condition must map to a subclass of this exception so
    that the CLI error boundary can classify it without inspecting
    third-party types.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(WindtraderError):
    """Raised when the requested command is not recognised."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command: str = command


# --- Input -----------------------------------------------------------------

class InputReadError(WindtraderError):
    """Raised when standard input cannot be read or decoded."""


# --- Parser bootstrap ------------------------------------------------------

class BootstrapError(WindtraderError):
    """Raised when a metamodel type package cannot be registered."""


class ParserConstructionError(WindtraderError):
    """Raised when the parser cannot be built from the registered grammar."""


# --- Parsing ---------------------------------------------------------------

class ParserMessageError(WindtraderError):
    """Raised when the parser aborts with a message instead of diagnostics.

    Unlike the other errors in this module this one describes a bad
    document, not a broken environment.
    """


def format_cause_chain(exc: BaseException) -> str:
    """Render *exc* with its full traceback and ``__cause__`` chain."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
