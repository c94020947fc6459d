"""CLI console helpers built on Rich.

Two kinds of stderr output exist: human-facing text (usage, hints),
rendered with Rich markup, and machine-readable diagnostic lines, which
bypass Rich entirely so they come out exactly as given.
"""

from __future__ import annotations

import sys

from rich.console import Console


def get_rich_console() -> Console:
    """Create a Rich console instance targeting stderr."""
    return Console(stderr=True, highlight=False)


class _ConsoleProxy:
    """``print``-compatible proxy that resolves the console per call.

    Creating the console lazily keeps output pointed at whatever
    ``sys.stderr`` is at call time.
    """

    def print(self, *objects: object) -> None:
        """Render *objects* with Rich markup."""
        get_rich_console().print(*objects)

    def line(self, text: str) -> None:
        """Write *text* verbatim to stderr."""
        print(text, file=sys.stderr)


console = _ConsoleProxy()
