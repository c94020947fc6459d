"""Diagnostic logging configuration.

Modules log through ``logging.getLogger(__name__)``; only the CLI calls
:func:`configure_logging`, once, before dispatching a command.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LEVEL: int = logging.WARNING


def resolve_level(level: str | int) -> int:
    """Map a level name or number to a ``logging`` level.

    Unknown names fall back to :data:`DEFAULT_LEVEL`.
    """
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def configure_logging(level: str | int = DEFAULT_LEVEL) -> None:
    """Route the ``windtrader`` logger hierarchy to stderr via Rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("windtrader")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
