"""Single source of truth for the windtrader package version."""

from __future__ import annotations

__version__: str = "0.3.0"
