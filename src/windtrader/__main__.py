"""Allow ``python -m windtrader`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m windtrader`` behaves identically to the ``windtrader``
console script.
"""

from __future__ import annotations

from windtrader.cli.app import cli

if __name__ == "__main__":
    cli()
