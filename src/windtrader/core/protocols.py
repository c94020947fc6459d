"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so tests can substitute pre-initialised or failing
stand-ins for the registry and the parser.
"""

from __future__ import annotations

from typing import Protocol

from windtrader.core.models import ParseResult


class RegistryBootstrap(Protocol):
    """Contract for the one-time metamodel registry bootstrap."""

    def ensure_initialized(self) -> None:
        """Register every type package the grammar depends on.

        Must be idempotent: only the first successful call does any
        work, later calls return immediately.

        Raises
        ------
        BootstrapError
            When a required type package cannot be registered.
        """
        ...  # pragma: no cover


class ParserHandle(Protocol):
    """A ready-to-use parser bound to the bootstrapped registry."""

    def parse(self, text: str) -> ParseResult:
        """Parse the complete document *text*.

        Syntax defects are reported through the returned
        :class:`ParseResult`, never raised.

        Raises
        ------
        ParserMessageError
            When the parser aborts with a message instead of
            structured diagnostics.
        """
        ...  # pragma: no cover


class ParserFactory(Protocol):
    """Contract for parser construction backends."""

    def create_parser(self) -> ParserHandle:
        """Build a parser.  Callable only after bootstrap has completed.

        Raises
        ------
        BootstrapError
            When called before the registry has been initialised.
        ParserConstructionError
            When the grammar cannot be compiled.
        """
        ...  # pragma: no cover
