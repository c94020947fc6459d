"""Lark backed implementation of :class:`~windtrader.core.protocols.ParserFactory`.

This module is the **only** place in the codebase that imports ``lark``.
All Lark exceptions are caught here and re-raised as typed
:class:`~windtrader.exceptions.WindtraderError` subclasses, or turned
into :class:`~windtrader.core.models.SyntaxDiagnostic` entries: nothing
raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

from windtrader.core.models import ParseResult, SyntaxDiagnostic
from windtrader.exceptions import ParserConstructionError, ParserMessageError
from windtrader.infra.registry import MetamodelRegistry

logger = logging.getLogger(__name__)

START_RULE: str = "model"


class LarkParser:
    """Concrete :class:`ParserHandle` wrapping a compiled ``lark.Lark``.

    This class satisfies the :class:`~windtrader.core.protocols.ParserHandle`
    protocol structurally: no explicit inheritance required.
    """

    def __init__(self, lark: Any) -> None:
        self._lark: Any = lark

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParseResult:
        """Parse *text* and report diagnostics instead of raising.

        Returns
        -------
        ParseResult
            ``errors`` holds at most one diagnostic (the Earley parser
            stops at the first defect).  The root element spans the whole
            document, so ``root_text`` is the input unchanged, hidden
            whitespace and notes included, or ``None`` when the document
            contains no elements at all.

        Raises
        ------
        ParserMessageError
            For any other Lark failure raised while parsing.
        """
        from lark.exceptions import LarkError, UnexpectedInput

        try:
            tree = self._lark.parse(text)
        except UnexpectedInput as exc:
            return ParseResult(errors=(self._diagnostic(exc, text),), root_text=None)
        except LarkError as exc:
            raise ParserMessageError(str(exc)) from exc

        if tree.meta.empty:
            return ParseResult(errors=(), root_text=None)
        return ParseResult(errors=(), root_text=text)

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _diagnostic(exc: Any, text: str) -> SyntaxDiagnostic:
        """Translate a Lark ``UnexpectedInput`` into a diagnostic.

        ``UnexpectedEOF`` carries no position (Lark reports ``-1``), so
        it is anchored at the end of the input with an empty fragment.
        """
        from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedToken

        if isinstance(exc, UnexpectedEOF) or exc.pos_in_stream is None or exc.pos_in_stream < 0:
            return SyntaxDiagnostic(
                line=text.count("\n") + 1,
                offset=len(text),
                text="",
            )

        offset: int = exc.pos_in_stream
        fragment: str | None
        if isinstance(exc, UnexpectedToken):
            fragment = str(exc.token)
        elif isinstance(exc, UnexpectedCharacters):
            fragment = text[offset:offset + 1]
        else:
            fragment = None

        return SyntaxDiagnostic(
            line=text.count("\n", 0, offset) + 1,
            offset=offset,
            text=fragment,
        )


class LarkParserFactory:
    """Concrete :class:`ParserFactory` compiling the registered grammar.

    The compiled parser is cached, so repeated calls are cheap.

    Usage::

        registry = default_registry()
        registry.ensure_initialized()
        parser = LarkParserFactory(registry).create_parser()
    """

    def __init__(self, registry: MetamodelRegistry) -> None:
        self._registry: MetamodelRegistry = registry
        self._parser: LarkParser | None = None

    def create_parser(self) -> LarkParser:
        """Compile the registry grammar into a :class:`LarkParser`.

        Raises
        ------
        BootstrapError
            When the registry has not been initialised.
        ParserConstructionError
            When Lark is missing or rejects the grammar.
        """
        if self._parser is not None:
            return self._parser

        grammar = self._registry.grammar()

        try:
            from lark import Lark
            from lark.exceptions import LarkError
        except ModuleNotFoundError as exc:
            raise ParserConstructionError(
                "lark is not installed. Install with: pip install lark",
            ) from exc

        try:
            lark = Lark(
                grammar,
                start=START_RULE,
                parser="earley",
                lexer="basic",
                propagate_positions=True,
            )
        except LarkError as exc:
            raise ParserConstructionError(
                f"Grammar compilation failed: {exc}",
            ) from exc

        logger.debug("Compiled grammar from %s", ", ".join(self._registry.registered))
        self._parser = LarkParser(lark)
        return self._parser
