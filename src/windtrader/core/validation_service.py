"""Core validation service: turns raw input text into a parse outcome.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~windtrader.core.protocols.RegistryBootstrap` and a
:class:`~windtrader.core.protocols.ParserFactory` injected at
construction time, keeping the core free of any parser-engine imports.

Guarantees
----------
* Exactly one :data:`~windtrader.core.models.ParseOutcome` per call.
* Nothing escapes :meth:`ValidationService.validate`: unexpected
  failures are returned as :class:`~windtrader.core.models.RuntimeFailure`.
* Diagnostics keep the parser's order; nothing is sorted or merged.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from windtrader.core.models import (
    NO_ROOT_MESSAGE,
    ParseOutcome,
    ParseResult,
    RuntimeFailure,
    Success,
    SyntaxInvalid,
)
from windtrader.core.protocols import ParserFactory, RegistryBootstrap
from windtrader.exceptions import InputReadError, ParserMessageError

logger = logging.getLogger(__name__)


class ValidationService:
    """Stateless service that validates one document per call.

    Parameters
    ----------
    bootstrap:
        Any object satisfying the :class:`RegistryBootstrap` protocol.
    parser_factory:
        Any object satisfying the :class:`ParserFactory` protocol.
    """

    def __init__(
        self,
        bootstrap: RegistryBootstrap,
        parser_factory: ParserFactory,
    ) -> None:
        self._bootstrap: RegistryBootstrap = bootstrap
        self._parser_factory: ParserFactory = parser_factory

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, text: str) -> ParseOutcome:
        """Parse *text* and classify the result.

        Classification order:

        1. parser aborted with a message → :class:`SyntaxInvalid` carrying
           that message;
        2. no result, or any syntax errors → :class:`SyntaxInvalid`;
        3. no errors but no root element → :class:`SyntaxInvalid` with
           :data:`NO_ROOT_MESSAGE`;
        4. otherwise :class:`Success`.

        Anything else raised along the way becomes :class:`RuntimeFailure`.
        """
        try:
            self._bootstrap.ensure_initialized()
            parser = self._parser_factory.create_parser()
            logger.debug("Parsing %d characters", len(text))
            result = parser.parse(text)
        except ParserMessageError as exc:
            logger.debug("Parser aborted: %s", exc)
            return SyntaxInvalid(message=str(exc))
        except Exception as exc:
            logger.debug("Validation failed unexpectedly", exc_info=True)
            return RuntimeFailure(cause=exc)

        return self._classify(result)

    # ------------------------------------------------------------------
    # Classification (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _classify(result: ParseResult | None) -> ParseOutcome:
        if result is None or result.has_syntax_errors:
            errors = result.errors if result is not None else ()
            return SyntaxInvalid(errors=errors)

        if result.root_text is None:
            return SyntaxInvalid(message=NO_ROOT_MESSAGE)

        return Success(root_text=result.root_text)


def read_input(stream: BinaryIO) -> str:
    """Read *stream* to end-of-file and decode it as UTF-8.

    Raises
    ------
    InputReadError
        When the stream cannot be read or is not valid UTF-8.
    """
    try:
        raw = stream.read()
    except OSError as exc:
        raise InputReadError(f"Failed to read standard input: {exc}") from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputReadError(
            "Standard input is not valid UTF-8.",
            hint=f"Invalid byte at offset {exc.start}.",
        ) from exc
