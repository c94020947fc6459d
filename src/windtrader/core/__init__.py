"""Core / service layer: pure orchestration and result classification.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
* No parser-engine imports; the parser is reached through protocols.
"""

from windtrader.core.models import (
    Command,
    ParseOutcome,
    ParseResult,
    RuntimeFailure,
    Success,
    SyntaxDiagnostic,
    SyntaxInvalid,
)
from windtrader.core.protocols import ParserFactory, ParserHandle, RegistryBootstrap
from windtrader.core.validation_service import ValidationService, read_input

__all__: list[str] = [
    "Command",
    "ParseOutcome",
    "ParseResult",
    "ParserFactory",
    "ParserHandle",
    "RegistryBootstrap",
    "RuntimeFailure",
    "Success",
    "SyntaxDiagnostic",
    "SyntaxInvalid",
    "ValidationService",
    "read_input",
]
