"""CLI application entry point and command routing for windtrader.

This module is the **sole error boundary** for the entire application
and the only place that translates between the domain world and the OS
process exit code.

Commands
--------
* ``windtrader`` / ``windtrader check``: validate stdin, no output on success
* ``windtrader echo``    : validate stdin, print the parsed text on success
* ``windtrader versions``: identification lines, stdin untouched

Exit codes are defined in :mod:`windtrader.cli.exit_codes`.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING, BinaryIO, TextIO

from rich.markup import escape

from windtrader.cli.console import console
from windtrader.cli.exit_codes import KEYBOARD_INTERRUPT, ExitCode
from windtrader.core.models import Command, RuntimeFailure, Success, SyntaxInvalid
from windtrader.exceptions import (
    InputReadError,
    UsageError,
    WindtraderError,
    format_cause_chain,
)

if TYPE_CHECKING:
    from windtrader.core.validation_service import ValidationService

USAGE_LINES: tuple[str, ...] = (
    "windtrader usage:",
    "  check      : parse-only validate stdin, exit 0 if valid, 2 if invalid",
    "  echo       : parse-only validate stdin then print parsed text if valid",
    "  versions   : print version info",
)


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

def parse_command(argv: Sequence[str]) -> Command:
    """Derive the command from *argv*; extra arguments are ignored.

    Raises
    ------
    UsageError
        When the first argument is not a known command.
    """
    if not argv:
        return Command.CHECK

    command = Command.from_name(argv[0])
    if command is None:
        raise UsageError(argv[0])
    return command


def _print_usage() -> None:
    for line in USAGE_LINES:
        console.line(line)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service() -> ValidationService:
    """Wire the validation service to the process-wide registry."""
    from windtrader.core.validation_service import ValidationService
    from windtrader.infra.lark_parser import LarkParserFactory
    from windtrader.infra.registry import default_registry

    registry = default_registry()
    return ValidationService(registry, LarkParserFactory(registry))


def _report_runtime_failure(outcome: RuntimeFailure) -> None:
    """Print the complete cause chain; runtime failures are never hidden."""
    console.line("error: runtime failure")
    console.line(format_cause_chain(outcome.cause).rstrip("\n"))
    hint = getattr(outcome.cause, "hint", None)
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


def _handle_validate(command: Command, stdin: BinaryIO, stdout: TextIO) -> int:
    """Read the whole document, validate it and map the outcome.

    Flow:
    1. Read stdin to end-of-file.
    2. Bootstrap, parse and classify via the validation service.
    3. Report diagnostics, or echo the parsed text.
    """
    from windtrader.cli.report import report_syntax_errors
    from windtrader.core.validation_service import read_input

    try:
        text = read_input(stdin)
    except InputReadError as exc:
        outcome = RuntimeFailure(cause=exc)
    else:
        outcome = _build_service().validate(text)

    if isinstance(outcome, SyntaxInvalid):
        report_syntax_errors(outcome)
        return ExitCode.INVALID

    if isinstance(outcome, RuntimeFailure):
        _report_runtime_failure(outcome)
        return ExitCode.RUNTIME

    if isinstance(outcome, Success) and command is Command.ECHO:
        stdout.write(outcome.root_text)
        stdout.flush()
    return ExitCode.OK


def _handle_versions(stdout: TextIO) -> int:
    """Dispatch the ``versions`` command."""
    from windtrader.cli.versions import run_versions

    return run_versions(stdout)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the windtrader CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin:
        Binary input stream.  Defaults to ``sys.stdin.buffer``.
    stdout:
        Text output stream.  Defaults to ``sys.stdout``.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        command = parse_command(args)
    except UsageError:
        _print_usage()
        return ExitCode.RUNTIME

    out = sys.stdout if stdout is None else stdout

    if command is Command.VERSIONS:
        return _handle_versions(out)

    source = sys.stdin.buffer if stdin is None else stdin
    return _handle_validate(command, source, out)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Configures logging from the environment, runs :func:`main` and
    exits exactly once with a code from :class:`ExitCode`.
    """
    from windtrader.logging_setup import configure_logging
    from windtrader.settings import get_settings

    try:
        configure_logging(get_settings().log_level)
        code = main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        code = KEYBOARD_INTERRUPT
    except WindtraderError as exc:
        _report_runtime_failure(RuntimeFailure(cause=exc))
        code = ExitCode.RUNTIME
    except Exception as exc:  # noqa: BLE001
        console.line("error: unexpected failure, please report this issue")
        console.line(format_cause_chain(exc).rstrip("\n"))
        code = ExitCode.RUNTIME
    sys.exit(int(code))
