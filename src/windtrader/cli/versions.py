"""``windtrader versions``: identification output.

Prints fixed ``key=value`` lines plus the SysML release recorded in the
embedded build metadata.  Never reads standard input and never touches
the parser bootstrap.
"""

from __future__ import annotations

from typing import TextIO

from windtrader.cli.exit_codes import ExitCode
from windtrader.infra.build_info import read_build_sysml_version

STATIC_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "windtrader"),
    ("mode", "validator"),
    ("validation", "parse-only"),
    ("python_min", "3.10"),
)


def version_lines() -> list[str]:
    lines = [f"{key}={value}" for key, value in STATIC_FIELDS]
    lines.append(f"sysml_version={read_build_sysml_version()}")
    return lines


def run_versions(stdout: TextIO) -> int:
    """Print identification lines to *stdout*.

    Returns
    -------
    int
        Always :attr:`ExitCode.OK`.
    """
    for line in version_lines():
        stdout.write(line + "\n")
    stdout.flush()
    return ExitCode.OK
