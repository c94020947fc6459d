"""Shared pytest fixtures and configuration for the windtrader test suite.

Guidelines
----------
* Core tests use fakes injected through the protocols: no Lark.
* Parser and CLI tests use the real packaged grammar.
* CLI tests pass explicit byte/text streams instead of touching the
  process stdin/stdout.
"""

from __future__ import annotations

import io

import pytest

from windtrader.infra.lark_parser import LarkParser, LarkParserFactory
from windtrader.infra.registry import MetamodelRegistry


@pytest.fixture(scope="session")
def registry() -> MetamodelRegistry:
    """A registry bootstrapped with the default type packages."""
    reg = MetamodelRegistry()
    reg.ensure_initialized()
    return reg


@pytest.fixture(scope="session")
def parser(registry: MetamodelRegistry) -> LarkParser:
    """A parser compiled from the default grammar."""
    return LarkParserFactory(registry).create_parser()


class ForbiddenStdin(io.BytesIO):
    """Binary stream that fails the test when read."""

    def read(self, size: int | None = -1) -> bytes:  # noqa: ARG002
        raise AssertionError("stdin must not be read")


@pytest.fixture()
def forbidden_stdin() -> ForbiddenStdin:
    return ForbiddenStdin(b"package P;")
