"""Infrastructure layer: external system integration.

This layer wraps all interaction with Lark and the packaged resources.
Every raw third-party exception must be caught here and re-raised as a
:class:`~windtrader.exceptions.WindtraderError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from windtrader.infra.build_info import read_build_sysml_version
from windtrader.infra.lark_parser import LarkParser, LarkParserFactory
from windtrader.infra.registry import (
    DEFAULT_PACKAGES,
    MetamodelRegistry,
    TypePackage,
    default_registry,
)

__all__: list[str] = [
    "DEFAULT_PACKAGES",
    "LarkParser",
    "LarkParserFactory",
    "MetamodelRegistry",
    "TypePackage",
    "default_registry",
    "read_build_sysml_version",
]
