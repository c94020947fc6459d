"""Infrastructure: embedded build-metadata lookup.

Release builds stamp ``windtrader.properties`` into the package
resources.  Reading it must never fail: any problem degrades to
:data:`UNKNOWN`.
"""

from __future__ import annotations

import logging
from importlib import resources

logger = logging.getLogger(__name__)

BUILD_RESOURCE: str = "windtrader.properties"
UNKNOWN: str = "unknown"


def parse_properties(content: str) -> dict[str, str]:
    """Parse ``key=value`` / ``key: value`` lines.

    Blank lines and lines starting with ``#`` or ``!`` are skipped.
    Later keys override earlier ones.
    """
    properties: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith(("#", "!")):
            continue
        separators = [idx for idx in (line.find("="), line.find(":")) if idx >= 0]
        if not separators:
            properties[line] = ""
            continue
        split_at = min(separators)
        properties[line[:split_at].strip()] = line[split_at + 1:].strip()
    return properties


def read_build_property(
    key: str,
    *,
    package: str = "windtrader.resources",
    resource: str = BUILD_RESOURCE,
) -> str:
    """Return the stripped value of *key*, or :data:`UNKNOWN`.

    Falls back when the resource is absent or unreadable and when the
    key is missing or blank.
    """
    try:
        content = (resources.files(package) / resource).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError, ImportError) as exc:
        logger.debug("Build metadata unavailable: %s", exc)
        return UNKNOWN

    value = parse_properties(content).get(key, "").strip()
    return value or UNKNOWN


def read_build_sysml_version() -> str:
    """Return the SysML release the bundled grammar was built against."""
    return read_build_property("sysml_version")
