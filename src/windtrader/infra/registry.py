"""Infrastructure: metamodel type-package registry and bootstrap.

The parser's grammar is assembled from *type packages*: grammar
fragments shipped as package resources under
``windtrader/resources/grammars``.  Before a parser can be built, every
package in :data:`DEFAULT_PACKAGES` must be registered, in order.

Rules
-----
* Registration order is significant.  The primary ``sysml`` package
  defines the rules that later packages ``%extend``; registering it
  late makes grammar compilation fail.
* Optional packages are alternate distributions of one capability.  A
  missing optional package is skipped; a present-but-broken one is
  fatal, exactly like a missing required package.
* :meth:`MetamodelRegistry.ensure_initialized` does its work once per
  registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources

from windtrader.exceptions import BootstrapError

logger = logging.getLogger(__name__)

GRAMMAR_PACKAGE: str = "windtrader.resources"
"""Import path of the package holding the ``grammars`` resource directory."""


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TypePackage:
    """Declaration of one registrable type package."""

    name: str
    """Logical package name used as the registry key."""

    resource: str
    """Grammar fragment file name inside the ``grammars`` directory."""

    optional: bool = False
    """Whether a missing resource is silently ignored."""


DEFAULT_PACKAGES: tuple[TypePackage, ...] = (
    TypePackage("sysml", "sysml.lark"),
    TypePackage("types", "types.lark"),
    # KerML expressions ship under different names depending on the
    # distribution; whichever are present get registered.
    TypePackage("kerml", "kerml.lark", optional=True),
    TypePackage("kerml_expressions", "kerml_expressions.lark", optional=True),
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class MetamodelRegistry:
    """Ordered table of registered type packages.

    Parameters
    ----------
    packages:
        Declarations registered by :meth:`ensure_initialized`, in order.
    resource_package:
        Import path of the package whose ``grammars`` directory holds
        the fragments.
    """

    def __init__(
        self,
        packages: tuple[TypePackage, ...] = DEFAULT_PACKAGES,
        *,
        resource_package: str = GRAMMAR_PACKAGE,
    ) -> None:
        self._packages: tuple[TypePackage, ...] = packages
        self._resource_package: str = resource_package
        self._fragments: dict[str, str] = {}
        self._initialized: bool = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def registered(self) -> tuple[str, ...]:
        """Names of the registered packages, in registration order."""
        return tuple(self._fragments)

    def ensure_initialized(self) -> None:
        """Register every declared package exactly once.

        A failed bootstrap leaves the registry uninitialised, so the
        next call retries from the first unregistered package and fails
        the same way.

        Raises
        ------
        BootstrapError
            When a required package is missing, or any package is
            present but cannot be loaded.
        """
        if self._initialized:
            return

        for package in self._packages:
            self.register(package)

        self._initialized = True
        logger.debug("Registry initialised with %s", ", ".join(self.registered))

    def register(self, package: TypePackage) -> None:
        """Register a single *package*.  Re-registering a name is a no-op."""
        if package.name in self._fragments:
            return

        try:
            fragment = self._load_fragment(package.resource)
        except FileNotFoundError as exc:
            if package.optional:
                logger.debug("Optional type package %r not present", package.name)
                return
            raise BootstrapError(
                f"Required type package {package.name!r} not found "
                f"({package.resource}).",
                hint="The installation may be incomplete; reinstall windtrader.",
            ) from exc
        except (OSError, UnicodeDecodeError, ImportError) as exc:
            raise BootstrapError(
                f"Failed to load type package {package.name!r}: {exc}",
            ) from exc

        if not fragment.strip():
            raise BootstrapError(f"Type package {package.name!r} is empty.")

        self._fragments[package.name] = fragment
        logger.debug("Registered type package %r", package.name)

    def grammar(self) -> str:
        """Return the registered fragments joined in registration order.

        Raises
        ------
        BootstrapError
            When called before :meth:`ensure_initialized` has completed.
        """
        if not self._initialized:
            raise BootstrapError(
                "Metamodel registry used before initialisation.",
            )
        return "\n".join(self._fragments.values())

    # ------------------------------------------------------------------
    # Resource access
    # ------------------------------------------------------------------

    def _load_fragment(self, resource: str) -> str:
        path = resources.files(self._resource_package) / "grammars" / resource
        return path.read_text(encoding="utf-8")


_default_registry: MetamodelRegistry | None = None


def default_registry() -> MetamodelRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = MetamodelRegistry()
    return _default_registry
