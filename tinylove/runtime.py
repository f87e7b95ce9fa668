"""Module registry, version information and small runtime helpers."""

from __future__ import annotations

import posixpath
from collections.abc import Callable
from typing import Any

VERSION_MAJOR = 0
VERSION_MINOR = 0
VERSION_PATCH = 1
VERSION_STRING = "0.0.1"
ENGINE_NAME = "Lutro"


class NotImplementedFeature(NotImplementedError):
    """Raised by API functions the engine does not provide.

    ``arguments`` holds the arguments the caller passed, which are discarded.
    """

    def __init__(self, message: str, arguments: tuple[Any, ...] = ()) -> None:
        super().__init__(message)
        self.arguments = arguments


class ModuleRegistry:
    """Lazily built engine modules, each created once on first request."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Any]] = {}
        self._loaded: dict[str, Any] = {}

    def preload(self, name: str, factory: Callable[[], Any]) -> None:
        """Register ``factory`` to build the module ``name`` when required."""
        self._factories[name] = factory

    def require(self, name: str) -> Any:
        """Return module ``name``, building it on first use.

        Raises LookupError when no module of that name was preloaded.
        """
        if name in self._loaded:
            return self._loaded[name]
        try:
            factory = self._factories[name]
        except KeyError:
            raise LookupError(f"module '{name}' not found") from None
        module = factory()
        self._loaded[name] = module
        return module

    def __contains__(self, name: object) -> bool:
        return name in self._factories or name in self._loaded


def get_version() -> tuple[int, int, int, str]:
    """Return the major, minor and patch version and the engine name."""
    return VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH, ENGINE_NAME


def relpath_to_modname(relpath: str) -> str:
    """Turn a relative file path such as ``a/b.lua`` into a module name ``a.b``."""
    head, base = posixpath.split(relpath)
    dot = base.rfind(".")
    if dot >= 0:
        base = base[:dot]
    stripped = posixpath.join(head, base) if head else base
    return stripped.replace("/", ".")


def not_implemented(*args: Any) -> None:
    """Stand-in for API functions that are not available; discards its arguments."""
    error = NotImplementedFeature("Not implemented.", tuple(args))
    raise error