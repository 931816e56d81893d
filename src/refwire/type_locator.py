"""Map container identifiers to the runtime classes they name."""

from __future__ import annotations

import logging
import pkgutil
from dataclasses import dataclass, field
from typing import Any

from refwire._internal.type_checks import is_runtime_class

logger = logging.getLogger(__name__)

_NOT_A_CLASS: Any = object()


@dataclass(slots=True)
class TypeLocator:
    """Decide whether an identifier names a class, and which one.

    A runtime class is its own type. A string is treated as an import path,
    ``"package.module.Class"`` or ``"package.module:Outer.Inner"``, and names
    a class only when importing it succeeds and yields one. Every other
    identifier is an opaque key.

    Lookups for strings are cached per identifier, so an identifier keeps the
    same classification for the lifetime of the locator.
    """

    _cache: dict[str, Any] = field(default_factory=dict)

    def locate(self, identifier: Any) -> type[Any] | None:
        """Return the class named by ``identifier``, or ``None`` for opaque keys.

        Args:
            identifier: Container identifier to classify.

        """
        if is_runtime_class(identifier):
            return identifier
        if not isinstance(identifier, str):
            return None

        located = self._cache.get(identifier)
        if located is None:
            located = self._import_class(identifier)
            self._cache[identifier] = located

        return None if located is _NOT_A_CLASS else located

    def _import_class(self, name: str) -> Any:
        if not name or not name.replace(".", "").replace(":", "").replace("_", "").isalnum():
            return _NOT_A_CLASS
        if "." not in name and ":" not in name:
            # a bare name can only import a module, never a class
            return _NOT_A_CLASS
        try:
            resolved = pkgutil.resolve_name(name)
        except (ImportError, AttributeError, ValueError):
            return _NOT_A_CLASS
        if not is_runtime_class(resolved):
            return _NOT_A_CLASS
        logger.debug("Identifier %r names class %r", name, resolved)
        return resolved


__all__ = ["TypeLocator"]
