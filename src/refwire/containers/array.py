from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from refwire.container_interface import IContainer
from refwire.exceptions import RefwireNotFoundError


class ArrayContainer(IContainer):
    """Container over a flat mapping of identifiers to bindings.

    The mapping is copied at construction and never changes afterwards.
    Values are returned verbatim: aliases and factories are not interpreted.
    """

    def __init__(self, mapping: Mapping[Any, Any] | None = None) -> None:
        self._map: Mapping[Any, Any] = MappingProxyType(dict(mapping or {}))

    def has(self, identifier: Any) -> bool:
        return identifier in self._map

    def get(self, identifier: Any) -> Any:
        if identifier not in self._map:
            msg = f'Mapping for "{identifier}" is not defined.'
            raise RefwireNotFoundError(msg)
        return self._map[identifier]
