from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IContainer(ABC):
    """Interface for container-like objects.

    Identifiers are runtime classes or strings. ``has`` is a pure query and
    never raises for unknown identifiers; ``get`` raises
    ``RefwireNotFoundError`` for them.
    """

    @abstractmethod
    def has(self, identifier: Any) -> bool:
        """Return true when the container can provide a value for ``identifier``."""

    @abstractmethod
    def get(self, identifier: Any) -> Any:
        """Return the value provided for ``identifier``."""
