from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from refwire.container_interface import IContainer
from refwire.containers.array import ArrayContainer
from refwire.exceptions import RefwireInvalidConfigurationError, RefwireNotFoundError


class AggregatingContainer(ArrayContainer):
    """Container with fallback sub-containers and sub-mappings.

    Notes:
        - Sub-containers don't override the container's own mappings, they are
          consulted only when the container can't provide the identifier.
        - Sub-containers are checked in the order of their addition.

    """

    def __init__(self, mapping: Mapping[Any, Any] | None = None) -> None:
        super().__init__(mapping)
        self._sub_containers: list[IContainer] = []

    def with_container(self, container: IContainer | Mapping[Any, Any]) -> AggregatingContainer:
        """Append a fallback container; a plain mapping is wrapped in ``ArrayContainer``.

        Args:
            container: Container or mapping to consult after the own mapping
                and every previously added sub-container.

        """
        if not isinstance(container, IContainer):
            if not isinstance(container, Mapping):
                msg = f"Expected a container or a mapping, got {container!r}."
                raise RefwireInvalidConfigurationError(msg)
            container = ArrayContainer(container)

        self._sub_containers.append(container)
        return self

    def has_binding(self, identifier: Any) -> bool:
        """Return true when the own mapping or a sub-container defines ``identifier``."""
        if super().has(identifier):
            return True
        return any(container.has(identifier) for container in self._sub_containers)

    def get_binding(self, identifier: Any) -> Any:
        """Return the binding for ``identifier``, the own mapping winning."""
        if super().has(identifier):
            return super().get(identifier)

        for container in self._sub_containers:
            if container.has(identifier):
                return container.get(identifier)

        msg = (
            f'Mapping for "{identifier}" is not defined neither in the main container '
            f"nor in any of the sub-containers ({len(self._sub_containers)})."
        )
        raise RefwireNotFoundError(msg)

    # IContainer overrides

    def has(self, identifier: Any) -> bool:
        return self.has_binding(identifier)

    def get(self, identifier: Any) -> Any:
        return self.get_binding(identifier)
