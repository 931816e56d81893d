"""Strategies that supply arguments for parameters without type hints."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol

from refwire.container_interface import IContainer
from refwire.parameters import ParamDescriptor

ArgumentFactory = Callable[[IContainer], Any]


class ParamFactoryResolver(Protocol):
    """Produce an argument factory for an untyped parameter, or ``None`` to pass."""

    def __call__(
        self,
        container: IContainer,
        param: ParamDescriptor,
    ) -> ArgumentFactory | None: ...


class UntypedContainerParamResolver:
    """Inject the requesting container into untyped parameters with a known name.

    Lets lambdas such as ``lambda container: container.get("db")`` be used as
    bindings without annotations.
    """

    def __init__(self, names: Iterable[str] = ("container",)) -> None:
        self._names = frozenset(names)

    def __call__(self, container: IContainer, param: ParamDescriptor) -> ArgumentFactory | None:
        if param.name not in self._names:
            return None
        return _container_itself


class UntypedKeyParamResolver:
    """Resolve untyped parameters from the container by identifier.

    With no ``keys`` mapping the parameter name is the identifier. With a
    mapping, only mapped parameter names are resolved, each from the mapped
    identifier. Nothing is produced when the container can't provide the
    identifier.
    """

    def __init__(self, keys: Mapping[str, Any] | None = None) -> None:
        self._keys = dict(keys) if keys is not None else None

    def __call__(self, container: IContainer, param: ParamDescriptor) -> ArgumentFactory | None:
        if self._keys is None:
            identifier: Any = param.name
        elif param.name in self._keys:
            identifier = self._keys[param.name]
        else:
            return None

        if not container.has(identifier):
            return None
        return lambda c: c.get(identifier)


def _container_itself(container: IContainer) -> IContainer:
    return container


__all__ = [
    "ArgumentFactory",
    "ParamFactoryResolver",
    "UntypedContainerParamResolver",
    "UntypedKeyParamResolver",
]
