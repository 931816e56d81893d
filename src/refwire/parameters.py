from __future__ import annotations

import dataclasses
import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, Union, get_args, get_origin, get_type_hints

from refwire.exceptions import RefwireInvalidConfigurationError

_NONE_TYPE = type(None)


@dataclass(frozen=True, slots=True)
class ParamDescriptor:
    """Describe one constructor/callable parameter as seen by the autowirer."""

    position: int
    name: str
    annotation: Any | None
    nullable: bool
    default: Any = Parameter.empty
    kind: Any = Parameter.POSITIONAL_OR_KEYWORD

    @property
    def is_typed(self) -> bool:
        return self.annotation is not None

    @property
    def has_default(self) -> bool:
        return self.default is not Parameter.empty

    @property
    def is_variadic(self) -> bool:
        return self.kind in (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)

    @property
    def is_keyword_only(self) -> bool:
        return self.kind is Parameter.KEYWORD_ONLY

    def describe(self) -> str:
        return f'[{self.position}] "{self.name}"'


class ParameterInspector:
    """Extract ``ParamDescriptor`` lists from classes and callables."""

    def for_constructor(self, cls: type[Any]) -> list[ParamDescriptor]:
        """Describe the parameters of ``cls.__init__`` without ``self``.

        Args:
            cls: Class whose constructor is inspected.

        """
        return self._describe(
            parameters=self._signature(cls, cls.__qualname__),
            hints=self._constructor_type_hints(cls),
            owner_name=cls.__qualname__,
        )

    def for_callable(self, func: Callable[..., Any]) -> list[ParamDescriptor]:
        """Describe the parameters of any callable.

        Classes are described by their constructor. Objects with ``__call__``
        are described by that method, bound methods without their receiver.

        Args:
            func: Callable to inspect.

        """
        if inspect.isclass(func):
            return self.for_constructor(func)

        name = self.callable_name(func)
        hints_source = func
        if not (inspect.isfunction(func) or inspect.ismethod(func)):
            hints_source = getattr(type(func), "__call__", func)

        return self._describe(
            parameters=self._signature(func, name),
            hints=self._type_hints(hints_source),
            owner_name=name,
        )

    def callable_name(self, func: Callable[..., Any]) -> str:
        return getattr(func, "__qualname__", None) or type(func).__qualname__

    def _signature(self, target: Callable[..., Any], name: str) -> tuple[Parameter, ...]:
        try:
            return tuple(inspect.signature(target).parameters.values())
        except (TypeError, ValueError) as error:
            msg = f"Can't inspect the signature of {name}: {error}"
            raise RefwireInvalidConfigurationError(msg) from error

    def _type_hints(self, target: Any) -> dict[str, Any] | Exception:
        try:
            return get_type_hints(target)
        except (AttributeError, NameError, TypeError) as error:
            return error

    def _constructor_type_hints(self, cls: type[Any]) -> dict[str, Any] | Exception:
        hints = self._type_hints(cls.__init__)
        if not dataclasses.is_dataclass(cls):
            return hints
        # generated __init__ may carry string annotations the class body resolves
        class_hints = self._type_hints(cls)
        if isinstance(class_hints, Exception):
            return hints
        if isinstance(hints, Exception):
            return class_hints
        return {**class_hints, **hints}

    def _describe(
        self,
        *,
        parameters: tuple[Parameter, ...],
        hints: dict[str, Any] | Exception,
        owner_name: str,
    ) -> list[ParamDescriptor]:
        descriptors: list[ParamDescriptor] = []

        for position, parameter in enumerate(parameters):
            annotation = self._annotation(parameter, hints, owner_name, position)
            declared, optional = self._strip_optional(annotation)
            descriptors.append(
                ParamDescriptor(
                    position=position,
                    name=parameter.name,
                    annotation=declared,
                    nullable=optional or parameter.default is None,
                    default=parameter.default,
                    kind=parameter.kind,
                ),
            )

        return descriptors

    def _annotation(
        self,
        parameter: Parameter,
        hints: dict[str, Any] | Exception,
        owner_name: str,
        position: int,
    ) -> Any | None:
        if isinstance(hints, dict) and parameter.name in hints:
            return hints[parameter.name]

        raw_annotation = parameter.annotation
        if raw_annotation is Parameter.empty:
            return None
        if not isinstance(raw_annotation, str):
            return raw_annotation

        msg = (
            f'Can\'t evaluate the type hint "{raw_annotation}" of parameter '
            f'[{position}] "{parameter.name}" of {owner_name}.'
        )
        if isinstance(hints, Exception):
            msg = f"{msg} Original annotation error: {hints}"
            raise RefwireInvalidConfigurationError(msg) from hints
        raise RefwireInvalidConfigurationError(msg)

    def _strip_optional(self, annotation: Any | None) -> tuple[Any | None, bool]:
        if annotation is None:
            return None, False
        if annotation is _NONE_TYPE:
            return None, True

        if get_origin(annotation) not in (Union, types.UnionType):
            return annotation, False

        members = [member for member in get_args(annotation) if member is not _NONE_TYPE]
        optional = len(members) < len(get_args(annotation))
        if not optional:
            return annotation, False
        if len(members) == 1:
            return members[0], True
        return Union[tuple(members)], True  # noqa: UP007


__all__ = ["ParamDescriptor", "ParameterInspector"]
