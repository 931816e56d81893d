from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from refwire._internal.autowire_policy import ConcreteTypeAutowirePolicy
from refwire.container_interface import IContainer
from refwire.exceptions import RefwireInvalidConfigurationError
from refwire.integrations.pydantic_settings import is_pydantic_settings_subclass
from refwire.param_resolvers import ArgumentFactory, ParamFactoryResolver
from refwire.parameters import ParamDescriptor, ParameterInspector
from refwire.type_locator import TypeLocator

logger = logging.getLogger(__name__)

ObjectFactory = Callable[[IContainer], Any]


@dataclass(frozen=True, slots=True)
class AutowireProbe:
    """Outcome of a dry-run factory construction.

    Exactly one of ``factory`` and ``error`` is set.
    """

    factory: ObjectFactory | None = None
    error: RefwireInvalidConfigurationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ObjectFactory:
        """Return the factory, or raise the configuration error the probe found."""
        if self.error is not None:
            raise self.error
        assert self.factory is not None
        return self.factory


class Autowirer:
    """Build objects from type hints and a container's definitions.

    The autowirer acts as the abstract factory behind ``AutowiringContainer``.
    It can:

    - Return a created object (``autowire``).
    - Return a factory that creates an object (``auto_factory``).
    - Check if an object can be created (``probe``, ``can_autowire``).
    - Call any callable with its arguments resolved (``autowire_callable``).

    Only static information is used to decide whether a class can be built:
    checking never calls ``get`` on the container and never runs constructors.
    The only mutable state is the append-only list of untyped parameter
    resolvers, so one autowirer may be shared by several containers.
    """

    def __init__(
        self,
        *,
        type_locator: TypeLocator | None = None,
        autowire_policy: ConcreteTypeAutowirePolicy | None = None,
    ) -> None:
        """Initialize an autowirer.

        Args:
            type_locator: Decides which identifiers name classes. A new
                ``TypeLocator`` is used when omitted.
            autowire_policy: Decides which located classes may be constructed.
                Builtins, metaclasses and common value types are excluded by
                default.

        """
        self._type_locator = type_locator or TypeLocator()
        self._autowire_policy = autowire_policy or ConcreteTypeAutowirePolicy()
        self._parameter_inspector = ParameterInspector()
        self._untyped_param_resolvers: list[ParamFactoryResolver] = []

    def with_untyped_param_resolver(self, resolver: ParamFactoryResolver) -> Autowirer:
        """Append a resolver for parameters without type hints.

        Resolvers are consulted in registration order; the first one returning
        a factory wins.

        Args:
            resolver: Callable ``(container, param) -> factory | None``.

        """
        self._untyped_param_resolvers.append(resolver)
        return self

    def locate_type(self, identifier: Any) -> type[Any] | None:
        """Return the class named by ``identifier``, or ``None`` for opaque keys."""
        return self._type_locator.locate(identifier)

    def autowire(self, container: IContainer, class_name: Any) -> Any:
        """Create an object of the class named by ``class_name``.

        Args:
            container: Container used to resolve constructor arguments.
            class_name: Class or import path of the class to create.

        Raises:
            RefwireInvalidConfigurationError: If the class can't be autowired.

        Exceptions raised by the constructor itself propagate unchanged.

        """
        factory = self.auto_factory(container, class_name)
        return factory(container)

    def can_autowire(self, container: IContainer, class_name: Any) -> bool:
        """Check if an object can be created based on the container's definitions."""
        return self.probe(container, class_name).ok

    def probe(self, container: IContainer, class_name: Any) -> AutowireProbe:
        """Try to build a factory for ``class_name`` without invoking it.

        Configuration problems are reported on the returned probe. Any other
        error is a genuine failure and propagates.

        Args:
            container: Container consulted through ``has`` only.
            class_name: Class or import path of the class to check.

        """
        try:
            return AutowireProbe(factory=self._build_factory(container, class_name))
        except RefwireInvalidConfigurationError as error:
            return AutowireProbe(error=error)

    def auto_factory(self, container: IContainer, class_name: Any) -> ObjectFactory:
        """Create a factory that builds ``class_name`` from a container.

        The returned factory resolves every argument again each time it is
        called, against the container it is called with.

        Raises:
            RefwireInvalidConfigurationError: If the class doesn't exist, can't
                be instantiated, or has a parameter that can't be resolved.

        """
        return self.probe(container, class_name).unwrap()

    def param_auto_factories(
        self,
        container: IContainer,
        params: Sequence[ParamDescriptor],
    ) -> list[ArgumentFactory | None]:
        """Resolve the parameter list as argument factories, ``None`` meaning "pass None"."""
        return [self.param_auto_factory(container, param) for param in params]

    def autowire_params(self, container: IContainer, params: Sequence[ParamDescriptor]) -> list[Any]:
        """Resolve the parameter list to argument values."""
        return [
            _apply(factory, container) for factory in self.param_auto_factories(container, params)
        ]

    def param_auto_factory(
        self,
        container: IContainer,
        param: ParamDescriptor,
    ) -> ArgumentFactory | None:
        """Decide how one parameter gets its argument.

        The decision is made now, the container is only asked for the value
        when the returned factory is called.

        Raises:
            RefwireInvalidConfigurationError: If the parameter is not resolvable,
                has no default and is not nullable.

        """
        if not param.is_typed:
            factory = self._untyped_param_auto_factory(container, param)
            if factory is not None:
                return factory
            if param.has_default:
                return _default_factory(param.default)
            if param.nullable:
                return None

            msg = (
                f"Can't autowire parameter {param.describe()}, "
                "provide a type hint or make it nullable."
            )
            raise RefwireInvalidConfigurationError(msg)

        param_type = param.annotation

        # check if the container is able to provide the param
        if container.has(param_type):
            return lambda c: c.get(param_type)

        if param.has_default:
            return _default_factory(param.default)
        if param.nullable:
            return None

        msg = (
            f"Can't autowire parameter {param.describe()} of type {_type_name(param_type)}, "
            "it can't be found in the container and is not nullable "
            "(add it to the container or make it nullable)."
        )
        raise RefwireInvalidConfigurationError(msg)

    def autowire_callable(self, container: IContainer, func: Callable[..., Any]) -> Any:
        """Call ``func`` with every parameter resolved from ``container``.

        Raises:
            RefwireInvalidConfigurationError: If a parameter can't be resolved.

        """
        params = self._parameter_inspector.for_callable(func)
        invoke = self._invocation(func, params, self.param_auto_factories(container, params))
        return invoke(container)

    def _build_factory(self, container: IContainer, class_name: Any) -> ObjectFactory:
        cls = self._type_locator.locate(class_name)
        if cls is None:
            msg = f"Class {class_name!r} doesn't exist and can't be autowired."
            raise RefwireInvalidConfigurationError(msg)

        # interfaces and abstract classes can't be instantiated
        reason = self._autowire_policy.rejection_reason(cls)
        if reason is not None:
            msg = f"Can't autowire class {_type_name(cls)}, because {reason}."
            raise RefwireInvalidConfigurationError(msg)

        if is_pydantic_settings_subclass(cls) or not _declares_constructor(cls):
            return lambda c: cls()

        params = self._parameter_inspector.for_constructor(cls)
        return self._invocation(cls, params, self.param_auto_factories(container, params))

    def _invocation(
        self,
        func: Callable[..., Any],
        params: Sequence[ParamDescriptor],
        factories: Sequence[ArgumentFactory | None],
    ) -> ObjectFactory:
        bound = [
            (param, factory)
            for param, factory in zip(params, factories, strict=True)
            if not param.is_variadic
        ]

        def invoke(container: IContainer) -> Any:
            args: list[Any] = []
            kwargs: dict[str, Any] = {}
            for param, factory in bound:
                if param.is_keyword_only:
                    kwargs[param.name] = _apply(factory, container)
                else:
                    args.append(_apply(factory, container))
            return func(*args, **kwargs)

        return invoke

    def _untyped_param_auto_factory(
        self,
        container: IContainer,
        param: ParamDescriptor,
    ) -> ArgumentFactory | None:
        for resolver in self._untyped_param_resolvers:
            factory = resolver(container, param)
            if factory is not None:
                return factory

        logger.debug("No untyped parameter resolver matched parameter %s", param.describe())
        return None


def _apply(factory: ArgumentFactory | None, container: IContainer) -> Any:
    return factory(container) if factory is not None else None


def _default_factory(default: Any) -> ArgumentFactory:
    return lambda c: default


def _declares_constructor(cls: type[Any]) -> bool:
    return cls.__init__ is not object.__init__ or cls.__new__ is not object.__new__


def _type_name(candidate: Any) -> str:
    if isinstance(candidate, type):
        return f"{candidate.__module__}.{candidate.__qualname__}"
    return repr(candidate)


__all__ = ["AutowireProbe", "Autowirer", "ObjectFactory"]
