from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from refwire._internal.type_checks import is_runtime_class
from refwire.autowirer import Autowirer
from refwire.container_interface import IContainer
from refwire.containers.aggregating import AggregatingContainer
from refwire.exceptions import (
    RefwireContainerError,
    RefwireInvalidConfigurationError,
    RefwireNotFoundError,
)

logger = logging.getLogger(__name__)


class AutowiringContainer(AggregatingContainer):
    """Resolve identifiers through bindings, aliases, factories and autowiring.

    Every successful ``get`` is memoized: the first value resolved for an
    identifier is returned by all later calls. The cache starts with
    ``IContainer`` mapped to the container itself and ``Autowirer`` mapped to
    the autowirer it owns.

    Resolution of an identifier:

    - [resolved] -> return the cached value
    - [defined] => [object] -> cache it
    - [defined] => [str] or [class] -> ``get(value)``, cache the result
    - [defined] => [callable] -> resolve the callable chain, cache the result
    - [undefined] -> autowire, cache the result

    Binding cycles are not detected.
    """

    def __init__(self, autowirer: Autowirer, mapping: Mapping[Any, Any] | None = None) -> None:
        """Initialize a container.

        Args:
            autowirer: Autowirer used for undefined identifiers and callables.
            mapping: Bindings of identifiers to instances, aliases or
                factories.

        Examples:
            .. code-block:: python

                container = AutowiringContainer(
                    Autowirer(),
                    {
                        SettingsProviderInterface: SettingsProvider,
                        "settings": SettingsProviderInterface,
                    },
                )
                settings = container.get("settings")

        """
        super().__init__(mapping)
        self._autowirer = autowirer
        self._resolved: dict[Any, Any] = {
            IContainer: self,
            Autowirer: autowirer,
        }

    @property
    def autowirer(self) -> Autowirer:
        return self._autowirer

    def get(self, identifier: Any) -> Any:
        """Resolve ``identifier`` and return the memoized value.

        Raises:
            RefwireNotFoundError: If nothing is bound to the identifier and it
                can't be autowired.
            RefwireContainerError: If building the value fails. The original
                error is chained as ``__cause__``.

        """
        if self.is_resolved(identifier):
            return self._resolved[identifier]

        if self.has_binding(identifier):
            value = self.get_binding(identifier)

            if isinstance(value, str) or is_runtime_class(value):
                logger.debug("Resolving %r as an alias of %r", identifier, value)
                return self._set_resolved(identifier, self._resolve_alias(identifier, value))

            if callable(value):
                logger.debug("Resolving %r through callable %r", identifier, value)
                return self._set_resolved(identifier, self._resolve_callable(identifier, value))

            return self._set_resolved(identifier, value)

        logger.debug("Nothing is bound to %r, autowiring", identifier)
        return self._set_resolved(identifier, self._autowire(identifier))

    def has(self, identifier: Any) -> bool:
        """Return true when ``identifier`` is bound, resolved or can be autowired.

        Checking never builds objects and never changes the container.
        """
        return (
            self.has_binding(identifier)
            or self.is_resolved(identifier)
            or self._autowirer.can_autowire(self, identifier)
        )

    def is_resolved(self, identifier: Any) -> bool:
        return identifier in self._resolved

    def _set_resolved(self, identifier: Any, value: Any) -> Any:
        # the first stored value wins so that every get() returns the same object
        return self._resolved.setdefault(identifier, value)

    def _resolve_alias(self, identifier: Any, alias: Any) -> Any:
        value = self.get(alias)

        expected = self._autowirer.locate_type(identifier)
        if expected is None or not _is_checkable(expected):
            return value
        if isinstance(value, expected) or not callable(value):
            return value

        # the aliased object is a factory of the identifier type
        return self._resolve_callable(identifier, value)

    def _resolve_callable(self, identifier: Any, func: Callable[..., Any]) -> Any:
        expected = self._autowirer.locate_type(identifier)

        if expected is None or not _is_checkable(expected):
            # opaque key: there's no type to converge on, call exactly once
            try:
                return self._autowire_callable(func)
            except Exception as error:
                msg = f'Error while resolving a callable for "{identifier}".'
                raise RefwireContainerError(msg) from error

        value: Any = func
        try:
            while not isinstance(value, expected) and callable(value):
                logger.debug("Invoking %r in the callable chain for %r", value, identifier)
                value = self._autowire_callable(value)
        except Exception as error:
            msg = f'Error while resolving a callable for "{identifier}".'
            raise RefwireContainerError(msg) from error

        if not isinstance(value, expected):
            msg = (
                f'The callable chain for "{identifier}" ended up with '
                f'"{type(value).__qualname__}". "{expected.__qualname__}" was not found.'
            )
            raise RefwireContainerError(msg)

        return value

    def _autowire_callable(self, func: Callable[..., Any]) -> Any:
        return self._autowirer.autowire_callable(self, func)

    def _autowire(self, identifier: Any) -> Any:
        try:
            return self._autowirer.autowire(self, identifier)
        except RefwireInvalidConfigurationError as error:
            msg = f'Failed to autowire "{identifier}".'
            raise RefwireNotFoundError(msg) from error
        except Exception as error:
            msg = f'Error while autowiring "{identifier}".'
            raise RefwireContainerError(msg) from error


def _is_checkable(expected: type[Any]) -> bool:
    try:
        isinstance(None, expected)
    except TypeError:
        return False
    return True
