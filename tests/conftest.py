"""Shared pytest fixtures for refwire tests."""

from collections.abc import Callable, Mapping
from typing import Any

import pytest

from refwire.autowirer import Autowirer
from refwire.containers.autowiring import AutowiringContainer

ContainerFactory = Callable[..., AutowiringContainer]


@pytest.fixture()
def autowirer() -> Autowirer:
    """Autowirer without untyped parameter resolvers."""
    return Autowirer()


@pytest.fixture()
def make_container(autowirer: Autowirer) -> ContainerFactory:
    """Build autowiring containers sharing the ``autowirer`` fixture."""

    def _make(mapping: Mapping[Any, Any] | None = None) -> AutowiringContainer:
        return AutowiringContainer(autowirer, mapping)

    return _make
