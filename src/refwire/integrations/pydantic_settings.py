"""Recognize Pydantic settings classes so the autowirer builds them with no arguments.

Settings fields come from the environment, not from the container, so a
``BaseSettings`` subclass must never have its fields autowired.
``pydantic-settings`` is an optional dependency: without it no class is
treated as settings.
"""

from __future__ import annotations

import functools
import importlib
import logging
from typing import Any

from refwire._internal.type_checks import is_runtime_class

logger = logging.getLogger(__name__)


@functools.cache
def settings_base() -> type[Any] | None:
    """Return ``pydantic_settings.BaseSettings``, or ``None`` when it isn't installed."""
    try:
        module = importlib.import_module("pydantic_settings")
    except ImportError:
        logger.debug("pydantic-settings is not installed, settings classes are autowired")
        return None
    return module.BaseSettings


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether ``candidate`` is a concrete settings class.

    ``BaseSettings`` itself is not one: it declares no fields to load.
    """
    base = settings_base()
    if base is None or not is_runtime_class(candidate):
        return False
    return candidate is not base and issubclass(candidate, base)


__all__ = ["is_pydantic_settings_subclass", "settings_base"]
