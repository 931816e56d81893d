from __future__ import annotations

import datetime
import decimal
import inspect
import pathlib
import uuid
from dataclasses import dataclass
from typing import Any

from refwire._internal.type_checks import is_protocol_class


@dataclass(frozen=True, slots=True)
class ConcreteTypeAutowirePolicy:
    """Internal policy deciding which located classes may be constructed by reflection."""

    ignored_base_types: tuple[type[Any], ...] = (
        pathlib.PurePath,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        decimal.Decimal,
    )

    def rejection_reason(self, cls: type[Any]) -> str | None:
        """Return why ``cls`` cannot be autowired, or ``None`` when it can.

        Args:
            cls: Class located for the requested identifier.

        """
        if is_protocol_class(cls):
            return "it's a protocol"
        if inspect.isabstract(cls):
            return "it's an abstract class"
        if cls.__module__ == "builtins":
            return "it's a builtin type"
        if issubclass(cls, type):
            return "it's a metaclass"
        if issubclass(cls, self.ignored_base_types):
            return "it's a value type"
        return None
