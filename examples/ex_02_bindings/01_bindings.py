"""Bindings: instances, aliases and factories.

A binding map connects identifiers to values. Plain objects are returned as
they are, strings are aliases of other identifiers, and callables are
invoked with their parameters autowired.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from refwire import Autowirer, AutowiringContainer, IContainer


class Clock(ABC):
    @abstractmethod
    def now(self) -> str: ...


class FixedClock(Clock):
    def now(self) -> str:
        return "12:00"


def make_greeting(clock: Clock) -> str:
    return f"Hello at {clock.now()}"


def main() -> None:
    settings = {"name": "demo"}
    container = AutowiringContainer(
        Autowirer(),
        {
            Clock: FixedClock,
            "settings": settings,
            "config": "settings",
            "greeting": make_greeting,
        },
    )

    print(f"clock={type(container.get(Clock)).__name__}")  # => clock=FixedClock
    print(f"alias_shares_object={container.get('config') is settings}")  # => alias_shares_object=True
    print(f"greeting={container.get('greeting')}")  # => greeting=Hello at 12:00
    print(f"has_unknown={container.has('unknown')}")  # => has_unknown=False
    print(f"container_itself={container.get(IContainer) is container}")  # => container_itself=True


if __name__ == "__main__":
    main()
