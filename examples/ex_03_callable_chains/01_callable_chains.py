"""Callable chains: factories that return factories.

When the identifier is a class, refwire keeps invoking the bound callable
until the result is an instance of that class. For string keys the callable
is invoked exactly once and its result is kept as is.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from refwire import Autowirer, AutowiringContainer


class Mailer(ABC):
    @abstractmethod
    def send(self, to: str) -> str: ...


class SmtpMailer(Mailer):
    def __init__(self, host: str) -> None:
        self.host = host

    def send(self, to: str) -> str:
        return f"sent to {to} via {self.host}"


class MailerFactory:
    """Invokable factory: constructing it yields a factory of mailers."""

    def __call__(self) -> Mailer:
        return SmtpMailer("smtp.local")


def make_handler() -> Callable[[], str]:
    return lambda: "handled"


def main() -> None:
    container = AutowiringContainer(
        Autowirer(),
        {
            Mailer: MailerFactory,
            "handler": make_handler,
        },
    )

    mailer = container.get(Mailer)
    print(f"mailer={type(mailer).__name__}")  # => mailer=SmtpMailer
    print(mailer.send("ops"))  # => sent to ops via smtp.local

    handler = container.get("handler")
    print(f"handler_is_callable={callable(handler)}")  # => handler_is_callable=True
    print(f"handler_result={handler()}")  # => handler_result=handled


if __name__ == "__main__":
    main()
