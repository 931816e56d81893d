"""Errors: telling missing wiring from broken construction.

``RefwireNotFoundError`` means nothing can provide the identifier.
``RefwireContainerError`` means the wiring is valid but building the value
failed; the original exception is chained as ``__cause__``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from refwire import (
    Autowirer,
    AutowiringContainer,
    RefwireContainerError,
    RefwireNotFoundError,
)


class PaymentGateway(ABC):
    @abstractmethod
    def charge(self, amount: int) -> None: ...


class Checkout:
    def __init__(self, gateway: PaymentGateway) -> None:
        self.gateway = gateway


class FlakyService:
    def __init__(self) -> None:
        msg = "connection refused"
        raise ConnectionError(msg)


def main() -> None:
    container = AutowiringContainer(Autowirer())

    print(f"has_checkout={container.has(Checkout)}")  # => has_checkout=False
    try:
        container.get(Checkout)
    except RefwireNotFoundError:
        print("checkout=not found")  # => checkout=not found

    print(f"has_flaky={container.has(FlakyService)}")  # => has_flaky=True
    try:
        container.get(FlakyService)
    except RefwireContainerError as error:
        print(f"flaky_cause={type(error.__cause__).__name__}")  # => flaky_cause=ConnectionError


if __name__ == "__main__":
    main()
