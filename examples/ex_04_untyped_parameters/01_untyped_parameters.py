"""Untyped parameters: resolvers for lambdas and legacy code.

Parameters without type hints can't be resolved from the container by type.
Register untyped parameter resolvers to supply them: the first resolver that
returns a factory wins.
"""

from __future__ import annotations

from refwire import (
    Autowirer,
    AutowiringContainer,
    UntypedContainerParamResolver,
    UntypedKeyParamResolver,
)


class Connection:
    def __init__(self, dsn, timeout=30) -> None:  # noqa: ANN001
        self.dsn = dsn
        self.timeout = timeout


def main() -> None:
    autowirer = (
        Autowirer()
        .with_untyped_param_resolver(UntypedContainerParamResolver())
        .with_untyped_param_resolver(UntypedKeyParamResolver())
    )
    container = AutowiringContainer(
        autowirer,
        {
            "dsn": "db.url",
            "db.url": ["sqlite:///app.db"],
            "first_dsn": lambda container: container.get("dsn")[0],
        },
    )

    connection = container.get(Connection)
    print(f"dsn={connection.dsn}")  # => dsn=['sqlite:///app.db']
    print(f"timeout={connection.timeout}")  # => timeout=30
    print(f"first_dsn={container.get('first_dsn')}")  # => first_dsn=sqlite:///app.db


if __name__ == "__main__":
    main()
