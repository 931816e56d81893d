class RefwireError(Exception):
    """Represent a base class for all refwire-specific failures.

    Catch this type when you want to handle any refwire error path without
    matching each concrete exception class individually.
    """


class RefwireContainerError(RefwireError):
    """Signal that resolution machinery failed while building a value.

    Raised by ``AutowiringContainer.get`` when a constructor or factory raises,
    when a callable chain ends on a value of the wrong type, or when signature
    inspection fails. The original error is always chained as ``__cause__``.

    Typical fixes start from the chained cause: the wiring is valid but
    something broke while the object graph was being built.
    """


class RefwireNotFoundError(RefwireContainerError):
    """Signal that an identifier cannot be resolved by any means.

    Raised by ``get`` on plain containers when no binding exists and by
    ``AutowiringContainer.get`` when no binding exists and the identifier
    cannot be autowired.

    Typical fixes include adding a binding for the identifier, binding the
    abstract type to a concrete implementation, or adding type hints to the
    constructor parameters of the requested class.
    """


class RefwireInvalidConfigurationError(RefwireError):
    """Signal that static analysis proved a target cannot be constructed.

    Raised by ``Autowirer`` when the target is not a class, is abstract or a
    protocol, is excluded from autowiring, or has a required parameter that
    is neither resolvable from the container nor nullable. Also raised by
    ``AggregatingContainer.with_container`` for unsupported arguments.

    Containers translate this error: ``has`` returns ``False`` and ``get``
    raises ``RefwireNotFoundError``.
    """
