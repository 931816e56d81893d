from refwire.autowirer import AutowireProbe, Autowirer
from refwire.container_interface import IContainer
from refwire.containers.aggregating import AggregatingContainer
from refwire.containers.array import ArrayContainer
from refwire.containers.autowiring import AutowiringContainer
from refwire.exceptions import (
    RefwireContainerError,
    RefwireError,
    RefwireInvalidConfigurationError,
    RefwireNotFoundError,
)
from refwire.param_resolvers import (
    ParamFactoryResolver,
    UntypedContainerParamResolver,
    UntypedKeyParamResolver,
)
from refwire.parameters import ParamDescriptor
from refwire.type_locator import TypeLocator

__all__ = [
    "AggregatingContainer",
    "ArrayContainer",
    "AutowireProbe",
    "Autowirer",
    "AutowiringContainer",
    "IContainer",
    "ParamDescriptor",
    "ParamFactoryResolver",
    "RefwireContainerError",
    "RefwireError",
    "RefwireInvalidConfigurationError",
    "RefwireNotFoundError",
    "TypeLocator",
    "UntypedContainerParamResolver",
    "UntypedKeyParamResolver",
]
