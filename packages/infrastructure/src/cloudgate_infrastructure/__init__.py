from .adapters.memory import InMemoryInfrastructureAdapter
from .instance import InstanceAttributes, ManagedInstance
from .instance_list import ReadOnlyInstanceCollection
from .ports import (
    DEFAULT_WAIT_TIMEOUT,
    IInfrastructureAdapter,
    InstanceStatus,
    MonitorMetric,
    is_infrastructure_adapter,
)

__all__ = [
    # Contract
    "IInfrastructureAdapter",
    "InstanceStatus",
    "MonitorMetric",
    "DEFAULT_WAIT_TIMEOUT",
    "is_infrastructure_adapter",
    # Instances
    "InstanceAttributes",
    "ManagedInstance",
    "ReadOnlyInstanceCollection",
    # Adapters
    "InMemoryInfrastructureAdapter",
]
