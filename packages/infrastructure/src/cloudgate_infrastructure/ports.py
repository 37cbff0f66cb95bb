"""IInfrastructureAdapter — the backend primitives a managed instance acts through."""

from __future__ import annotations

import inspect
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_WAIT_TIMEOUT = 120.0


class InstanceStatus(str, Enum):
    """Lifecycle states reported by infrastructure backends."""

    RUNNING = "running"
    STOPPED = "stopped"
    SHUTTING_DOWN = "shutting-down"
    REBOOTING = "rebooting"
    TERMINATED = "terminated"
    PENDING = "pending"
    REBUILD = "rebuild"


class MonitorMetric(str, Enum):
    """Metrics an adapter can be asked to sample for an instance."""

    CPU_USAGE = "CpuUsage"
    RAM_USAGE = "RamUsage"
    NETWORK_IN = "NetworkIn"
    NETWORK_OUT = "NetworkOut"
    DISK_USAGE = "DiskUsage"
    DISK_WRITE = "DiskWrite"
    DISK_READ = "DiskRead"


@runtime_checkable
class IInfrastructureAdapter(Protocol):
    """
    Handle to one infrastructure backend (a cloud compute API, a local
    hypervisor, an in-memory fake).

    Every operation is keyed by the backend's instance id.  Transport,
    authentication and response parsing live entirely in the
    implementation.
    """

    def status_instance(self, instance_id: str | int) -> str: ...

    def public_dns_instance(self, instance_id: str | int) -> str | None: ...

    def reboot_instance(self, instance_id: str | int) -> bool: ...

    def start_instance(self, instance_id: str | int) -> bool: ...

    def stop_instance(self, instance_id: str | int) -> bool: ...

    def destroy_instance(self, instance_id: str | int) -> bool: ...

    def monitor_instance(
        self,
        instance_id: str | int,
        metric: MonitorMetric | str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return ``{"series": [...], "average": float}`` for ``metric``."""
        ...

    def deploy_instance(
        self,
        instance_id: str | int,
        params: Mapping[str, Any],
        cmd: str,
    ) -> Any:
        """Run ``cmd`` on the instance; ``params`` carries connection details."""
        ...

    def wait_status_instance(
        self,
        instance_id: str | int,
        status: InstanceStatus | str,
        timeout: float = DEFAULT_WAIT_TIMEOUT,
    ) -> bool: ...


_ADAPTER_PRIMITIVES = (
    "status_instance",
    "public_dns_instance",
    "reboot_instance",
    "start_instance",
    "stop_instance",
    "destroy_instance",
    "monitor_instance",
    "deploy_instance",
    "wait_status_instance",
)


def is_infrastructure_adapter(candidate: object) -> bool:
    """Whether ``candidate``'s class really defines every adapter primitive.

    Unlike a plain protocol ``isinstance`` check, a catch-all
    ``__getattr__`` does not count as defining a primitive.
    """
    if candidate is None:
        return False
    cls = type(candidate)
    return all(
        callable(inspect.getattr_static(cls, name, None))
        for name in _ADAPTER_PRIMITIVES
    )
