"""Managed instance: a raw backend descriptor paired with its adapter handle."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cloudgate_core.primitives.exceptions import InvalidArgumentError

from .ports import DEFAULT_WAIT_TIMEOUT, is_infrastructure_adapter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .ports import IInfrastructureAdapter, InstanceStatus, MonitorMetric


class InstanceAttributes(BaseModel):
    """Validated view of a raw instance descriptor.

    Only ``id`` is required.  Backends use both ``snake_case`` and
    ``camelCase`` keys, so aliased fields accept either; vendor-specific
    keys are preserved as extras.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str | int
    name: str | None = None
    status: str | None = None
    image_id: str | None = Field(default=None, alias="imageId")
    zone: str | None = None
    public_dns: str | None = Field(default=None, alias="publicDns")
    cpu: int | float | str | None = None
    ram: int | float | str | None = None
    storage_size: int | float | str | None = Field(default=None, alias="storageSize")
    launch_time: datetime | str | None = Field(default=None, alias="launchTime")


class ManagedInstance:
    """
    One infrastructure instance, acted on through a borrowed adapter.

    Read accessors come from the descriptor captured at construction;
    ``status()``, ``public_dns()`` and the lifecycle actions ask the
    adapter at call time.
    """

    __slots__ = ("_adapter", "_attributes")

    def __init__(
        self,
        adapter: IInfrastructureAdapter,
        descriptor: Mapping[str, Any] | InstanceAttributes,
    ) -> None:
        if not is_infrastructure_adapter(adapter):
            raise InvalidArgumentError(
                "You must pass an IInfrastructureAdapter", argument="adapter"
            )
        try:
            attributes = InstanceAttributes.model_validate(descriptor)
        except ValidationError as exc:
            raise InvalidArgumentError(
                f"Invalid instance descriptor: {exc}",
                argument="descriptor",
                value=descriptor,
            ) from exc
        self._adapter = adapter
        self._attributes = attributes

    # -- descriptor accessors ------------------------------------------------

    @property
    def adapter(self) -> IInfrastructureAdapter:
        return self._adapter

    @property
    def attributes(self) -> InstanceAttributes:
        return self._attributes

    @property
    def id(self) -> str | int:
        return self._attributes.id

    @property
    def name(self) -> str | None:
        return self._attributes.name

    @property
    def image_id(self) -> str | None:
        return self._attributes.image_id

    @property
    def zone(self) -> str | None:
        return self._attributes.zone

    @property
    def cpu(self) -> int | float | str | None:
        return self._attributes.cpu

    @property
    def ram(self) -> int | float | str | None:
        return self._attributes.ram

    @property
    def storage_size(self) -> int | float | str | None:
        return self._attributes.storage_size

    @property
    def launch_time(self) -> datetime | str | None:
        return self._attributes.launch_time

    def get_attribute(self, key: str, default: Any = None) -> Any:
        """Look up a descriptor value by field name, backend alias or extra key."""
        values = self._attributes.model_dump()
        if key in values:
            return values[key]
        return self._attributes.model_dump(by_alias=True).get(key, default)

    # -- adapter-backed operations -------------------------------------------

    def status(self) -> str:
        """Current status as reported by the backend."""
        return self._adapter.status_instance(self.id)

    def wait_status(
        self,
        status: InstanceStatus | str,
        timeout: float = DEFAULT_WAIT_TIMEOUT,
    ) -> bool:
        return self._adapter.wait_status_instance(self.id, status, timeout=timeout)

    def public_dns(self) -> str | None:
        if self._attributes.public_dns:
            return self._attributes.public_dns
        return self._adapter.public_dns_instance(self.id)

    def reboot(self) -> bool:
        return self._adapter.reboot_instance(self.id)

    def start(self) -> bool:
        return self._adapter.start_instance(self.id)

    def stop(self) -> bool:
        return self._adapter.stop_instance(self.id)

    def destroy(self) -> bool:
        return self._adapter.destroy_instance(self.id)

    def monitor(
        self,
        metric: MonitorMetric | str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self._adapter.monitor_instance(self.id, metric, options)

    def deploy(self, params: Mapping[str, Any], cmd: str) -> Any:
        return self._adapter.deploy_instance(self.id, params, cmd)

    def __repr__(self) -> str:
        return f"ManagedInstance(id={self.id!r}, name={self.name!r})"
