"""InMemoryInfrastructureAdapter — dict-backed fake for unit tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from cloudgate_core.primitives.exceptions import (
    InstanceNotFoundError,
    InvalidArgumentError,
)

from ..instance import InstanceAttributes
from ..instance_list import ReadOnlyInstanceCollection
from ..ports import DEFAULT_WAIT_TIMEOUT, InstanceStatus, MonitorMetric

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger("cloudgate.infrastructure.memory")


class InMemoryInfrastructureAdapter:
    """In-memory implementation of ``IInfrastructureAdapter``.

    Keeps instance descriptors keyed by id, applies lifecycle transitions
    immediately, and serves monitor samples recorded with
    ``record_samples()``.
    """

    def __init__(
        self, descriptors: Iterable[Mapping[str, Any] | InstanceAttributes] = ()
    ) -> None:
        self._instances: dict[str | int, InstanceAttributes] = {}
        self._status: dict[str | int, str] = {}
        self._samples: dict[tuple[str | int, str], list[float]] = {}
        self.deployments: list[tuple[str | int, str, dict[str, Any]]] = []
        for descriptor in descriptors:
            self.register(descriptor)

    # -- test setup ----------------------------------------------------------

    def register(
        self, descriptor: Mapping[str, Any] | InstanceAttributes
    ) -> str | int:
        """Add an instance; status defaults to ``running``."""
        try:
            attributes = InstanceAttributes.model_validate(descriptor)
        except ValidationError as exc:
            raise InvalidArgumentError(
                f"Invalid instance descriptor: {exc}", argument="descriptor"
            ) from exc
        self._instances[attributes.id] = attributes
        self._status[attributes.id] = attributes.status or InstanceStatus.RUNNING.value
        return attributes.id

    def record_samples(
        self,
        instance_id: str | int,
        metric: MonitorMetric | str,
        samples: Iterable[float],
    ) -> None:
        self._require(instance_id)
        key = (instance_id, _metric_name(metric))
        self._samples.setdefault(key, []).extend(samples)

    def list_instances(self) -> ReadOnlyInstanceCollection:
        """Return every registered instance, in registration order."""
        descriptors = [
            attributes.model_copy(update={"status": self._status[instance_id]})
            for instance_id, attributes in self._instances.items()
        ]
        return ReadOnlyInstanceCollection(self, descriptors)

    # -- IInfrastructureAdapter ----------------------------------------------

    def status_instance(self, instance_id: str | int) -> str:
        self._require(instance_id)
        return self._status[instance_id]

    def public_dns_instance(self, instance_id: str | int) -> str | None:
        return self._require(instance_id).public_dns

    def reboot_instance(self, instance_id: str | int) -> bool:
        return self._transition(instance_id, InstanceStatus.RUNNING)

    def start_instance(self, instance_id: str | int) -> bool:
        return self._transition(instance_id, InstanceStatus.RUNNING)

    def stop_instance(self, instance_id: str | int) -> bool:
        return self._transition(instance_id, InstanceStatus.STOPPED)

    def destroy_instance(self, instance_id: str | int) -> bool:
        return self._transition(instance_id, InstanceStatus.TERMINATED)

    def monitor_instance(
        self,
        instance_id: str | int,
        metric: MonitorMetric | str,
        options: Mapping[str, Any] | None = None,  # noqa: ARG002
    ) -> dict[str, Any]:
        self._require(instance_id)
        series = list(self._samples.get((instance_id, _metric_name(metric)), []))
        average = sum(series) / len(series) if series else 0.0
        return {"series": series, "average": average}

    def deploy_instance(
        self,
        instance_id: str | int,
        params: Mapping[str, Any],
        cmd: str,
    ) -> Any:
        self._require(instance_id)
        self.deployments.append((instance_id, cmd, dict(params)))
        return ""

    def wait_status_instance(
        self,
        instance_id: str | int,
        status: InstanceStatus | str,
        timeout: float = DEFAULT_WAIT_TIMEOUT,  # noqa: ARG002
    ) -> bool:
        # Transitions are immediate, so there is never anything to wait for.
        self._require(instance_id)
        wanted = status.value if isinstance(status, InstanceStatus) else status
        return self._status[instance_id] == wanted

    # -- internals -----------------------------------------------------------

    def _require(self, instance_id: str | int) -> InstanceAttributes:
        try:
            return self._instances[instance_id]
        except KeyError:
            raise InstanceNotFoundError(instance_id) from None

    def _transition(self, instance_id: str | int, status: InstanceStatus) -> bool:
        self._require(instance_id)
        if self._status[instance_id] == InstanceStatus.TERMINATED.value:
            return False
        logger.debug(
            "Instance %r: %s -> %s", instance_id, self._status[instance_id], status.value
        )
        self._status[instance_id] = status.value
        return True


def _metric_name(metric: MonitorMetric | str) -> str:
    try:
        return MonitorMetric(metric).value
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown monitor metric: {metric!r}", argument="metric", value=metric
        ) from None
