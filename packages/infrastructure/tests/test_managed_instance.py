"""Tests for ManagedInstance and InstanceAttributes."""

from __future__ import annotations

from typing import Any

import pytest

from cloudgate_core import InvalidArgumentError
from cloudgate_infrastructure import (
    DEFAULT_WAIT_TIMEOUT,
    IInfrastructureAdapter,
    InstanceAttributes,
    ManagedInstance,
    MonitorMetric,
    is_infrastructure_adapter,
)


class RecordingAdapter:
    """Adapter stub that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> Any:
        self.calls.append((name, args))
        return True

    def status_instance(self, instance_id):
        self.calls.append(("status", (instance_id,)))
        return "running"

    def public_dns_instance(self, instance_id):
        self.calls.append(("public_dns", (instance_id,)))
        return f"{instance_id}.compute.internal"

    def reboot_instance(self, instance_id):
        return self._record("reboot", instance_id)

    def start_instance(self, instance_id):
        return self._record("start", instance_id)

    def stop_instance(self, instance_id):
        return self._record("stop", instance_id)

    def destroy_instance(self, instance_id):
        return self._record("destroy", instance_id)

    def monitor_instance(self, instance_id, metric, options=None):
        self._record("monitor", instance_id, metric, options)
        return {"series": [], "average": 0.0}

    def deploy_instance(self, instance_id, params, cmd):
        return self._record("deploy", instance_id, params, cmd)

    def wait_status_instance(self, instance_id, status, timeout=DEFAULT_WAIT_TIMEOUT):
        return self._record("wait_status", instance_id, status, timeout)


@pytest.fixture
def recorder() -> RecordingAdapter:
    return RecordingAdapter()


# -- Descriptor validation ---------------------------------------------------


def test_recording_adapter_satisfies_contract(recorder: RecordingAdapter):
    assert isinstance(recorder, IInfrastructureAdapter)


def test_camel_case_and_snake_case_keys():
    camel = InstanceAttributes.model_validate(
        {"id": "i-1", "imageId": "ami-1", "storageSize": 20}
    )
    snake = InstanceAttributes.model_validate(
        {"id": "i-1", "image_id": "ami-1", "storage_size": 20}
    )
    assert camel.image_id == snake.image_id == "ami-1"
    assert camel.storage_size == snake.storage_size == 20


def test_vendor_keys_are_preserved(recorder: RecordingAdapter):
    instance = ManagedInstance(recorder, {"id": "i-1", "instanceType": "m1.small"})
    assert instance.get_attribute("instanceType") == "m1.small"
    assert instance.get_attribute("missing", "fallback") == "fallback"


def test_get_attribute_by_name_or_alias(recorder: RecordingAdapter):
    instance = ManagedInstance(recorder, {"id": "i-1", "imageId": "ami-9"})
    assert instance.get_attribute("image_id") == "ami-9"
    assert instance.get_attribute("imageId") == "ami-9"


@pytest.mark.parametrize("bad", [{}, {"name": "no-id"}, "i-1", 42, None])
def test_invalid_descriptor(recorder: RecordingAdapter, bad):
    with pytest.raises(InvalidArgumentError) as exc_info:
        ManagedInstance(recorder, bad)
    assert exc_info.value.argument == "descriptor"


def test_invalid_adapter():
    with pytest.raises(InvalidArgumentError):
        ManagedInstance(object(), {"id": "i-1"})


class CatchAll:
    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        return lambda *args, **kwargs: None


def test_catch_all_object_is_not_an_adapter(recorder: RecordingAdapter):
    assert is_infrastructure_adapter(recorder) is True
    assert is_infrastructure_adapter(CatchAll()) is False
    assert is_infrastructure_adapter(None) is False
    with pytest.raises(InvalidArgumentError) as exc_info:
        ManagedInstance(CatchAll(), {"id": "i-1"})
    assert exc_info.value.argument == "adapter"


def test_accessors(recorder: RecordingAdapter):
    instance = ManagedInstance(
        recorder,
        {
            "id": "i-1",
            "name": "web-1",
            "imageId": "ami-1",
            "zone": "eu-west-1a",
            "cpu": 2,
            "ram": "4096",
            "storageSize": 20,
            "launchTime": "2012-01-01T00:00:00Z",
        },
    )
    assert instance.id == "i-1"
    assert instance.name == "web-1"
    assert instance.image_id == "ami-1"
    assert instance.zone == "eu-west-1a"
    assert instance.cpu == 2
    assert instance.ram == "4096"
    assert instance.storage_size == 20
    assert instance.launch_time is not None
    assert recorder.calls == []


# -- Delegation --------------------------------------------------------------


def test_status_asks_the_adapter(recorder: RecordingAdapter):
    instance = ManagedInstance(recorder, {"id": "i-1", "status": "pending"})
    assert instance.status() == "running"
    assert recorder.calls == [("status", ("i-1",))]


def test_public_dns_prefers_descriptor(recorder: RecordingAdapter):
    instance = ManagedInstance(recorder, {"id": "i-1", "publicDns": "a.example.com"})
    assert instance.public_dns() == "a.example.com"
    assert recorder.calls == []


def test_public_dns_falls_back_to_adapter(recorder: RecordingAdapter):
    instance = ManagedInstance(recorder, {"id": "i-1"})
    assert instance.public_dns() == "i-1.compute.internal"


def test_actions_pass_the_instance_id(recorder: RecordingAdapter):
    instance = ManagedInstance(recorder, {"id": 7})
    instance.reboot()
    instance.start()
    instance.stop()
    instance.destroy()
    instance.monitor(MonitorMetric.CPU_USAGE, {"period": 60})
    instance.deploy({"username": "root"}, "uptime")
    instance.wait_status("running", timeout=5)
    instance.wait_status("stopped")

    assert recorder.calls == [
        ("reboot", (7,)),
        ("start", (7,)),
        ("stop", (7,)),
        ("destroy", (7,)),
        ("monitor", (7, MonitorMetric.CPU_USAGE, {"period": 60})),
        ("deploy", (7, {"username": "root"}, "uptime")),
        ("wait_status", (7, "running", 5)),
        ("wait_status", (7, "stopped", DEFAULT_WAIT_TIMEOUT)),
    ]
