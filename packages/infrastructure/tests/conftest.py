"""Shared fixtures for infrastructure tests."""

from __future__ import annotations

import pytest

from cloudgate_infrastructure import InMemoryInfrastructureAdapter


@pytest.fixture
def descriptors() -> list[dict]:
    """Three raw descriptors, shaped the way compute APIs return them."""
    return [
        {
            "id": "i-1",
            "name": "web-1",
            "status": "running",
            "imageId": "ami-1",
            "zone": "eu-west-1a",
            "publicDns": "web-1.example.com",
        },
        {"id": "i-2", "name": "web-2", "status": "stopped", "imageId": "ami-1"},
        {"id": "i-3", "name": "db-1", "status": "running", "zone": "eu-west-1b"},
    ]


@pytest.fixture
def adapter(descriptors: list[dict]) -> InMemoryInfrastructureAdapter:
    return InMemoryInfrastructureAdapter(descriptors)
