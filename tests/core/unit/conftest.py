"""Shared fixtures for locality core unit tests."""

from __future__ import annotations

import pytest

from locality.adapters.fakes import FakeAddressResolver, FakeMetricsAdapter
from locality.domain.identity import TieredIdentity
from tests.core.unit.builders import identity
from tests.core.unit.fakes import FakeLoggingAdapter


@pytest.fixture
def fake_resolver() -> FakeAddressResolver:
    """Resolver knowing localhost and two named hosts."""
    return FakeAddressResolver(
        {
            "localhost": "127.0.0.1",
            "127.0.0.1": "127.0.0.1",
            "worker-1.example": "10.0.0.1",
            "10.0.0.1": "10.0.0.1",
            "worker-2.example": "10.0.0.2",
        }
    )


@pytest.fixture
def fake_metrics() -> FakeMetricsAdapter:
    return FakeMetricsAdapter()


@pytest.fixture
def fake_logger() -> FakeLoggingAdapter:
    return FakeLoggingAdapter()


@pytest.fixture
def rack_candidates() -> list[TieredIdentity]:
    """Candidates A(rack1), B(rack2), C(rack2) in that order."""
    return [
        identity("node=A,rack=rack1"),
        identity("node=B,rack=rack2"),
        identity("node=C,rack=rack2"),
    ]
