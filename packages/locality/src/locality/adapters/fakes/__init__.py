"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from locality.adapters.fakes.fake_address_resolver import FakeAddressResolver
from locality.adapters.fakes.fake_metrics import FakeMetricsAdapter, MetricCall

__all__ = [
    "FakeAddressResolver",
    "FakeMetricsAdapter",
    "MetricCall",
]
