"""Fake metrics adapter for testing.

Provides a test double for MetricsPort that records all metric updates
for assertion in tests.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        value: Label value, or None for unlabelled counters.
    """

    metric_name: str
    value: str | None = None


class FakeMetricsAdapter:
    """Fake implementation of MetricsPort for testing.

    Records all metric updates for later assertion. Provides methods
    to inspect counters and call history.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.record_selection("rack")
        >>> fake.selections["rack"]
        1
        >>> fake.calls
        [MetricCall(metric_name='nearest_selection', value='rack')]
    """

    def __init__(self) -> None:
        """Initialize with no recorded state."""
        self._selections: Counter[str] = Counter()
        self._resolution_failures = 0
        self._calls: list[MetricCall] = []

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all metric update calls in order of invocation."""
        return list(self._calls)

    @property
    def selections(self) -> Counter[str]:
        """Return a copy of selection counts by outcome."""
        return Counter(self._selections)

    @property
    def resolution_failures(self) -> int:
        return self._resolution_failures

    def record_selection(self, outcome: str) -> None:
        """Record a selection for outcome."""
        self._selections[outcome] += 1
        self._calls.append(MetricCall("nearest_selection", outcome))

    def record_resolution_failure(self) -> None:
        """Record a failed address resolution."""
        self._resolution_failures += 1
        self._calls.append(MetricCall("address_resolution_failure"))

    def reset(self) -> None:
        """Reset all counters and calls."""
        self._selections.clear()
        self._resolution_failures = 0
        self._calls.clear()
