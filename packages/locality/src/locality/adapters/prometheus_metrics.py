"""Prometheus metrics adapter for locality selection.

Implements MetricsPort using prometheus-client library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Counter


class PrometheusMetricsAdapter:
    """Prometheus implementation of MetricsPort.

    Creates and manages Prometheus counters for nearest selection and
    address resolution. All metric names use a configurable prefix
    (default 'locality') for namespace clarity.

    This adapter requires prometheus-client to be installed:
        pip install locality-py[metrics]

    Example:
        >>> adapter = PrometheusMetricsAdapter(prefix="myapp_locality")
        >>> adapter.record_selection("rack")
        >>> adapter.record_resolution_failure()

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "locality",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Initialize Prometheus counters.

        Args:
            prefix: Metric name prefix. Defaults to "locality".
            registry: Registry to register counters in. Defaults to the
                      global prometheus-client registry.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, Counter

        target = registry if registry is not None else REGISTRY

        self._selections: Counter = Counter(
            f"{prefix}_nearest_selections",
            "Nearest-candidate selections by deciding tier or 'fallback'",
            labelnames=("outcome",),
            registry=target,
        )
        self._resolution_failures: Counter = Counter(
            f"{prefix}_address_resolution_failures",
            "Node-tier address resolutions that fell back to string comparison",
            registry=target,
        )

    def record_selection(self, outcome: str) -> None:
        """Increment the selection counter for outcome."""
        self._selections.labels(outcome=outcome).inc()

    def record_resolution_failure(self) -> None:
        """Increment the resolution failure counter."""
        self._resolution_failures.inc()
