"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Outcome label used when no tier matched and the first candidate was taken.
FALLBACK_OUTCOME = "fallback"


@runtime_checkable
class MetricsPort(Protocol):
    """Port interface for metrics collection.

    Implementations handle metrics recording to various backends
    (Prometheus, StatsD, etc.). Abstracts the metrics mechanism from
    use cases that need to emit metrics.

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - record_* methods increment counters
        - Thread safety is implementation-defined
        - Implementations may no-op if metrics are disabled
    """

    def record_selection(self, outcome: str) -> None:
        """Count one nearest-candidate selection.

        Args:
            outcome: Name of the tier that decided the selection, or
                     "fallback" when no tier matched.
        """
        ...

    def record_resolution_failure(self) -> None:
        """Count one failed address resolution during tier matching."""
        ...


class NoOpMetricsAdapter:
    """No-operation metrics adapter for when metrics are disabled.

    All methods are no-ops. This allows use cases to unconditionally
    call metrics methods without checking if metrics are enabled.
    """

    def record_selection(self, outcome: str) -> None:
        """No-op."""
        pass

    def record_resolution_failure(self) -> None:
        """No-op."""
        pass
