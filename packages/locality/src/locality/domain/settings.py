"""Locality settings domain entity."""

from __future__ import annotations

import math
from dataclasses import dataclass

from locality.domain.exceptions import LocalityConfigError

DEFAULT_RESOLUTION_TIMEOUT_SECONDS = 1.0


@dataclass(frozen=True)
class LocalitySettings:
    """Locality comparison settings.

    Value object threaded explicitly into tier matching instead of being read
    from process-wide state.

    Attributes:
        compare_node_ip: When True, values of the 'node' tier are compared by
                         resolved network address, falling back to string
                         comparison if resolution fails. Defaults to False.
        resolution_timeout_seconds: Upper bound for one host resolution.
                                    Must be finite and > 0. Defaults to 1.0.
    """

    compare_node_ip: bool = False
    resolution_timeout_seconds: float = DEFAULT_RESOLUTION_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate locality settings."""
        self._validate_compare_node_ip()
        self._validate_resolution_timeout()

    def _validate_compare_node_ip(self) -> None:
        """Validate compare_node_ip is a real bool."""
        if not isinstance(self.compare_node_ip, bool):
            raise LocalityConfigError(
                f"compare_node_ip must be a bool, got: {self.compare_node_ip!r}"
            )

    def _validate_resolution_timeout(self) -> None:
        """Validate resolution_timeout_seconds is a finite positive number."""
        timeout = self.resolution_timeout_seconds
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise LocalityConfigError(
                f"resolution_timeout_seconds must be a number, got: {timeout!r}"
            )

        if not math.isfinite(timeout):
            raise LocalityConfigError(
                f"resolution_timeout_seconds must be finite, got: {timeout}"
            )

        if timeout <= 0:
            raise LocalityConfigError(
                f"resolution_timeout_seconds must be > 0, got: {timeout}"
            )
