"""Tier matcher use case.

Compares locality tiers under the configured comparison mode. With
compare_node_ip enabled, 'node' tier values that name the same host in
different ways (e.g. 'localhost' and '127.0.0.1') are considered equal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from locality.adapters.ports import AddressResolverPort, SocketAddressResolver
from locality.domain.exceptions import AddressResolutionError
from locality.domain.identity import NODE_TIER, LocalityTier
from locality.domain.settings import LocalitySettings

if TYPE_CHECKING:
    from locality.adapters.metrics_port import MetricsPort
    from locality.adapters.ports import LoggingPort


class TierMatcher:
    """Matches two tiers, optionally comparing node tiers by address.

    Resolution is best-effort: if either value cannot be resolved the
    tiers are compared as plain strings, so matches() never raises.

    Instances are callable and can be passed to TieredIdentity.nearest()
    as the tier comparison strategy.

    Dependencies:
        - AddressResolverPort: Only consulted for 'node' tiers when
          compare_node_ip is enabled
    """

    def __init__(
        self,
        settings: LocalitySettings | None = None,
        resolver: AddressResolverPort | None = None,
        logger: LoggingPort | None = None,
        metrics: MetricsPort | None = None,
    ) -> None:
        """Initialize tier matcher.

        Args:
            settings: Comparison settings. Defaults to string comparison.
            resolver: Address resolver. Defaults to a SocketAddressResolver
                      bounded by settings.resolution_timeout_seconds, created
                      only when address comparison is enabled.
            logger: Optional logging port for resolution fallbacks.
            metrics: Optional metrics port for resolution failures.
        """
        self._settings = settings if settings is not None else LocalitySettings()
        self._owned_resolver: SocketAddressResolver | None = None
        if resolver is None and self._settings.compare_node_ip:
            self._owned_resolver = SocketAddressResolver(
                timeout_seconds=self._settings.resolution_timeout_seconds
            )
            resolver = self._owned_resolver
        self._resolver = resolver
        self._logger = logger
        self._metrics = metrics

    @property
    def settings(self) -> LocalitySettings:
        return self._settings

    @property
    def resolver(self) -> AddressResolverPort | None:
        """Resolver consulted for node tiers, or None in string mode."""
        return self._resolver

    def close(self) -> None:
        """Release the default resolver's worker pool.

        A resolver passed in by the caller is left open; its owner closes it.
        """
        if self._owned_resolver is not None:
            self._owned_resolver.close()

    def __enter__(self) -> TierMatcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def matches(self, tier: LocalityTier, other: LocalityTier) -> bool:
        """Check whether two tiers denote the same position.

        Args:
            tier: Reference tier.
            other: Candidate tier.

        Returns:
            False if the tier names differ or either value is empty.
            For 'node' tiers with compare_node_ip enabled, whether both
            values resolve to the same address (string equality if either
            fails to resolve). Equal values match without resolving.
            Otherwise exact string equality.
        """
        if tier.matches(other):
            return True

        # Equal strings already matched above, so only distinct names resolve
        if (
            self._settings.compare_node_ip
            and tier.tier_name == other.tier_name == NODE_TIER
            and tier.value
            and other.value
        ):
            return self._matches_by_address(tier.value, other.value)

        return False

    __call__ = matches

    def _matches_by_address(self, value: str, other_value: str) -> bool:
        if self._resolver is None:
            return False

        try:
            return self._resolver.resolve(value) == self._resolver.resolve(other_value)
        except AddressResolutionError as e:
            if self._metrics is not None:
                self._metrics.record_resolution_failure()
            if self._logger is not None:
                self._logger.debug(
                    f"Could not resolve node tier {e.host!r}, comparing "
                    f"{value!r} and {other_value!r} as strings"
                )
            return False
