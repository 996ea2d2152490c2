"""NearestSelector use case for locality-aware placement.

Picks, from a list of candidate nodes, the one topologically closest to a
reference node so reads, writes and placement can stay within the same
node, rack or zone where possible.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from locality.adapters.metrics_port import FALLBACK_OUTCOME
from locality.domain.identity import NearestMatch, TieredIdentity
from locality.usecases.tier_matcher import TierMatcher

if TYPE_CHECKING:
    from locality.adapters.metrics_port import MetricsPort
    from locality.adapters.ports import LoggingPort


class NearestSelector:
    """Selects the nearest candidate identity for a reference identity.

    Selection itself is TieredIdentity.nearest() with the matcher as the
    comparison strategy; this use case adds logging and metrics around it.

    Dependencies:
        - TierMatcher: Decides whether two tiers match

    Thread safety:
        Holds no mutable state. Safe to call concurrently over shared
        candidate lists.
    """

    def __init__(
        self,
        matcher: TierMatcher | None = None,
        logger: LoggingPort | None = None,
        metrics: MetricsPort | None = None,
    ) -> None:
        """Initialize the nearest selector.

        Args:
            matcher: Tier matcher. Defaults to plain string matching.
            logger: Optional logging port for selection decisions.
            metrics: Optional port for selection metrics.
        """
        self.matcher = matcher if matcher is not None else TierMatcher()
        self._logger = logger
        self._metrics = metrics

    def nearest(
        self,
        reference: TieredIdentity,
        candidates: Sequence[TieredIdentity],
    ) -> NearestMatch | None:
        """Select the candidate nearest to reference.

        Args:
            reference: Identity of the node making the decision.
            candidates: Identities to choose from, in preference order.

        Returns:
            NearestMatch for the selected candidate, or None if there are
            no candidates.
        """
        if self._logger is not None:
            self._warn_misaligned(reference, candidates)

        result = reference.nearest(candidates, self.matcher)
        if result is None:
            if self._logger is not None:
                self._logger.debug(f"No candidates to select from for {reference}")
            return None

        outcome = FALLBACK_OUTCOME if result.tier is None else result.tier.tier_name
        if self._metrics is not None:
            self._metrics.record_selection(outcome)
        if self._logger is not None:
            self._logger.debug(
                f"Selected {result.identity} at index {result.index} "
                f"for {reference} ({outcome})"
            )
        return result

    def nearest_identity(
        self,
        reference: TieredIdentity,
        candidates: Sequence[TieredIdentity],
    ) -> TieredIdentity | None:
        """Select the candidate nearest to reference and return it directly."""
        result = self.nearest(reference, candidates)
        return None if result is None else result.identity

    def _warn_misaligned(
        self, reference: TieredIdentity, candidates: Sequence[TieredIdentity]
    ) -> None:
        expected = reference.tier_names()
        for index, candidate in enumerate(candidates):
            names = candidate.tier_names()
            if names != expected:
                self._logger.warning(  # type: ignore[union-attr]
                    f"Candidate {index} tiers {list(names)} are not aligned "
                    f"with reference tiers {list(expected)}"
                )
