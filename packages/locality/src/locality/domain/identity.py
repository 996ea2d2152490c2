"""Locality domain value objects.

A TieredIdentity describes where a node sits in the cluster topology as an
ordered list of LocalityTier values, most specific first (e.g. node, then
rack, then zone). Nearest selection walks the tiers in that order and returns
the first candidate sharing a tier value with the reference identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence

from locality.domain.exceptions import LocalityConfigError

# Tier whose values name a host and may be compared by resolved address.
NODE_TIER = "node"


@dataclass(frozen=True)
class LocalityTier:
    """One level of a node's locality.

    Value object pairing a topology level with the node's position at that
    level. Immutable and hashable.

    Attributes:
        tier_name: Topology level (e.g. 'node', 'rack'). Must be non-empty
                   and non-whitespace.
        value: Position at that level. Empty means unknown and never matches.
    """

    tier_name: str
    value: str = ""

    def __post_init__(self) -> None:
        """Validate tier."""
        self._validate_tier_name()
        self._validate_value()

    def _validate_tier_name(self) -> None:
        """Validate tier_name is a non-empty, non-whitespace string."""
        if not isinstance(self.tier_name, str):
            raise LocalityConfigError(
                f"tier_name must be a string, got: {type(self.tier_name).__name__}"
            )

        if not self.tier_name:
            raise LocalityConfigError("tier_name cannot be empty")

        if not self.tier_name.strip():
            raise LocalityConfigError("tier_name cannot be whitespace-only")

    def _validate_value(self) -> None:
        if not isinstance(self.value, str):
            raise LocalityConfigError(
                f"value must be a string, got: {type(self.value).__name__}"
            )

    def matches(self, other: LocalityTier) -> bool:
        """Check whether two tiers denote the same position by string equality.

        Tiers of different levels never match, and an unset value matches
        nothing, not even another unset value.

        Args:
            other: Tier to compare against.

        Returns:
            True if both tiers have the same name and the same non-empty value.
        """
        if self.tier_name != other.tier_name:
            return False

        if not self.value or not other.value:
            return False

        return self.value == other.value

    def __str__(self) -> str:
        return f"{self.tier_name}={self.value}"


# Comparison strategy used by nearest(); LocalityTier.matches is the default.
TierMatch = Callable[[LocalityTier, LocalityTier], bool]


@dataclass(frozen=True)
class NearestMatch:
    """Result of a nearest-candidate lookup.

    Attributes:
        identity: The selected candidate (the object from the candidate list).
        index: Position of the candidate in the list it was selected from.
        tier: The reference tier that matched, or None when no tier matched
              and the first candidate was chosen as a fallback.
    """

    identity: TieredIdentity
    index: int
    tier: LocalityTier | None = None

    @property
    def is_fallback(self) -> bool:
        """True when the selection carried no locality signal."""
        return self.tier is None


@dataclass(frozen=True)
class TieredIdentity:
    """Ordered locality path of one node, most specific tier first.

    Immutable and hashable; two identities are equal when their tiers are
    equal element-wise. Accepts any iterable of tiers and stores a tuple.

    Attributes:
        tiers: Tiers ordered from closest to farthest.

    Invariants:
        - identities compared in one nearest() call share the same tier
          names at each position (not enforced; misaligned positions just
          do not match)
    """

    tiers: tuple[LocalityTier, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalise tiers to a tuple and validate element types."""
        tiers = tuple(self.tiers)
        for tier in tiers:
            if not isinstance(tier, LocalityTier):
                raise LocalityConfigError(
                    f"tiers must contain LocalityTier values, got: {type(tier).__name__}"
                )
        object.__setattr__(self, "tiers", tiers)

    @classmethod
    def of(cls, *pairs: tuple[str, str]) -> TieredIdentity:
        """Build an identity from (tier_name, value) pairs.

        Example:
            >>> TieredIdentity.of(("node", "A"), ("rack", "r1"))
            TieredIdentity(node=A, rack=r1)
        """
        return cls(tuple(LocalityTier(name, value) for name, value in pairs))

    def get_tier(self, index: int) -> LocalityTier:
        """Return the tier at the given position.

        Raises:
            IndexError: If the identity has no tier at that position.
        """
        return self.tiers[index]

    @property
    def top_tier(self) -> LocalityTier | None:
        """The most specific tier, or None for an empty identity."""
        return self.tiers[0] if self.tiers else None

    def tier_names(self) -> tuple[str, ...]:
        return tuple(tier.tier_name for tier in self.tiers)

    def nearest(
        self,
        candidates: Sequence[TieredIdentity],
        matcher: TierMatch | None = None,
    ) -> NearestMatch | None:
        """Find the candidate topologically closest to this identity.

        Tier positions are tried from most to least specific; within a
        position candidates are scanned in list order, so a more specific
        match always wins and the first listed candidate wins ties. When no
        tier matches at all the first candidate is returned, so a choice can
        always be made from a non-empty list.

        Args:
            candidates: Identities to choose from. May contain this identity.
            matcher: Tier comparison strategy. Defaults to plain string
                     matching (LocalityTier.matches).

        Returns:
            NearestMatch for the selected candidate, or None if candidates
            is empty.
        """
        if not candidates:
            return None

        match = matcher if matcher is not None else LocalityTier.matches

        for position, tier in enumerate(self.tiers):
            for index, candidate in enumerate(candidates):
                if position >= len(candidate.tiers):
                    continue
                if match(tier, candidate.tiers[position]):
                    return NearestMatch(identity=candidate, index=index, tier=tier)

        return NearestMatch(identity=candidates[0], index=0, tier=None)

    def __len__(self) -> int:
        return len(self.tiers)

    def __iter__(self) -> Iterator[LocalityTier]:
        return iter(self.tiers)

    def __str__(self) -> str:
        return f"TieredIdentity({', '.join(str(tier) for tier in self.tiers)})"

    __repr__ = __str__
