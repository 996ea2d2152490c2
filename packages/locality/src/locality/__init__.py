"""locality-py: Tiered locality identities and nearest-node selection."""

__version__ = "0.1.0"

from locality.domain.identity import LocalityTier, NearestMatch, TieredIdentity
from locality.domain.settings import LocalitySettings
from locality.domain.exceptions import DecodeError, LocalityConfigError
from locality.usecases.tier_matcher import TierMatcher
from locality.usecases.nearest_selector import NearestSelector

__all__ = [
    "LocalityTier",
    "NearestMatch",
    "TieredIdentity",
    "LocalitySettings",
    "DecodeError",
    "LocalityConfigError",
    "TierMatcher",
    "NearestSelector",
]
