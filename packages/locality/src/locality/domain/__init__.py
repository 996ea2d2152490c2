"""Domain layer: Entities with zero external dependencies."""

from locality.domain.identity import (
    NODE_TIER,
    LocalityTier,
    NearestMatch,
    TieredIdentity,
)
from locality.domain.settings import LocalitySettings
from locality.domain.exceptions import (
    AddressResolutionError,
    DecodeError,
    LocalityConfigError,
    LocalityError,
)

__all__ = [
    "NODE_TIER",
    "LocalityTier",
    "NearestMatch",
    "TieredIdentity",
    "LocalitySettings",
    "LocalityError",
    "LocalityConfigError",
    "DecodeError",
    "AddressResolutionError",
]
