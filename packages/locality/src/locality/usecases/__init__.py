"""Use cases: Application logic layer."""

from locality.usecases.tier_matcher import TierMatcher
from locality.usecases.nearest_selector import NearestSelector
from locality.usecases.config_parser import ConfigParser

__all__ = [
    "TierMatcher",
    "NearestSelector",
    "ConfigParser",
]
