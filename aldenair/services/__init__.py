# Domain services

from .iban import is_valid_iban, format_iban
from .loyalty import LoyaltyTier, TierInfo, TierProgress, TIERS, tier_for_points, tier_progress, points_for_total

__all__ = [
    "is_valid_iban",
    "format_iban",
    "LoyaltyTier",
    "TierInfo",
    "TierProgress",
    "TIERS",
    "tier_for_points",
    "tier_progress",
    "points_for_total",
]
