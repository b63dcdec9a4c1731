"""Loyalty tiers and points"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LoyaltyTier(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


@dataclass(frozen=True)
class TierInfo:
    tier: LoyaltyTier
    name: str
    min_points: int
    max_points: Optional[int]
    color: str


TIERS: tuple[TierInfo, ...] = (
    TierInfo(LoyaltyTier.BRONZE, "Bronze", 0, 499, "#CD7F32"),
    TierInfo(LoyaltyTier.SILVER, "Silber", 500, 1499, "#C0C0C0"),
    TierInfo(LoyaltyTier.GOLD, "Gold", 1500, 4999, "#FFD700"),
    TierInfo(LoyaltyTier.PLATINUM, "Platin", 5000, None, "#E5E4E2"),
)


@dataclass(frozen=True)
class TierProgress:
    current: TierInfo
    next: Optional[TierInfo]
    progress: float


def tier_for_points(lifetime_points: int) -> TierInfo:
    """Highest tier whose threshold the points reach"""
    if lifetime_points < 0:
        raise ValueError("lifetime_points must not be negative")
    return next(t for t in reversed(TIERS) if lifetime_points >= t.min_points)


def tier_progress(lifetime_points: int) -> TierProgress:
    """Current tier, next tier and percent of the way there"""
    current = tier_for_points(lifetime_points)
    upcoming = next((t for t in TIERS if t.min_points > lifetime_points), None)
    if upcoming is None:
        return TierProgress(current=current, next=None, progress=100.0)

    span = upcoming.min_points - current.min_points
    progress = (lifetime_points - current.min_points) / span * 100
    return TierProgress(current=current, next=upcoming, progress=round(progress, 2))


def points_for_total(total_minor_units: int, points_per_euro: int = 1) -> int:
    """Points earned for an order: whole euros times the earning rate"""
    if total_minor_units <= 0:
        return 0
    return (total_minor_units // 100) * points_per_euro
