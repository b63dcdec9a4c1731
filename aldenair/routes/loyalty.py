"""Loyalty program routes"""

from fastapi import APIRouter, Query

from ..models.loyalty import LoyaltyProgressResponse, TierView
from ..services.loyalty import TIERS, TierInfo, tier_progress

router = APIRouter(prefix="/api/loyalty", tags=["Loyalty"])


def _tier_view(tier: TierInfo) -> TierView:
    return TierView(
        tier=tier.tier.value,
        name=tier.name,
        min_points=tier.min_points,
        max_points=tier.max_points,
        color=tier.color,
    )


@router.get("/tiers", response_model=list[TierView])
async def list_tiers():
    """List loyalty tiers, lowest first"""
    return [_tier_view(t) for t in TIERS]


@router.get("/progress", response_model=LoyaltyProgressResponse)
async def get_progress(lifetime_points: int = Query(..., ge=0)):
    """Tier standing for a lifetime points balance"""
    progress = tier_progress(lifetime_points)
    return LoyaltyProgressResponse(
        lifetime_points=lifetime_points,
        current=_tier_view(progress.current),
        next=_tier_view(progress.next) if progress.next else None,
        progress=progress.progress,
    )
