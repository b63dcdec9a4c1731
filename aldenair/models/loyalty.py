"""Loyalty program models"""

from pydantic import BaseModel
from typing import Optional


class TierView(BaseModel):
    tier: str
    name: str
    min_points: int
    max_points: Optional[int] = None
    color: str


class LoyaltyProgressResponse(BaseModel):
    """Where a customer stands in the tier ladder"""
    lifetime_points: int
    current: TierView
    next: Optional[TierView] = None
    progress: float
