"""Bundle offer models"""

from pydantic import BaseModel, Field
from typing import Optional


class BundleOffer(BaseModel):
    """Named discount offer that requires a minimum number of items"""
    id: str
    name: str
    description: str = ""
    discount_percent: float = Field(ge=0, le=100)
    quantity_required: int = Field(default=1, ge=1)
    is_active: bool = True


class EligibleBundlesResponse(BaseModel):
    """Bundle offers available for a cart, best offer first"""
    item_count: int
    bundles: list[BundleOffer]
    recommended: Optional[BundleOffer] = None


class ApplyBundleRequest(BaseModel):
    """Request to apply a bundle offer to a cart"""
    bundle_id: str
