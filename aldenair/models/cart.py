"""Cart models exposed over HTTP and written to snapshots"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class LineItemView(BaseModel):
    """Line item in a shopping cart"""
    item_id: str
    variant_id: str
    brand: str
    name: str
    variant_name: str
    size: str
    image: Optional[str] = None
    quantity: int
    unit_price: int
    line_total: int


class AppliedBundle(BaseModel):
    bundle_id: str
    discount_percent: float


class Cart(BaseModel):
    """Shopping cart. All amounts are in minor currency units."""
    cart_id: str
    line_items: list[LineItemView] = []
    subtotal: int = 0
    discount: int = 0
    total: int = 0
    item_count: int = 0
    applied_bundle: Optional[AppliedBundle] = None
    currency: str = "EUR"
    display_total: str = ""
    created_at: datetime
    updated_at: datetime


class AddToCartRequest(BaseModel):
    """Request to add one unit of a variant to the cart"""
    item_id: str
    variant_id: str


class SetQuantityRequest(BaseModel):
    """Request to set a line item's quantity; zero or below removes it"""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
