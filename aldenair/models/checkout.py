"""Checkout handoff models"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from enum import Enum

from .cart import AppliedBundle, LineItemView


class PaymentMethod(str, Enum):
    CARD = "card"
    PAYPAL = "paypal"
    SEPA = "sepa"


class HandoffRequest(BaseModel):
    """Request to hand the cart over to the payment boundary"""
    payment_method: PaymentMethod = PaymentMethod.CARD
    # Required for SEPA direct debit
    iban: Optional[str] = None


class CheckoutHandoff(BaseModel):
    """Snapshot of the cart read once at checkout"""
    cart_id: str
    line_items: list[LineItemView]
    subtotal: int
    discount: int
    total: int
    item_count: int
    currency: str
    applied_bundle: Optional[AppliedBundle] = None
    payment_method: PaymentMethod
    iban: Optional[str] = None
    loyalty_points: int = 0
    created_at: datetime


class CheckoutHandoffResponse(BaseModel):
    """Response from the checkout handoff"""
    success: bool
    handoff: Optional[CheckoutHandoff] = None
    error_message: Optional[str] = None
