"""Checkout handoff routes"""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends

from ..core.config import settings
from ..core.session import session_manager
from ..models.checkout import (
    CheckoutHandoff,
    CheckoutHandoffResponse,
    HandoffRequest,
    PaymentMethod,
)
from ..security.rate_limit import checkout_rate_limit
from ..services.iban import format_iban, is_valid_iban
from ..services.loyalty import points_for_total

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post(
    "/{cart_id}/handoff",
    response_model=CheckoutHandoffResponse,
    dependencies=[Depends(checkout_rate_limit)],
)
async def checkout_handoff(cart_id: str, request: HandoffRequest):
    """
    Hand the cart over to the payment boundary.

    This is a one-shot read: the line items and total are returned as they
    are now and the cart itself is left untouched. Payment capture happens
    with the payment provider, not here.
    """
    session = session_manager.get_session(cart_id)
    if not session:
        raise HTTPException(status_code=404, detail="Cart not found")

    cart = session_manager.render(session)
    if not cart.line_items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    iban = None
    if request.payment_method == PaymentMethod.SEPA:
        if not request.iban or not is_valid_iban(request.iban):
            raise HTTPException(status_code=400, detail="A valid IBAN is required for SEPA payment")
        iban = format_iban(request.iban)

    handoff = CheckoutHandoff(
        cart_id=cart.cart_id,
        line_items=cart.line_items,
        subtotal=cart.subtotal,
        discount=cart.discount,
        total=cart.total,
        item_count=cart.item_count,
        currency=cart.currency,
        applied_bundle=cart.applied_bundle,
        payment_method=request.payment_method,
        iban=iban,
        loyalty_points=points_for_total(cart.total, settings.loyalty_points_per_euro),
        created_at=datetime.now(timezone.utc),
    )

    logger.info(
        f"Checkout handoff for cart {cart_id}: {cart.display_total} "
        f"({cart.item_count} items, {request.payment_method.value})"
    )

    return CheckoutHandoffResponse(success=True, handoff=handoff)
