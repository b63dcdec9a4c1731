"""Cart API routes"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends

from ..core.config import settings
from ..core.session import CartSession, session_manager
from ..cart.pricing import eligible_bundles, recommended_bundle
from ..models.bundle import ApplyBundleRequest, EligibleBundlesResponse
from ..models.cart import AddToCartRequest, CartResponse, SetQuantityRequest
from ..database.bundles import bundle_db
from ..database.catalog import catalog_db
from ..security.rate_limit import cart_rate_limit, checkout_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _get_session(cart_id: str) -> CartSession:
    session = session_manager.get_session(cart_id)
    if not session:
        raise HTTPException(status_code=404, detail="Cart not found")
    return session


def _respond(session: CartSession, message: Optional[str] = None) -> CartResponse:
    return CartResponse(cart=session_manager.render(session), message=message)


@router.post("", response_model=CartResponse, dependencies=[Depends(cart_rate_limit)])
async def create_cart():
    """Start a cart session"""
    session_manager.cleanup_old_sessions(settings.cart_session_max_age_hours)
    cart_rate_limit.limiter.prune()
    checkout_rate_limit.limiter.prune()
    session = session_manager.create_session()
    return _respond(session, "Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str):
    """Get cart by ID"""
    return _respond(_get_session(cart_id))


@router.post("/{cart_id}/items", response_model=CartResponse, dependencies=[Depends(cart_rate_limit)])
async def add_to_cart(cart_id: str, request: AddToCartRequest):
    """Add one unit of a variant to the cart"""
    session = _get_session(cart_id)

    item = catalog_db.get_item(request.item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Product not found")

    variant = catalog_db.get_variant(request.item_id, request.variant_id)
    if not variant:
        raise HTTPException(status_code=404, detail="Variant not found")

    if not variant.in_stock:
        raise HTTPException(status_code=400, detail=f"{variant.name} is out of stock")

    session.store.add_item(item, variant)
    return _respond(session, f"Added {variant.name} to cart")


@router.put(
    "/{cart_id}/items/{item_id}/{variant_id}",
    response_model=CartResponse,
    dependencies=[Depends(cart_rate_limit)],
)
async def set_item_quantity(
    cart_id: str,
    item_id: str,
    variant_id: str,
    request: SetQuantityRequest,
):
    """Set a line item's quantity; zero or below removes it"""
    session = _get_session(cart_id)

    if session.store.state.find(item_id, variant_id) is None:
        return _respond(session, "Item not in cart")

    session.store.set_quantity(item_id, variant_id, request.quantity)
    if request.quantity <= 0:
        return _respond(session, "Item removed")
    return _respond(session, "Cart updated")


@router.delete(
    "/{cart_id}/items/{item_id}/{variant_id}",
    response_model=CartResponse,
    dependencies=[Depends(cart_rate_limit)],
)
async def remove_from_cart(cart_id: str, item_id: str, variant_id: str):
    """Remove a line item from the cart"""
    session = _get_session(cart_id)

    if session.store.state.find(item_id, variant_id) is None:
        return _respond(session, "Item not in cart")

    session.store.remove_item(item_id, variant_id)
    return _respond(session, "Item removed")


@router.delete("/{cart_id}", response_model=CartResponse, dependencies=[Depends(cart_rate_limit)])
async def clear_cart(cart_id: str):
    """Remove all items and any bundle from the cart"""
    session = _get_session(cart_id)
    session.store.clear_cart()
    return _respond(session, "Cart cleared")


@router.delete("/{cart_id}/session")
async def end_session(cart_id: str):
    """End the cart session and discard the cart"""
    if not session_manager.delete_session(cart_id):
        raise HTTPException(status_code=404, detail="Cart not found")
    return {"cart_id": cart_id, "message": "Session ended"}


@router.get("/{cart_id}/bundles", response_model=EligibleBundlesResponse)
async def get_eligible_bundles(cart_id: str):
    """Bundle offers this cart qualifies for, best first"""
    session = _get_session(cart_id)
    item_count = session.store.item_count
    offers = bundle_db.list_bundles()

    return EligibleBundlesResponse(
        item_count=item_count,
        bundles=eligible_bundles(offers, item_count),
        recommended=recommended_bundle(offers, item_count),
    )


@router.post("/{cart_id}/bundle", response_model=CartResponse, dependencies=[Depends(cart_rate_limit)])
async def apply_bundle(cart_id: str, request: ApplyBundleRequest):
    """Apply a bundle offer to the cart, replacing any current one"""
    session = _get_session(cart_id)

    bundle = bundle_db.get_bundle(request.bundle_id)
    if not bundle or not bundle.is_active:
        raise HTTPException(status_code=404, detail="Bundle not found")

    item_count = session.store.item_count
    if bundle.quantity_required > item_count:
        raise HTTPException(
            status_code=400,
            detail=f"Bundle requires {bundle.quantity_required} items; cart has {item_count} items",
        )

    session.store.apply_bundle(bundle.id, bundle.discount_percent)
    logger.info(f"Bundle {bundle.id} ({bundle.discount_percent}%) applied to cart {cart_id}")
    return _respond(session, f"{bundle.name} applied")


@router.delete("/{cart_id}/bundle", response_model=CartResponse, dependencies=[Depends(cart_rate_limit)])
async def remove_bundle(cart_id: str):
    """Remove the bundle from the cart"""
    session = _get_session(cart_id)
    session.store.remove_bundle()
    return _respond(session, "Bundle removed")
