"""Session-scoped cart storage"""

import uuid
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Optional
from dataclasses import dataclass, field

from ..cart.pricing import format_price
from ..cart.snapshots import CartSnapshotWriter
from ..cart.store import CartStore
from ..models.cart import AppliedBundle, Cart, LineItemView
from .config import settings

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartSession:
    """One browser session's cart"""
    cart_id: str
    created_at: datetime
    updated_at: datetime
    store: CartStore = field(default_factory=CartStore)

    def touch(self) -> None:
        self.updated_at = _utcnow()

    def to_model(self, currency: str = "EUR", currency_symbol: str = "€") -> Cart:
        """Render the current cart state for API responses and snapshots"""
        state = self.store.state
        bundle = state.applied_bundle
        return Cart(
            cart_id=self.cart_id,
            line_items=[
                LineItemView(
                    item_id=line.item.id,
                    variant_id=line.variant.id,
                    brand=line.item.brand,
                    name=line.item.name,
                    variant_name=line.variant.name,
                    size=line.item.size,
                    image=line.item.image,
                    quantity=line.quantity,
                    unit_price=line.variant.price_minor_units,
                    line_total=line.line_total,
                )
                for line in state.line_items
            ],
            subtotal=state.subtotal,
            discount=state.subtotal - state.total,
            total=state.total,
            item_count=state.item_count,
            applied_bundle=(
                AppliedBundle(bundle_id=bundle.bundle_id, discount_percent=bundle.discount_percent)
                if bundle
                else None
            ),
            currency=currency,
            display_total=format_price(state.total, currency_symbol),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class CartSessionManager:
    """Manages cart sessions"""

    def __init__(
        self,
        snapshot_writer: Optional[CartSnapshotWriter] = None,
        currency: str = "EUR",
        currency_symbol: str = "€",
    ):
        self.sessions: dict[str, CartSession] = {}
        self.snapshot_writer = snapshot_writer
        self.currency = currency
        self.currency_symbol = currency_symbol

    def create_session(self) -> CartSession:
        """Create a new session with an empty cart"""
        now = _utcnow()
        session = CartSession(
            cart_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
        )
        session.store.subscribe(lambda state: session.touch())
        if self.snapshot_writer:
            writer = self.snapshot_writer
            session.store.subscribe(lambda state: writer.write(self.render(session)))

        self.sessions[session.cart_id] = session
        logger.info(f"Cart session {session.cart_id} created")
        return session

    def get_session(self, cart_id: str) -> Optional[CartSession]:
        """Get session by cart ID"""
        return self.sessions.get(cart_id)

    def render(self, session: CartSession) -> Cart:
        return session.to_model(self.currency, self.currency_symbol)

    def delete_session(self, cart_id: str) -> bool:
        """End a session and discard its cart"""
        if cart_id not in self.sessions:
            return False

        del self.sessions[cart_id]
        if self.snapshot_writer:
            self.snapshot_writer.discard(cart_id)
        logger.info(f"Cart session {cart_id} ended")
        return True

    def cleanup_old_sessions(self, max_age_hours: int = 24) -> int:
        """Remove sessions idle for longer than max_age_hours"""
        now = _utcnow()
        old_sessions = [
            cid for cid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for cid in old_sessions:
            self.delete_session(cid)
        return len(old_sessions)


# Singleton instance
session_manager = CartSessionManager(
    snapshot_writer=(
        CartSnapshotWriter(
            settings.cart_snapshot_dir,
            executor=ThreadPoolExecutor(max_workers=1, thread_name_prefix="cart-snapshots"),
        )
        if settings.snapshots_enabled
        else None
    ),
    currency=settings.currency,
    currency_symbol=settings.currency_symbol,
)
