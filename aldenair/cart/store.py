"""
Cart store.

A pure reducer over CartState plus a small single-writer store that
notifies subscribers after every state change.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from ..models.catalog import CatalogItem, Variant
from .state import BundleSelection, CartState, LineItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddItem:
    item: CatalogItem
    variant: Variant


@dataclass(frozen=True)
class RemoveItem:
    item_id: str
    variant_id: str


@dataclass(frozen=True)
class SetQuantity:
    item_id: str
    variant_id: str
    quantity: int


@dataclass(frozen=True)
class ApplyBundle:
    bundle_id: str
    discount_percent: float


@dataclass(frozen=True)
class RemoveBundle:
    pass


@dataclass(frozen=True)
class ClearCart:
    pass


CartIntent = Union[AddItem, RemoveItem, SetQuantity, ApplyBundle, RemoveBundle, ClearCart]

Listener = Callable[[CartState], None]


def _add_item(state: CartState, item: CatalogItem, variant: Variant) -> CartState:
    key = (item.id, variant.id)
    if state.find(*key) is None:
        return replace(state, line_items=state.line_items + (LineItem(item, variant, 1),))

    line_items = tuple(
        replace(line, quantity=line.quantity + 1) if line.key == key else line
        for line in state.line_items
    )
    return replace(state, line_items=line_items)


def _remove_item(state: CartState, item_id: str, variant_id: str) -> CartState:
    if state.find(item_id, variant_id) is None:
        return state
    key = (item_id, variant_id)
    return replace(
        state,
        line_items=tuple(line for line in state.line_items if line.key != key),
    )


def _set_quantity(state: CartState, item_id: str, variant_id: str, quantity: int) -> CartState:
    if quantity <= 0:
        return _remove_item(state, item_id, variant_id)

    # Only AddItem creates lines
    if state.find(item_id, variant_id) is None:
        return state

    key = (item_id, variant_id)
    line_items = tuple(
        replace(line, quantity=quantity) if line.key == key else line
        for line in state.line_items
    )
    return replace(state, line_items=line_items)


def _apply_bundle(state: CartState, bundle_id: str, discount_percent: float) -> CartState:
    # NaN fails every comparison, so it would slip through min/max
    clamped = 0 if math.isnan(discount_percent) else min(max(discount_percent, 0), 100)
    if clamped != discount_percent:
        logger.warning(f"Bundle {bundle_id}: discount {discount_percent}% clamped to {clamped}%")
    return replace(state, applied_bundle=BundleSelection(bundle_id, clamped))


def reduce(state: CartState, intent: CartIntent) -> CartState:
    """Return the state that results from applying intent to state"""
    if isinstance(intent, AddItem):
        return _add_item(state, intent.item, intent.variant)
    if isinstance(intent, RemoveItem):
        return _remove_item(state, intent.item_id, intent.variant_id)
    if isinstance(intent, SetQuantity):
        return _set_quantity(state, intent.item_id, intent.variant_id, intent.quantity)
    if isinstance(intent, ApplyBundle):
        return _apply_bundle(state, intent.bundle_id, intent.discount_percent)
    if isinstance(intent, RemoveBundle):
        return replace(state, applied_bundle=None)
    if isinstance(intent, ClearCart):
        return CartState()
    return state


class CartStore:
    """Holds one cart's state and applies intents to it"""

    def __init__(self, state: Optional[CartState] = None):
        self._state = state if state is not None else CartState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        return self._state.line_items

    @property
    def applied_bundle(self) -> Optional[BundleSelection]:
        return self._state.applied_bundle

    @property
    def subtotal(self) -> int:
        return self._state.subtotal

    @property
    def total(self) -> int:
        return self._state.total

    @property
    def item_count(self) -> int:
        return self._state.item_count

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with the new state after each change.

        Returns:
            Function that unregisters the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, intent: CartIntent) -> CartState:
        new_state = reduce(self._state, intent)
        if new_state == self._state:
            return self._state

        self._state = new_state
        self._notify()
        return new_state

    def add_item(self, item: CatalogItem, variant: Variant) -> CartState:
        return self.dispatch(AddItem(item, variant))

    def remove_item(self, item_id: str, variant_id: str) -> CartState:
        return self.dispatch(RemoveItem(item_id, variant_id))

    def set_quantity(self, item_id: str, variant_id: str, quantity: int) -> CartState:
        return self.dispatch(SetQuantity(item_id, variant_id, quantity))

    def apply_bundle(self, bundle_id: str, discount_percent: float) -> CartState:
        return self.dispatch(ApplyBundle(bundle_id, discount_percent))

    def remove_bundle(self) -> CartState:
        return self.dispatch(RemoveBundle())

    def clear_cart(self) -> CartState:
        return self.dispatch(ClearCart())

    def _notify(self) -> None:
        # Listeners are side effects; a failing one must not undo the transition
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception(f"Cart listener {listener!r} failed")
