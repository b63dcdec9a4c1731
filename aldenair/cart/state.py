"""Cart state value objects"""

from dataclasses import dataclass
from typing import Optional

from ..models.catalog import CatalogItem, Variant
from .pricing import compute_discounted_total


@dataclass(frozen=True)
class LineItem:
    """One (item, variant) pairing in the cart"""
    item: CatalogItem
    variant: Variant
    quantity: int = 1

    @property
    def key(self) -> tuple[str, str]:
        return (self.item.id, self.variant.id)

    @property
    def line_total(self) -> int:
        return self.variant.price_minor_units * self.quantity


@dataclass(frozen=True)
class BundleSelection:
    """Bundle discount applied on top of the line items"""
    bundle_id: str
    discount_percent: float


@dataclass(frozen=True)
class CartState:
    """
    Immutable cart contents.

    Totals are derived from line_items on every read so they can never
    drift from the items themselves.
    """
    line_items: tuple[LineItem, ...] = ()
    applied_bundle: Optional[BundleSelection] = None

    @property
    def subtotal(self) -> int:
        """Undiscounted sum of all line totals"""
        return sum(line.line_total for line in self.line_items)

    @property
    def total(self) -> int:
        if self.applied_bundle is None:
            return self.subtotal
        return compute_discounted_total(self.subtotal, self.applied_bundle.discount_percent)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.line_items)

    @property
    def is_empty(self) -> bool:
        return not self.line_items

    def find(self, item_id: str, variant_id: str) -> Optional[LineItem]:
        return next(
            (line for line in self.line_items if line.key == (item_id, variant_id)),
            None,
        )
