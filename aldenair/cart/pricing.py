"""
Bundle pricing rules.

All amounts are integers in minor currency units (cents). Rounding is
half-up and happens once, on the final amount.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

from ..models.bundle import BundleOffer

Number = Union[int, float, str, Decimal]

_ONE = Decimal("1")
_HUNDRED = Decimal("100")


def _to_decimal(value: Number) -> Decimal:
    # str() keeps float literals like 44.99 exact
    return value if isinstance(value, Decimal) else Decimal(str(value))


def euros_to_minor_units(amount: Number) -> int:
    """Convert a major-unit amount (e.g. "44.99") to minor units (4499)"""
    cents = _to_decimal(amount) * _HUNDRED
    return int(cents.quantize(_ONE, rounding=ROUND_HALF_UP))


def compute_discounted_total(undiscounted_sum: int, discount_percent: Number) -> int:
    """
    Apply a percentage discount to an undiscounted sum.

    Args:
        undiscounted_sum: Sum of all line totals in minor units
        discount_percent: Discount in percent, 0-100

    Returns:
        round_half_up(undiscounted_sum * (100 - discount_percent) / 100)
    """
    percent = _to_decimal(discount_percent)
    scaled = Decimal(undiscounted_sum) * (_HUNDRED - percent) / _HUNDRED
    return int(scaled.quantize(_ONE, rounding=ROUND_HALF_UP))


def eligible_bundles(bundles: Iterable[BundleOffer], item_count: int) -> list[BundleOffer]:
    """Bundles the cart qualifies for, best discount first"""
    eligible = [b for b in bundles if b.quantity_required <= item_count]
    # sorted() is stable, so equal discounts keep catalog order
    return sorted(eligible, key=lambda b: b.discount_percent, reverse=True)


def recommended_bundle(bundles: Iterable[BundleOffer], item_count: int) -> Optional[BundleOffer]:
    eligible = eligible_bundles(bundles, item_count)
    return eligible[0] if eligible else None


def format_price(minor_units: int, currency_symbol: str = "€") -> str:
    """Render minor units for display, e.g. 4499 -> "€44.99" """
    sign = "-" if minor_units < 0 else ""
    euros, cents = divmod(abs(minor_units), 100)
    return f"{sign}{currency_symbol}{euros}.{cents:02d}"
