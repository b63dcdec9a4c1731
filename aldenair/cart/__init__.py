# Cart state, reducer and pricing

from .state import CartState, LineItem, BundleSelection
from .store import (
    CartStore,
    AddItem,
    RemoveItem,
    SetQuantity,
    ApplyBundle,
    RemoveBundle,
    ClearCart,
    reduce,
)
from .pricing import (
    compute_discounted_total,
    eligible_bundles,
    recommended_bundle,
    euros_to_minor_units,
    format_price,
)

__all__ = [
    "CartState",
    "LineItem",
    "BundleSelection",
    "CartStore",
    "AddItem",
    "RemoveItem",
    "SetQuantity",
    "ApplyBundle",
    "RemoveBundle",
    "ClearCart",
    "reduce",
    "compute_discounted_total",
    "eligible_bundles",
    "recommended_bundle",
    "euros_to_minor_units",
    "format_price",
]
