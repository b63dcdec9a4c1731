# Storefront models

from .catalog import CatalogItem, CatalogEntry, Variant, ProductCategory, ProductSearchResponse
from .bundle import BundleOffer, EligibleBundlesResponse, ApplyBundleRequest
from .cart import Cart, LineItemView, AppliedBundle, AddToCartRequest, SetQuantityRequest, CartResponse
from .checkout import PaymentMethod, HandoffRequest, CheckoutHandoff, CheckoutHandoffResponse
from .loyalty import TierView, LoyaltyProgressResponse

__all__ = [
    "CatalogItem",
    "CatalogEntry",
    "Variant",
    "ProductCategory",
    "ProductSearchResponse",
    "BundleOffer",
    "EligibleBundlesResponse",
    "ApplyBundleRequest",
    "Cart",
    "LineItemView",
    "AppliedBundle",
    "AddToCartRequest",
    "SetQuantityRequest",
    "CartResponse",
    "PaymentMethod",
    "HandoffRequest",
    "CheckoutHandoff",
    "CheckoutHandoffResponse",
    "TierView",
    "LoyaltyProgressResponse",
]
