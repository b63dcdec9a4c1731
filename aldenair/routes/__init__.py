# API Routes

from .products import router as products_router
from .cart import router as cart_router
from .bundles import router as bundles_router
from .checkout import router as checkout_router
from .loyalty import router as loyalty_router

__all__ = ["products_router", "cart_router", "bundles_router", "checkout_router", "loyalty_router"]
