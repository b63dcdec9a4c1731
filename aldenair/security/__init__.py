# Request protection

from .rate_limit import (
    SlidingWindowRateLimiter,
    RateLimitDependency,
    cart_rate_limit,
    checkout_rate_limit,
)

__all__ = [
    "SlidingWindowRateLimiter",
    "RateLimitDependency",
    "cart_rate_limit",
    "checkout_rate_limit",
]
