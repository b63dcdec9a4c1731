"""
Sliding window rate limiting

Counts attempts per client key within a rolling window. Once a key runs
out of attempts it can optionally be blocked for a fixed period.
"""

import math
import time
import logging
from collections import deque
from typing import Callable, Optional

from fastapi import HTTPException, Request

from ..core.config import settings

logger = logging.getLogger(__name__)


class SlidingWindowRateLimiter:
    """In-memory sliding window rate limiter"""

    def __init__(
        self,
        max_attempts: int,
        window_seconds: float,
        block_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            max_attempts: Attempts allowed per window
            window_seconds: Length of the rolling window
            block_seconds: If set, block the key this long once it is exhausted
            clock: Source of the current time in seconds
        """
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self.block_seconds = block_seconds
        self.clock = clock
        self._attempts: dict[str, deque[float]] = {}
        self._blocked_until: dict[str, float] = {}

    def _recent_attempts(self, key: str, now: float) -> deque[float]:
        attempts = self._attempts.get(key)
        if attempts is None:
            return deque()
        while attempts and now - attempts[0] >= self.window_seconds:
            attempts.popleft()
        if not attempts:
            del self._attempts[key]
        return attempts

    def is_allowed(self, key: str) -> bool:
        """Record an attempt for key and report whether it may proceed"""
        now = self.clock()

        blocked_until = self._blocked_until.get(key)
        if blocked_until is not None:
            if now < blocked_until:
                return False
            del self._blocked_until[key]

        attempts = self._recent_attempts(key, now)
        if len(attempts) >= self.max_attempts:
            if self.block_seconds:
                self._blocked_until[key] = now + self.block_seconds
            return False

        attempts.append(now)
        self._attempts[key] = attempts
        return True

    def remaining_attempts(self, key: str) -> int:
        attempts = self._recent_attempts(key, self.clock())
        return max(0, self.max_attempts - len(attempts))

    def block_time_remaining(self, key: str) -> float:
        blocked_until = self._blocked_until.get(key)
        if blocked_until is None:
            return 0.0
        return max(0.0, blocked_until - self.clock())

    def retry_after(self, key: str) -> float:
        """Seconds until key may try again"""
        blocked = self.block_time_remaining(key)
        if blocked:
            return blocked

        attempts = self._attempts.get(key)
        if not attempts or len(attempts) < self.max_attempts:
            return 0.0
        return max(0.0, self.window_seconds - (self.clock() - attempts[0]))

    def reset(self, key: str) -> None:
        self._attempts.pop(key, None)
        self._blocked_until.pop(key, None)

    def clear(self) -> None:
        self._attempts.clear()
        self._blocked_until.clear()

    def prune(self) -> int:
        """
        Forget keys with no attempts in the window and no active block.

        Returns:
            Number of keys removed
        """
        now = self.clock()
        before = self.tracked_keys

        for key in list(self._attempts):
            self._recent_attempts(key, now)
        for key, blocked_until in list(self._blocked_until.items()):
            if now >= blocked_until:
                del self._blocked_until[key]

        return before - self.tracked_keys

    @property
    def tracked_keys(self) -> int:
        return len(set(self._attempts) | set(self._blocked_until))


def client_key(request: Request, trust_forwarded_for: bool = False) -> str:
    """
    Identify the caller by address and user agent.

    X-Forwarded-For and X-Real-IP are set by the client unless a proxy
    rewrites them, so they are only read when trust_forwarded_for is on.
    """
    ip = None
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ip = forwarded.split(",")[0].strip()
        else:
            ip = request.headers.get("x-real-ip")
    if not ip:
        ip = request.client.host if request.client else "unknown"
    user_agent = request.headers.get("user-agent", "unknown")
    return f"{ip}:{user_agent[:50]}"


class RateLimitDependency:
    """
    FastAPI dependency that rejects callers over their limit.

    Use with Depends() on routes that change state.
    """

    def __init__(
        self,
        limiter: SlidingWindowRateLimiter,
        scope: str,
        trust_forwarded_for: bool = False,
    ):
        self.limiter = limiter
        self.scope = scope
        self.trust_forwarded_for = trust_forwarded_for

    async def __call__(self, request: Request) -> None:
        key = f"{self.scope}:{client_key(request, self.trust_forwarded_for)}"
        if self.limiter.is_allowed(key):
            return

        retry_after = max(1, math.ceil(self.limiter.retry_after(key)))
        logger.warning(f"Rate limit exceeded for {key} ({self.scope}), retry in {retry_after}s")
        raise HTTPException(
            status_code=429,
            detail="Rate limit exceeded",
            headers={"Retry-After": str(retry_after)},
        )


# Dependency instances
cart_rate_limit = RateLimitDependency(
    SlidingWindowRateLimiter(
        max_attempts=settings.rate_limit_max_attempts,
        window_seconds=settings.rate_limit_window_seconds,
        block_seconds=settings.rate_limit_block_seconds,
    ),
    scope="cart",
    trust_forwarded_for=settings.trust_forwarded_for,
)
checkout_rate_limit = RateLimitDependency(
    SlidingWindowRateLimiter(
        max_attempts=settings.checkout_rate_limit_max_attempts,
        window_seconds=settings.checkout_rate_limit_window_seconds,
        block_seconds=settings.checkout_rate_limit_block_seconds,
    ),
    scope="checkout",
    trust_forwarded_for=settings.trust_forwarded_for,
)
