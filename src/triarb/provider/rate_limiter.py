"""
Token bucket rate limiter for RPC requests.

Public RPC endpoints throttle aggressively; every chain read goes through
one bucket per endpoint so a scan stays under the budget.
"""

import asyncio
import time
from collections.abc import Callable
from typing import Final


# Conservative for public endpoints
DEFAULT_REQUESTS_PER_SECOND: Final[float] = 10.0

# Burst allowance as a multiple of the per-second rate
BURST_FACTOR: Final[float] = 2.0


class TokenBucket:
    """
    Bucket refilled continuously at `refill_rate` tokens per second.

    Starts full. Waiters are served one at a time, so a burst of
    concurrent hop quotes drains the bucket in arrival order.
    """

    def __init__(
        self,
        capacity: float,
        refill_rate: float,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.capacity = float(capacity)
        self.refill_rate = refill_rate
        self.tokens = self.capacity
        self._timer = timer
        self._stamp = timer()
        self._lock = asyncio.Lock()

    def _refill(self) -> None:
        now = self._timer()
        self.tokens = min(self.capacity, self.tokens + (now - self._stamp) * self.refill_rate)
        self._stamp = now

    def _deficit(self, tokens: float) -> float:
        """Seconds until `tokens` are available, 0 if they already are."""
        self._refill()
        missing = tokens - self.tokens
        return missing / self.refill_rate if missing > 0 else 0.0

    async def acquire(self, tokens: float = 1) -> None:
        async with self._lock:
            wait = self._deficit(tokens)
            if wait:
                await asyncio.sleep(wait)
                self._refill()
            self.tokens -= tokens

    async def try_acquire(self, tokens: float = 1) -> bool:
        async with self._lock:
            if self._deficit(tokens):
                return False
            self.tokens -= tokens
            return True


class RateLimiter:
    """Per-endpoint limiter holding one TokenBucket per RPC URL."""

    def __init__(self, requests_per_second: float = DEFAULT_REQUESTS_PER_SECOND) -> None:
        self._rate = requests_per_second
        self._buckets: dict[str, TokenBucket] = {}

    def _bucket(self, endpoint: str) -> TokenBucket:
        if endpoint not in self._buckets:
            self._buckets[endpoint] = TokenBucket(self._rate * BURST_FACTOR, self._rate)
        return self._buckets[endpoint]

    async def acquire(self, endpoint: str) -> None:
        """Wait until one request to `endpoint` is allowed."""
        await self._bucket(endpoint).acquire()

    async def try_acquire(self, endpoint: str) -> bool:
        return await self._bucket(endpoint).try_acquire()

    def available(self, endpoint: str) -> float:
        """Approximate request budget left for an endpoint."""
        return self._bucket(endpoint).tokens
