"""
Pool validation cache.

Time-bounded read-through memoization over the pool oracle. Each key
(network, token A, token B, fee) expires independently; stale entries are
replaced on the next lookup, nothing is evicted in the background.
Concurrent scans may race on the same key, which costs at most one
redundant oracle call.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from triarb.config.constants import (
    DEFAULT_MIN_LIQUIDITY,
    POOL_CACHE_TTL_SECONDS,
    POOL_LIQUIDITY_DECIMALS,
    ZERO_ADDRESS,
)
from triarb.core.errors import ProviderError
from triarb.core.types import Clock, Network, PoolInfo, PoolOracle, Token
from triarb.telemetry.metrics import MetricsCollector


logger = logging.getLogger(__name__)

PoolKey = tuple[str, str, str, int]


@dataclass(slots=True, frozen=True)
class PoolCacheEntry:
    """Cached validation result; `pool` is None for "no viable pool"."""

    pool: PoolInfo | None
    fetched_at: float


class PoolValidationCache:
    """
    Validates pools for a hop and remembers the answer for a TTL.

    A pool is viable if the oracle knows it and its liquidity, scaled by
    18 decimals, reaches the smaller of the two tokens' thresholds.
    """

    def __init__(
        self,
        oracle: PoolOracle,
        clock: Clock,
        ttl_seconds: float = POOL_CACHE_TTL_SECONDS,
        metrics: MetricsCollector | None = None,
    ) -> None:
        """
        Initialize the cache.

        Args:
            oracle: Pool existence/liquidity provider.
            clock: Time source for expiry.
            ttl_seconds: Lifetime of each entry.
            metrics: Optional collector for lookup and hit counters.
        """
        self._oracle = oracle
        self._clock = clock
        self._ttl = ttl_seconds
        self._metrics = metrics
        self._entries: dict[PoolKey, PoolCacheEntry] = {}

    async def validate(
        self,
        network: Network,
        token_a: Token,
        token_b: Token,
        fee: int,
    ) -> PoolInfo | None:
        """
        Get the viable pool for a hop, or None.

        Transport failures are treated as "no viable pool" and are not cached,
        so the next lookup asks the oracle again.

        Args:
            network: Network of the hop.
            token_a: Input token.
            token_b: Output token.
            fee: Fee tier in hundredths of a basis point.

        Returns:
            PoolInfo if the pool exists with enough liquidity, else None.
        """
        key = (network.id, token_a.symbol, token_b.symbol, fee)
        now = self._clock.now()

        entry = self._entries.get(key)
        if entry is not None and now - entry.fetched_at < self._ttl:
            self._count("pool_cache_hits")
            return entry.pool

        self._count("pool_lookups")
        try:
            state = await self._oracle.pool_for(network.id, token_a.address, token_b.address, fee)
        except ProviderError as e:
            logger.debug(f"Pool lookup failed for {token_a.symbol}/{token_b.symbol} {fee}: {e}")
            self._count("pool_lookup_failures")
            return None

        pool: PoolInfo | None = None
        if state is not None and state.address.lower() != ZERO_ADDRESS:
            liquidity = float(Decimal(state.liquidity).scaleb(-POOL_LIQUIDITY_DECIMALS))
            threshold = min(
                token_a.min_liquidity or DEFAULT_MIN_LIQUIDITY,
                token_b.min_liquidity or DEFAULT_MIN_LIQUIDITY,
            )
            if liquidity >= threshold:
                pool = PoolInfo(address=state.address, liquidity=liquidity)
            else:
                logger.debug(
                    f"Pool {token_a.symbol}/{token_b.symbol} {fee} below liquidity "
                    f"threshold: {liquidity:.4f} < {threshold}"
                )

        self._entries[key] = PoolCacheEntry(pool=pool, fetched_at=now)
        return pool

    def _count(self, name: str) -> None:
        if self._metrics:
            self._metrics.increment_counter(name)

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
