"""
Gas price cache.

Holds one fee snapshot per network and refreshes it when older than the
TTL. Shared by every search; the last writer wins.
"""

import logging

from triarb.config.constants import (
    FALLBACK_MAX_FEE_PER_GAS_GWEI,
    FALLBACK_PRIORITY_FEE_GWEI,
    GAS_CACHE_TTL_SECONDS,
    WEI_PER_GWEI,
)
from triarb.core.errors import ProviderError
from triarb.core.types import Clock, GasOracle, GasPriceSnapshot
from triarb.telemetry.metrics import MetricsCollector


logger = logging.getLogger(__name__)

FALLBACK_SNAPSHOT = GasPriceSnapshot(
    max_fee_per_gas=FALLBACK_MAX_FEE_PER_GAS_GWEI * WEI_PER_GWEI,
    max_priority_fee_per_gas=FALLBACK_PRIORITY_FEE_GWEI * WEI_PER_GWEI,
    last_block=0,
)


class GasPriceCache:
    """Time-bounded memoization over the gas oracle, one entry per network."""

    def __init__(
        self,
        oracle: GasOracle,
        clock: Clock,
        ttl_seconds: float = GAS_CACHE_TTL_SECONDS,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self._oracle = oracle
        self._clock = clock
        self._ttl = ttl_seconds
        self._metrics = metrics
        self._snapshots: dict[str, tuple[GasPriceSnapshot, float]] = {}

    async def get(self, network_id: str) -> GasPriceSnapshot:
        """
        Get the current fee snapshot for a network.

        If the oracle fails, a conservative fallback (30 gwei max fee, 1 gwei
        priority fee) is returned without being cached.

        Args:
            network_id: Network identifier.

        Returns:
            Cached or freshly fetched GasPriceSnapshot.
        """
        now = self._clock.now()
        cached = self._snapshots.get(network_id)
        if cached is not None and now - cached[1] < self._ttl:
            if self._metrics:
                self._metrics.increment_counter("gas_cache_hits")
            return cached[0]

        try:
            snapshot = await self._oracle.current_fees(network_id)
        except ProviderError as e:
            logger.warning(f"Gas price unavailable on {network_id}, using fallback: {e}")
            return FALLBACK_SNAPSHOT

        self._snapshots[network_id] = (snapshot, now)
        return snapshot

    def clear(self) -> None:
        """Drop all snapshots."""
        self._snapshots.clear()

    def __len__(self) -> int:
        return len(self._snapshots)
