"""
Simulated chain provider for demo mode.

Answers the quote, pool and gas questions from deterministic in-memory
constant-product pools. Each pool is seeded from reference USD prices and
carries a small per-pool price skew, so some cycles come out profitable.
"""

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from triarb.config.constants import FEE_TIER_HIGH, FEE_TIER_LOW, FEE_TIER_MEDIUM, WEI_PER_GWEI
from triarb.core.errors import UnknownNetworkError
from triarb.core.types import GasPriceSnapshot, Network, PoolState, Token, TokenCategory


logger = logging.getLogger(__name__)


# Reference USD prices; tokens not listed get a seeded price
REFERENCE_PRICES_USD: Final[dict[str, float]] = {
    "WETH": 3500.0,
    "WBTC": 65000.0,
    "cbETH": 3700.0,
    "cbBTC": 65000.0,
    "tBTC": 65000.0,
    "WMATIC": 0.7,
    "ARB": 1.1,
    "GMX": 30.0,
    "UNI": 9.5,
    "LINK": 18.5,
    "AAVE": 95.0,
    "CRV": 0.5,
    "COMP": 55.0,
    "SNX": 3.0,
    "MKR": 2800.0,
    "BAL": 4.0,
    "LDO": 2.2,
    "FXS": 5.0,
    "SUSHI": 1.2,
    "PENDLE": 4.5,
    "RPL": 25.0,
}

# Base fee per network in gwei
NETWORK_BASE_FEE_GWEI: Final[dict[str, float]] = {
    "arbitrum": 0.01,
    "polygon": 30.0,
}

# Pool depth in USD by token category (the shallower side wins)
CATEGORY_DEPTH_USD: Final[dict[TokenCategory, float]] = {
    TokenCategory.STABLE: 5_000_000.0,
    TokenCategory.MAJOR: 3_000_000.0,
    TokenCategory.DEFI: 500_000.0,
    TokenCategory.MIDCAP: 100_000.0,
    TokenCategory.SMALLCAP: 10_000.0,
}

# Share of the category depth each fee tier carries
FEE_TIER_DEPTH_SHARE: Final[dict[int, float]] = {
    FEE_TIER_LOW: 0.5,
    FEE_TIER_MEDIUM: 1.0,
    FEE_TIER_HIGH: 0.2,
}


@dataclass(slots=True, frozen=True)
class SimulatedPool:
    """Constant-product pool between token0 and token1 (sorted by address)."""

    address: str
    reserve0: float
    reserve1: float
    fee: int
    depth_usd: float

    @property
    def liquidity(self) -> int:
        """Liquidity in 18-decimal units, reported as the USD depth."""
        return int(self.depth_usd) * 10**18

    def amount_out(self, amount_in: float, zero_for_one: bool) -> float:
        """Output of an exact-input swap in whole tokens."""
        reserve_in, reserve_out = (
            (self.reserve0, self.reserve1) if zero_for_one else (self.reserve1, self.reserve0)
        )
        effective_in = amount_in * (1 - self.fee / 1_000_000)
        return reserve_out * effective_in / (reserve_in + effective_in)


class SimulatedChainProvider:
    """
    In-memory chain provider.

    Features:
    - Deterministic pools per (network, pair, fee tier) from a seed
    - Stable pairs only at the 0.05% and 0.3% tiers
    - Per-pool price skew of up to `max_skew`
    - Static EIP-1559 fee data per network
    """

    def __init__(
        self,
        networks: Mapping[str, Network],
        seed: int = 42,
        max_skew: float = 0.012,
        pool_probability: float = 0.85,
    ) -> None:
        """
        Initialize the simulated provider.

        Args:
            networks: Networks to simulate, keyed by id.
            seed: Seed for pool existence, prices and skews.
            max_skew: Maximum relative deviation of a pool price from reference.
            pool_probability: Chance that a non-core pool exists at a tier.
        """
        self._networks = dict(networks)
        self._seed = seed
        self._max_skew = max_skew
        self._pool_probability = pool_probability
        self._by_address: dict[str, dict[str, Token]] = {
            network_id: {t.address.lower(): t for t in network.tokens.values()}
            for network_id, network in self._networks.items()
        }
        self._pools: dict[tuple[str, str, str, int], SimulatedPool | None] = {}
        self._blocks: dict[str, int] = {network_id: 1_000_000 for network_id in self._networks}
        self.calls = 0

    def _token(self, network: str, address: str) -> Token | None:
        tokens = self._by_address.get(network)
        if tokens is None:
            raise UnknownNetworkError(network)
        return tokens.get(address.lower())

    def _price_usd(self, token: Token) -> float:
        if token.category == TokenCategory.STABLE:
            return 1.0
        if token.symbol in REFERENCE_PRICES_USD:
            return REFERENCE_PRICES_USD[token.symbol]
        rng = random.Random(f"{self._seed}:price:{token.symbol}")
        return round(rng.uniform(0.05, 50.0), 4)

    def _pool(self, network: str, token_a: Token, token_b: Token, fee: int) -> SimulatedPool | None:
        token0, token1 = sorted((token_a, token_b), key=lambda t: t.address.lower())
        key = (network, token0.symbol, token1.symbol, fee)
        if key in self._pools:
            return self._pools[key]

        rng = random.Random(f"{self._seed}:{network}:{token0.symbol}:{token1.symbol}:{fee}")
        stable_pair = token0.is_stable and token1.is_stable
        core = {token0.category, token1.category} <= {TokenCategory.STABLE, TokenCategory.MAJOR}

        if stable_pair and fee == FEE_TIER_HIGH:
            exists = False
        elif core or fee == FEE_TIER_MEDIUM:
            exists = rng.random() < max(self._pool_probability, 0.95)
        else:
            exists = rng.random() < self._pool_probability

        pool: SimulatedPool | None = None
        if exists:
            depth_usd = min(
                CATEGORY_DEPTH_USD[token0.category], CATEGORY_DEPTH_USD[token1.category]
            ) * FEE_TIER_DEPTH_SHARE.get(fee, 0.5)
            skew = 1 + rng.uniform(-self._max_skew, self._max_skew)
            reserve0 = depth_usd / 2 / self._price_usd(token0)
            reserve1 = depth_usd / 2 / self._price_usd(token1) * skew
            address = "0x" + f"{rng.getrandbits(160):040x}"
            pool = SimulatedPool(
                address=address,
                reserve0=reserve0,
                reserve1=reserve1,
                fee=fee,
                depth_usd=depth_usd,
            )

        self._pools[key] = pool
        return pool

    # =========================================================================
    # Quote Provider
    # =========================================================================

    async def quote(
        self,
        network: str,
        token_in: str,
        token_out: str,
        fee: int,
        amount_in: int,
    ) -> int | None:
        self.calls += 1
        tin = self._token(network, token_in)
        tout = self._token(network, token_out)
        if tin is None or tout is None or tin == tout:
            return None

        pool = self._pool(network, tin, tout, fee)
        if pool is None:
            return None

        zero_for_one = tin.address.lower() < tout.address.lower()
        amount = pool.amount_out(amount_in / 10**tin.decimals, zero_for_one)
        return int(amount * 10**tout.decimals)

    # =========================================================================
    # Pool Oracle
    # =========================================================================

    async def pool_for(
        self,
        network: str,
        token_a: str,
        token_b: str,
        fee: int,
    ) -> PoolState | None:
        self.calls += 1
        ta = self._token(network, token_a)
        tb = self._token(network, token_b)
        if ta is None or tb is None or ta == tb:
            return None

        pool = self._pool(network, ta, tb, fee)
        if pool is None:
            return None
        return PoolState(address=pool.address, liquidity=pool.liquidity)

    # =========================================================================
    # Gas Oracle
    # =========================================================================

    async def current_fees(self, network: str) -> GasPriceSnapshot:
        self.calls += 1
        if network not in self._networks:
            raise UnknownNetworkError(network)
        base_fee = int(NETWORK_BASE_FEE_GWEI.get(network, 1.0) * WEI_PER_GWEI)
        priority_fee = WEI_PER_GWEI // 100
        return GasPriceSnapshot(
            max_fee_per_gas=base_fee * 2 + priority_fee,
            max_priority_fee_per_gas=priority_fee,
            last_block=await self.block_number(network),
        )

    async def block_number(self, network: str) -> int:
        if network not in self._blocks:
            raise UnknownNetworkError(network)
        self._blocks[network] += 1
        return self._blocks[network]

    async def close(self) -> None:
        logger.debug(f"Simulated provider closed after {self.calls} calls")
