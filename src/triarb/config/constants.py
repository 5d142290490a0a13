"""
Scanner constants and configuration values.

This module contains all hardcoded values used throughout the scanner.
Values are organized by category for easy maintenance and auditing.
"""

from typing import Final


# =============================================================================
# Uniswap V3 Fee Tiers
# =============================================================================

FEE_TIER_LOW: Final[int] = 500  # 0.05%
FEE_TIER_MEDIUM: Final[int] = 3000  # 0.3%
FEE_TIER_HIGH: Final[int] = 10000  # 1%

FEE_TIERS: Final[tuple[int, ...]] = (FEE_TIER_LOW, FEE_TIER_MEDIUM, FEE_TIER_HIGH)

FEE_TIER_LABELS: Final[dict[int, str]] = {
    FEE_TIER_LOW: "0.05%",
    FEE_TIER_MEDIUM: "0.3%",
    FEE_TIER_HIGH: "1%",
}

# Stable/stable pairs rarely route through the 1% tier
STABLE_PAIR_FEE_TIERS: Final[tuple[int, ...]] = (FEE_TIER_LOW, FEE_TIER_MEDIUM)


# =============================================================================
# Gas Estimates (gas units)
# =============================================================================

GAS_SWAP_EXACT_INPUT_SINGLE: Final[int] = 150_000
GAS_MULTICALL_OVERHEAD: Final[int] = 50_000

# Conservative fee data when the gas oracle cannot be reached
FALLBACK_MAX_FEE_PER_GAS_GWEI: Final[int] = 30
FALLBACK_PRIORITY_FEE_GWEI: Final[int] = 1

# Gas cost is converted to the start token through WETH at this tier
GAS_CONVERSION_TOKEN: Final[str] = "WETH"
GAS_CONVERSION_FEE_TIER: Final[int] = FEE_TIER_MEDIUM

WEI_PER_ETH: Final[int] = 10**18
WEI_PER_GWEI: Final[int] = 10**9


# =============================================================================
# Search Heuristics
# =============================================================================

# Hops with a higher estimated price impact (percent) are pruned
MAX_PRICE_IMPACT_PCT: Final[float] = 2.0

# Marginal trade used as the reference price for impact estimation
MARGINAL_TRADE_FRACTION: Final[float] = 0.001

# Pool liquidity() is compared against token thresholds at this scale
POOL_LIQUIDITY_DECIMALS: Final[int] = 18

# Used when a token carries no minimum-liquidity threshold
DEFAULT_MIN_LIQUIDITY: Final[float] = 100.0


# =============================================================================
# Caching & Pacing
# =============================================================================

POOL_CACHE_TTL_SECONDS: Final[float] = 300.0  # 5 minutes
GAS_CACHE_TTL_SECONDS: Final[float] = 15.0

MAX_RPC_RETRIES: Final[int] = 2
RPC_RETRY_DELAY_SECONDS: Final[float] = 0.1

# Delay between paths to stay under public RPC rate limits
PATH_DELAY_SECONDS: Final[float] = 0.05


# =============================================================================
# Network Endpoints
# =============================================================================

ARBITRUM_RPC_URL: Final[str] = "https://arb1.arbitrum.io/rpc"
POLYGON_RPC_URL: Final[str] = "https://polygon-rpc.com"

# Uniswap V3 deployments (same addresses on Arbitrum and Polygon)
UNISWAP_V3_QUOTER: Final[str] = "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6"
UNISWAP_V3_FACTORY: Final[str] = "0x1F98431c8aD98523631AE4a59f267346ea31F984"


# =============================================================================
# Results
# =============================================================================

TOP_OPPORTUNITIES: Final[int] = 10

DEFAULT_SCAN_AMOUNT: Final[float] = 1000.0
DEFAULT_MIN_NET_PROFIT_PCT: Final[float] = 0.3
DEFAULT_NETWORK: Final[str] = "arbitrum"
DEFAULT_STRATEGY: Final[str] = "defi"

ZERO_ADDRESS: Final[str] = "0x0000000000000000000000000000000000000000"


# =============================================================================
# Logging & Telemetry
# =============================================================================

LOG_FORMAT: Final[str] = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Maximum log queue size
MAX_LOG_QUEUE_SIZE: Final[int] = 10_000
