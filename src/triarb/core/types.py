"""
Type definitions for the scanner.

This module contains the dataclasses, enums and Protocol definitions used
throughout the application. Catalog entries and paths are frozen; results
are plain slotted dataclasses built during a scan and handed to the caller.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Protocol

from triarb.config.constants import FEE_TIER_LABELS
from triarb.core.errors import InvalidPathError


# =============================================================================
# Enums
# =============================================================================


class TokenCategory(str, Enum):
    """Liquidity-risk category of a token."""

    STABLE = "stable"
    MAJOR = "major"
    DEFI = "defi"
    MIDCAP = "midcap"
    SMALLCAP = "smallcap"


class QuoteStatus(str, Enum):
    """Outcome of a quote request."""

    OK = "OK"
    NO_LIQUIDITY = "NO_LIQUIDITY"
    UNAVAILABLE = "UNAVAILABLE"


# =============================================================================
# Catalog Types
# =============================================================================


@dataclass(slots=True, frozen=True)
class Token:
    """Token metadata from the static catalog."""

    symbol: str
    address: str
    decimals: int
    category: TokenCategory
    min_liquidity: float

    @property
    def is_stable(self) -> bool:
        """Check if token is a stablecoin."""
        return self.category == TokenCategory.STABLE


@dataclass(slots=True, frozen=True, eq=False)
class Network:
    """
    Supported chain with its contracts and token catalog.

    Token order is the catalog order; path generation depends on it.
    """

    id: str
    name: str
    chain_id: int
    rpc_url: str
    quoter: str
    factory: str
    tokens: Mapping[str, Token]

    def token(self, symbol: str) -> Token | None:
        """Get token by symbol."""
        return self.tokens.get(symbol)

    def tokens_in(self, categories: Iterable[TokenCategory]) -> list[Token]:
        """Get tokens whose category is in the given set, in catalog order."""
        allowed = set(categories)
        return [t for t in self.tokens.values() if t.category in allowed]

    @property
    def categories(self) -> list[str]:
        """Get distinct categories present in the catalog."""
        seen: dict[str, None] = {}
        for token in self.tokens.values():
            seen.setdefault(token.category.value, None)
        return list(seen)


@dataclass(slots=True, frozen=True)
class Strategy:
    """Named scan configuration."""

    name: str
    description: str
    categories: frozenset[TokenCategory]
    min_liquidity: float
    fee_priority: tuple[int, ...]
    max_paths: int
    fee_tiers_per_hop: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "categories": sorted(c.value for c in self.categories),
            "min_liquidity": self.min_liquidity,
            "fee_priority": list(self.fee_priority),
            "max_paths": self.max_paths,
            "fee_tiers_per_hop": self.fee_tiers_per_hop,
        }


# =============================================================================
# Path Types
# =============================================================================


@dataclass(slots=True, frozen=True)
class Path:
    """
    Directed three-token cycle A -> B -> C -> A.

    Direction matters for evaluation; `key` collapses it for deduplication.
    """

    tokens: tuple[str, str, str]

    def __post_init__(self) -> None:
        if len(self.tokens) != 3:
            raise InvalidPathError("Path must contain exactly 3 token symbols")
        a, b, c = self.tokens
        if a == b or b == c or a == c:
            raise InvalidPathError(f"Path tokens must be distinct: {a}, {b}, {c}")

    @property
    def id(self) -> str:
        return "-".join(self.tokens)

    @property
    def label(self) -> str:
        a, b, c = self.tokens
        return f"{a} → {b} → {c} → {a}"

    @property
    def start(self) -> str:
        return self.tokens[0]

    @property
    def hops(self) -> tuple[tuple[str, str], tuple[str, str], tuple[str, str]]:
        """Ordered (token_in, token_out) pairs of the cycle."""
        a, b, c = self.tokens
        return ((a, b), (b, c), (c, a))

    @property
    def key(self) -> tuple[str, ...]:
        """Direction-insensitive identity used for deduplication."""
        return tuple(sorted(self.tokens))

    def __repr__(self) -> str:
        return f"Path({self.id})"


# =============================================================================
# Provider Types
# =============================================================================


@dataclass(slots=True, frozen=True)
class PoolState:
    """Raw pool answer from the pool oracle."""

    address: str
    liquidity: int


@dataclass(slots=True, frozen=True)
class PoolInfo:
    """Validated pool with liquidity scaled to token units."""

    address: str
    liquidity: float


@dataclass(slots=True, frozen=True)
class GasPriceSnapshot:
    """Network fee data in wei."""

    max_fee_per_gas: int
    max_priority_fee_per_gas: int
    last_block: int

    @property
    def max_fee_gwei(self) -> float:
        return self.max_fee_per_gas / 1e9


@dataclass(slots=True, frozen=True)
class QuoteResult:
    """
    Explicit quote outcome.

    `amount_out` is in human token units and only meaningful when OK.
    """

    status: QuoteStatus
    amount_out: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status == QuoteStatus.OK

    @classmethod
    def success(cls, amount_out: float) -> "QuoteResult":
        return cls(QuoteStatus.OK, amount_out)

    @classmethod
    def no_liquidity(cls) -> "QuoteResult":
        return cls(QuoteStatus.NO_LIQUIDITY)

    @classmethod
    def unavailable(cls) -> "QuoteResult":
        return cls(QuoteStatus.UNAVAILABLE)


@dataclass(slots=True, frozen=True)
class PriceImpact:
    """Estimated impact of a hop plus the full-size quote used to compute it."""

    impact_pct: float
    quote: QuoteResult


# =============================================================================
# Result Types
# =============================================================================


@dataclass(slots=True)
class Opportunity:
    """
    Best fee-tier combination found for one path.

    Amounts are in units of the path's starting token.
    """

    path: Path
    network: str
    strategy: str
    input_amount: float
    output_amount: float
    gross_profit: float
    gross_profit_pct: float
    net_profit: float
    net_profit_pct: float
    gas_cost: float
    fees: tuple[int, int, int]
    pool_addresses: tuple[str, str, str]
    price_impacts: tuple[float, float, float]
    confidence: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def fee_labels(self) -> list[str]:
        return [FEE_TIER_LABELS.get(fee, f"{fee / 10_000:g}%") for fee in self.fees]

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path.label,
            "tokens": list(self.path.tokens),
            "network": self.network,
            "strategy": self.strategy,
            "input_amount": self.input_amount,
            "output_amount": self.output_amount,
            "gross_profit": self.gross_profit,
            "gross_profit_pct": self.gross_profit_pct,
            "net_profit": self.net_profit,
            "net_profit_pct": self.net_profit_pct,
            "gas_cost": self.gas_cost,
            "fees": list(self.fees),
            "fee_labels": self.fee_labels,
            "pool_addresses": list(self.pool_addresses),
            "price_impacts": list(self.price_impacts),
            "confidence": self.confidence,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(slots=True, frozen=True)
class PathStep:
    """Single hop of an explicitly analysed path."""

    token_in: str
    token_out: str
    amount_in: float
    amount_out: float
    fee: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.token_in,
            "to": self.token_out,
            "amount_in": self.amount_in,
            "amount_out": self.amount_out,
            "fee": self.fee,
        }


@dataclass(slots=True)
class PathAnalysis:
    """Direct evaluation of one user-specified path and fee combination."""

    path: Path
    steps: tuple[PathStep, PathStep, PathStep]
    input_amount: float
    output_amount: float
    gross_profit: float
    gross_profit_pct: float
    gas_cost: float
    net_profit: float
    net_profit_pct: float

    @property
    def profitable(self) -> bool:
        return self.net_profit > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path.label,
            "steps": [step.to_dict() for step in self.steps],
            "summary": {
                "input_amount": self.input_amount,
                "output_amount": self.output_amount,
                "gross_profit": self.gross_profit,
                "gross_profit_pct": self.gross_profit_pct,
                "gas_cost": self.gas_cost,
                "net_profit": self.net_profit,
                "net_profit_pct": self.net_profit_pct,
                "profitable": self.profitable,
            },
        }


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


class QuoteProvider(Protocol):
    """Simulated swap quotes. Amounts are in smallest token units."""

    async def quote(
        self,
        network: str,
        token_in: str,
        token_out: str,
        fee: int,
        amount_in: int,
    ) -> int | None:
        """Return output amount, None when the swap has no liquidity."""
        ...


class PoolOracle(Protocol):
    """Pool existence and liquidity lookups."""

    async def pool_for(
        self,
        network: str,
        token_a: str,
        token_b: str,
        fee: int,
    ) -> PoolState | None:
        """Return the pool for a token pair and fee tier, None if absent."""
        ...


class GasOracle(Protocol):
    """Network fee data."""

    async def current_fees(self, network: str) -> GasPriceSnapshot:
        """Return current fee-per-gas data for a network."""
        ...


class ChainProvider(QuoteProvider, PoolOracle, GasOracle, Protocol):
    """All chain capabilities the scanner consumes."""

    async def block_number(self, network: str) -> int:
        """Return latest block height."""
        ...

    async def close(self) -> None:
        """Release connections."""
        ...


class Clock(Protocol):
    """Monotonic time source in seconds."""

    def now(self) -> float:
        ...
