"""Core module containing the scan service, error hierarchy and type definitions."""

from triarb.core.errors import (
    ConfigurationError,
    InvalidPathError,
    NoLiquidityError,
    ProviderError,
    TriarbError,
    UnknownNetworkError,
    UnknownStrategyError,
    UnknownTokenError,
)
from triarb.core.types import (
    GasPriceSnapshot,
    Network,
    Opportunity,
    Path,
    PathAnalysis,
    PoolInfo,
    QuoteResult,
    QuoteStatus,
    Strategy,
    Token,
    TokenCategory,
)


__all__ = [
    "ConfigurationError",
    "GasPriceSnapshot",
    "InvalidPathError",
    "Network",
    "NoLiquidityError",
    "Opportunity",
    "Path",
    "PathAnalysis",
    "PoolInfo",
    "ProviderError",
    "QuoteResult",
    "QuoteStatus",
    "Strategy",
    "Token",
    "TokenCategory",
    "TriarbError",
    "UnknownNetworkError",
    "UnknownStrategyError",
    "UnknownTokenError",
]
