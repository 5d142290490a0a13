"""
Pydantic models for API requests.

Field names are snake_case; the camelCase names used by existing clients
(`minNetProfit`, `maxPaths`) are accepted as aliases.
"""

from pydantic import BaseModel, Field

from triarb.config.constants import (
    DEFAULT_MIN_NET_PROFIT_PCT,
    DEFAULT_NETWORK,
    DEFAULT_SCAN_AMOUNT,
    DEFAULT_STRATEGY,
    FEE_TIER_MEDIUM,
)
from triarb.core.scanner import PathAnalysisRequest, ScanRequest


class ScanBody(BaseModel):
    """Body of POST /scan."""

    network: str = DEFAULT_NETWORK
    amount: float = DEFAULT_SCAN_AMOUNT
    strategy: str = DEFAULT_STRATEGY
    min_net_profit: float = Field(default=DEFAULT_MIN_NET_PROFIT_PCT, alias="minNetProfit")
    max_paths: int | None = Field(default=None, alias="maxPaths")

    model_config = {"populate_by_name": True}

    def to_request(self) -> ScanRequest:
        return ScanRequest(
            network=self.network,
            amount=self.amount,
            strategy=self.strategy,
            min_net_profit=self.min_net_profit,
            max_paths=self.max_paths,
        )


class AnalyzePathBody(BaseModel):
    """Body of POST /analyze-path."""

    network: str = DEFAULT_NETWORK
    path: list[str]
    amount: float = DEFAULT_SCAN_AMOUNT
    fees: list[int] = Field(
        default_factory=lambda: [FEE_TIER_MEDIUM, FEE_TIER_MEDIUM, FEE_TIER_MEDIUM]
    )

    model_config = {"populate_by_name": True}

    def to_request(self) -> PathAnalysisRequest:
        return PathAnalysisRequest(
            network=self.network,
            path=tuple(self.path),
            amount=self.amount,
            fees=tuple(self.fees),
        )
