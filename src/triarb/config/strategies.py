"""
Named scan strategies.

A strategy bounds which token categories, fee tiers and how many paths a
scan considers. Strategies are immutable configuration.
"""

from typing import Final

from triarb.config.constants import FEE_TIER_HIGH, FEE_TIER_LOW, FEE_TIER_MEDIUM
from triarb.core.errors import UnknownStrategyError
from triarb.core.types import Strategy, TokenCategory


STRATEGIES: Final[dict[str, Strategy]] = {
    "stable": Strategy(
        name="stable",
        description="Stablecoin triangles only",
        categories=frozenset({TokenCategory.STABLE}),
        min_liquidity=10_000,
        fee_priority=(FEE_TIER_LOW, FEE_TIER_MEDIUM),
        max_paths=10,
        fee_tiers_per_hop=2,
    ),
    "defi": Strategy(
        name="defi",
        description="DeFi token triangles",
        categories=frozenset({TokenCategory.STABLE, TokenCategory.MAJOR, TokenCategory.DEFI}),
        min_liquidity=1_000,
        fee_priority=(FEE_TIER_MEDIUM, FEE_TIER_LOW, FEE_TIER_HIGH),
        max_paths=15,
    ),
    "aggressive": Strategy(
        name="aggressive",
        description="All token combinations",
        categories=frozenset(
            {
                TokenCategory.STABLE,
                TokenCategory.MAJOR,
                TokenCategory.DEFI,
                TokenCategory.MIDCAP,
            }
        ),
        min_liquidity=100,
        fee_priority=(FEE_TIER_MEDIUM, FEE_TIER_HIGH, FEE_TIER_LOW),
        max_paths=20,
    ),
    "test": Strategy(
        name="test",
        description="Quick test with top tokens",
        categories=frozenset({TokenCategory.STABLE, TokenCategory.MAJOR}),
        min_liquidity=5_000,
        fee_priority=(FEE_TIER_MEDIUM,),
        max_paths=5,
    ),
}


def get_strategy(name: str) -> Strategy:
    """
    Look up a strategy by name.

    Raises:
        UnknownStrategyError: If the name is not configured.
    """
    strategy = STRATEGIES.get(name)
    if strategy is None:
        raise UnknownStrategyError(name, list(STRATEGIES))
    return strategy
