"""Fee-tier selection per hop."""

from triarb.config.constants import STABLE_PAIR_FEE_TIERS
from triarb.core.types import Strategy, Token


def select_fee_tiers(token_a: Token, token_b: Token, strategy: Strategy) -> tuple[int, ...]:
    """
    Get candidate fee tiers for a hop, most preferred first.

    Stable/stable pairs try the 0.05% and 0.3% tiers; every other pair
    follows the strategy's fee preference.

    Args:
        token_a: Input token of the hop.
        token_b: Output token of the hop.
        strategy: Active strategy.

    Returns:
        Ordered fee tiers.
    """
    if token_a.is_stable and token_b.is_stable:
        return STABLE_PAIR_FEE_TIERS
    return strategy.fee_priority


def hop_fee_tiers(token_a: Token, token_b: Token, strategy: Strategy) -> tuple[int, ...]:
    """Candidate fee tiers truncated to the number the strategy tries per hop."""
    return select_fee_tiers(token_a, token_b, strategy)[: strategy.fee_tiers_per_hop]
