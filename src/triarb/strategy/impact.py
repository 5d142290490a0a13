"""
Price impact estimation.

Compares the effective price of a marginal trade (0.1% of the size) with
the effective price of the full-size trade. A first-order approximation of
slippage, good enough for pruning.
"""

import math

from triarb.config.constants import MARGINAL_TRADE_FRACTION
from triarb.core.types import Network, PriceImpact, QuoteResult
from triarb.provider.quotes import QuoteService


class PriceImpactEstimator:
    """Estimates per-hop price impact from two quotes."""

    def __init__(
        self,
        quotes: QuoteService,
        marginal_fraction: float = MARGINAL_TRADE_FRACTION,
    ) -> None:
        self._quotes = quotes
        self._marginal_fraction = marginal_fraction

    async def estimate(
        self,
        network: Network,
        token_in: str,
        token_out: str,
        amount: float,
        fee: int,
    ) -> PriceImpact:
        """
        Estimate the price impact of a hop in percent.

        The full-size quote is returned alongside the impact so the search
        does not have to ask for it a second time.

        Args:
            network: Network of the hop.
            token_in: Input token symbol.
            token_out: Output token symbol.
            amount: Full input amount in whole tokens.
            fee: Fee tier.

        Returns:
            PriceImpact; impact is +inf when either quote is missing.
        """
        small_amount = amount * self._marginal_fraction
        small = await self._quotes.quote(network, token_in, token_out, small_amount, fee)
        if not small.ok:
            return PriceImpact(math.inf, small)

        actual = await self._quotes.quote(network, token_in, token_out, amount, fee)
        if not actual.ok:
            return PriceImpact(math.inf, actual)

        return PriceImpact(price_impact_pct(small_amount, small, amount, actual), actual)


def price_impact_pct(
    small_amount: float,
    small: QuoteResult,
    amount: float,
    actual: QuoteResult,
) -> float:
    """
    Impact = max(0, (p_small - p_actual) / p_small * 100).

    Returns:
        Impact in percent, +inf if a quote is not OK.
    """
    if not small.ok or not actual.ok or small_amount <= 0 or amount <= 0:
        return math.inf
    price_small = small.amount_out / small_amount
    price_actual = actual.amount_out / amount
    return max(0.0, (price_small - price_actual) / price_small * 100)
