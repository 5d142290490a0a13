"""
Arbitrage search for a single path.

Enumerates fee-tier combinations hop by hop, pruning a branch as soon as
a hop has no viable pool, too much price impact, or no quote. Surviving
combinations are priced net of gas; the best by net profit percentage is
kept, first found winning ties.
"""

import logging
import math
from dataclasses import dataclass

from triarb.config.constants import FEE_TIERS, MAX_PRICE_IMPACT_PCT
from triarb.core.errors import InvalidPathError, NoLiquidityError, UnknownTokenError
from triarb.core.types import (
    Network,
    Opportunity,
    Path,
    PathAnalysis,
    PathStep,
    PoolInfo,
    Strategy,
    Token,
)
from triarb.market.pools import PoolValidationCache
from triarb.provider.quotes import QuoteService
from triarb.strategy.confidence import calculate_confidence_score
from triarb.strategy.fees import hop_fee_tiers
from triarb.strategy.gas_model import GasCostModel
from triarb.strategy.impact import PriceImpactEstimator


logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class HopResult:
    """A hop that passed every pruning check."""

    fee: int
    pool: PoolInfo
    impact_pct: float
    amount_out: float


class ArbitrageSearch:
    """
    Finds the best fee-tier combination for a path.

    Hops are evaluated strictly in order since each hop's output is the
    next hop's input. Pool and gas caches fill up as a side effect.
    """

    def __init__(
        self,
        pools: PoolValidationCache,
        impact: PriceImpactEstimator,
        quotes: QuoteService,
        gas_model: GasCostModel,
        max_impact_pct: float = MAX_PRICE_IMPACT_PCT,
    ) -> None:
        """
        Initialize the search.

        Args:
            pools: Pool validation cache.
            impact: Price impact estimator (also supplies the hop quote).
            quotes: Quote service for direct path analysis.
            gas_model: Gas cost model.
            max_impact_pct: Hops above this impact are pruned.
        """
        self._pools = pools
        self._impact = impact
        self._quotes = quotes
        self._gas_model = gas_model
        self._max_impact_pct = max_impact_pct

    async def _evaluate_hop(
        self,
        network: Network,
        token_in: Token,
        token_out: Token,
        amount: float,
        fee: int,
    ) -> HopResult | None:
        """
        Run one hop through the pruning checks.

        Returns:
            HopResult, or None if the pool, impact or quote check fails.
        """
        pool = await self._pools.validate(network, token_in, token_out, fee)
        if pool is None:
            return None

        impact = await self._impact.estimate(
            network, token_in.symbol, token_out.symbol, amount, fee
        )
        if impact.impact_pct > self._max_impact_pct:
            if math.isfinite(impact.impact_pct):
                logger.debug(
                    f"Pruned {token_in.symbol}->{token_out.symbol} @{fee}: "
                    f"impact {impact.impact_pct:.2f}%"
                )
            return None

        quote = impact.quote
        if not quote.ok or quote.amount_out <= 0:
            return None

        return HopResult(fee=fee, pool=pool, impact_pct=impact.impact_pct, amount_out=quote.amount_out)

    async def find_best(
        self,
        network: Network,
        path: Path,
        amount: float,
        strategy: Strategy,
    ) -> Opportunity | None:
        """
        Search the fee-tier space of one path.

        Args:
            network: Network to evaluate on.
            path: Cycle A -> B -> C -> A.
            amount: Input amount of A in whole tokens.
            strategy: Strategy bounding the fee tiers tried.

        Returns:
            The best Opportunity by net profit percentage, or None if no
            combination survives all three hops.
        """
        token_a, token_b, token_c = (_resolve(network, s) for s in path.tokens)

        best: Opportunity | None = None

        for fee1 in hop_fee_tiers(token_a, token_b, strategy):
            hop1 = await self._evaluate_hop(network, token_a, token_b, amount, fee1)
            if hop1 is None:
                continue

            for fee2 in hop_fee_tiers(token_b, token_c, strategy):
                hop2 = await self._evaluate_hop(network, token_b, token_c, hop1.amount_out, fee2)
                if hop2 is None:
                    continue

                for fee3 in hop_fee_tiers(token_c, token_a, strategy):
                    hop3 = await self._evaluate_hop(
                        network, token_c, token_a, hop2.amount_out, fee3
                    )
                    if hop3 is None:
                        continue

                    candidate = await self._build_opportunity(
                        network, path, amount, strategy, (hop1, hop2, hop3)
                    )
                    if best is None or candidate.net_profit_pct > best.net_profit_pct:
                        best = candidate

        return best

    async def _build_opportunity(
        self,
        network: Network,
        path: Path,
        amount: float,
        strategy: Strategy,
        hops: tuple[HopResult, HopResult, HopResult],
    ) -> Opportunity:
        """Price a surviving combination net of gas."""
        fees = (hops[0].fee, hops[1].fee, hops[2].fee)
        output = hops[2].amount_out

        gross_profit = output - amount
        gross_profit_pct = gross_profit / amount * 100

        gas_cost = await self._gas_model.gas_cost_in(network, fees, path.start)

        net_profit = gross_profit - gas_cost
        net_profit_pct = net_profit / amount * 100

        impacts = (hops[0].impact_pct, hops[1].impact_pct, hops[2].impact_pct)

        return Opportunity(
            path=path,
            network=network.id,
            strategy=strategy.name,
            input_amount=amount,
            output_amount=output,
            gross_profit=gross_profit,
            gross_profit_pct=gross_profit_pct,
            net_profit=net_profit,
            net_profit_pct=net_profit_pct,
            gas_cost=gas_cost,
            fees=fees,
            pool_addresses=(hops[0].pool.address, hops[1].pool.address, hops[2].pool.address),
            price_impacts=impacts,
            confidence=calculate_confidence_score(gross_profit_pct, net_profit_pct, impacts),
        )

    async def analyze(
        self,
        network: Network,
        path: Path,
        amount: float,
        fees: tuple[int, int, int],
    ) -> PathAnalysis:
        """
        Evaluate one explicit path and fee combination without searching.

        Raises:
            UnknownTokenError: If a token is not in the network catalog.
            InvalidPathError: If the fee tiers are malformed.
            NoLiquidityError: If any hop has no quote.
        """
        if len(fees) != 3 or any(fee not in FEE_TIERS for fee in fees):
            raise InvalidPathError(
                f"Fees must be 3 tiers from {', '.join(str(f) for f in FEE_TIERS)}"
            )
        for symbol in path.tokens:
            _resolve(network, symbol)

        steps: list[PathStep] = []
        current = amount
        for (token_in, token_out), fee in zip(path.hops, fees):
            result = await self._quotes.quote(network, token_in, token_out, current, fee)
            if not result.ok:
                raise NoLiquidityError(token_in, token_out)
            steps.append(PathStep(token_in, token_out, current, result.amount_out, fee))
            current = result.amount_out

        gross_profit = current - amount
        gas_cost = await self._gas_model.gas_cost_in(network, fees, path.start)
        net_profit = gross_profit - gas_cost

        return PathAnalysis(
            path=path,
            steps=(steps[0], steps[1], steps[2]),
            input_amount=amount,
            output_amount=current,
            gross_profit=gross_profit,
            gross_profit_pct=gross_profit / amount * 100,
            gas_cost=gas_cost,
            net_profit=net_profit,
            net_profit_pct=net_profit / amount * 100,
        )


def _resolve(network: Network, symbol: str) -> Token:
    token = network.token(symbol)
    if token is None:
        raise UnknownTokenError(symbol, network.id)
    return token
