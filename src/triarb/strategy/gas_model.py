"""
Gas cost model.

Total gas is one exact-input swap per hop plus multicall overhead, priced
at the cached max fee per gas, and converted into the starting token
through a WETH quote.
"""

import logging

from triarb.config.constants import (
    GAS_CONVERSION_FEE_TIER,
    GAS_CONVERSION_TOKEN,
    GAS_MULTICALL_OVERHEAD,
    GAS_SWAP_EXACT_INPUT_SINGLE,
    WEI_PER_ETH,
)
from triarb.core.types import Network
from triarb.market.gas import GasPriceCache
from triarb.provider.quotes import QuoteService


logger = logging.getLogger(__name__)


def gas_units(hops: int) -> int:
    """Gas units for a cycle of `hops` swaps executed in one multicall."""
    return hops * GAS_SWAP_EXACT_INPUT_SINGLE + GAS_MULTICALL_OVERHEAD


class GasCostModel:
    """Prices a cycle's gas in ETH and in the cycle's starting token."""

    def __init__(self, gas_prices: GasPriceCache, quotes: QuoteService) -> None:
        self._gas_prices = gas_prices
        self._quotes = quotes

    async def gas_cost_eth(self, network: Network, fees: tuple[int, ...] | list[int]) -> float:
        """
        Gas cost of a cycle in ETH-equivalent units.

        Args:
            network: Network to price gas on.
            fees: Fee tiers of the hops (one swap per entry).

        Returns:
            Cost in the native gas token's whole units.
        """
        snapshot = await self._gas_prices.get(network.id)
        cost_wei = snapshot.max_fee_per_gas * gas_units(len(fees))
        return cost_wei / WEI_PER_ETH

    async def convert_to_token(self, network: Network, gas_cost_eth: float, symbol: str) -> float:
        """
        Convert an ETH-equivalent gas cost into units of `symbol`.

        Quotes 1 WETH -> symbol at the 0.3% tier. If the quote is unavailable
        the cost is returned unchanged, still in ETH-equivalent units.
        """
        if symbol == GAS_CONVERSION_TOKEN:
            return gas_cost_eth

        result = await self._quotes.quote(
            network, GAS_CONVERSION_TOKEN, symbol, 1.0, GAS_CONVERSION_FEE_TIER
        )
        if not result.ok:
            logger.debug(f"No {GAS_CONVERSION_TOKEN}->{symbol} rate on {network.id}, gas left in ETH")
            return gas_cost_eth
        return gas_cost_eth * result.amount_out

    async def gas_cost_in(
        self,
        network: Network,
        fees: tuple[int, ...] | list[int],
        symbol: str,
    ) -> float:
        """Gas cost of a cycle in units of its starting token."""
        gas_eth = await self.gas_cost_eth(network, fees)
        return await self.convert_to_token(network, gas_eth, symbol)
