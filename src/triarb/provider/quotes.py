"""
Quote service.

Converts human amounts to on-chain units, asks the quote provider and
retries transport failures with a linearly increasing delay. Every outcome
is an explicit QuoteResult; nothing is raised to the search.
"""

import asyncio
import logging

from triarb.config.constants import MAX_RPC_RETRIES, RPC_RETRY_DELAY_SECONDS
from triarb.core.errors import ProviderError
from triarb.core.types import Network, QuoteProvider, QuoteResult
from triarb.telemetry.metrics import MetricsCollector
from triarb.utils.units import from_base_units, to_base_units


logger = logging.getLogger(__name__)


class QuoteService:
    """
    Quotes exact-input single-pool swaps.

    Outcomes:
    - OK: positive output amount in human units
    - NO_LIQUIDITY: provider answered "no pool / revert" or a non-positive amount
    - UNAVAILABLE: provider kept failing after all retries
    """

    def __init__(
        self,
        provider: QuoteProvider,
        max_retries: int = MAX_RPC_RETRIES,
        retry_delay: float = RPC_RETRY_DELAY_SECONDS,
        metrics: MetricsCollector | None = None,
    ) -> None:
        """
        Initialize the quote service.

        Args:
            provider: Quote provider (RPC or simulated).
            max_retries: Retries after the first failed attempt.
            retry_delay: Base delay in seconds, multiplied by attempt number.
            metrics: Optional collector for call and failure counters.
        """
        self._provider = provider
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._metrics = metrics

    async def quote(
        self,
        network: Network,
        token_in: str,
        token_out: str,
        amount: float,
        fee: int,
    ) -> QuoteResult:
        """
        Quote a swap of `amount` token_in into token_out at a fee tier.

        Args:
            network: Network to quote on.
            token_in: Input token symbol.
            token_out: Output token symbol.
            amount: Input amount in whole tokens.
            fee: Fee tier.

        Returns:
            QuoteResult with the output amount in whole tokens when OK.
        """
        tin = network.token(token_in)
        tout = network.token(token_out)
        if tin is None or tout is None:
            return QuoteResult.no_liquidity()

        amount_in = to_base_units(amount, tin.decimals)
        if amount_in <= 0:
            return QuoteResult.no_liquidity()

        for attempt in range(self._max_retries + 1):
            self._count("quote_calls")
            try:
                amount_out = await self._provider.quote(
                    network.id, tin.address, tout.address, fee, amount_in
                )
            except ProviderError as e:
                self._count("quote_failures")
                if attempt == self._max_retries:
                    logger.debug(
                        f"Quote {token_in}->{token_out} @{fee} unavailable after "
                        f"{attempt + 1} attempts: {e}"
                    )
                    return QuoteResult.unavailable()
                await asyncio.sleep(self._retry_delay * (attempt + 1))
                continue

            if amount_out is None or amount_out <= 0:
                return QuoteResult.no_liquidity()
            return QuoteResult.success(from_base_units(amount_out, tout.decimals))

        return QuoteResult.unavailable()

    def _count(self, name: str) -> None:
        if self._metrics:
            self._metrics.increment_counter(name)
