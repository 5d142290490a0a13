"""
Unit tests for QuoteService.

Tests unit conversion, explicit outcomes and the retry policy.
"""

import pytest

from triarb.core.types import Network, QuoteStatus
from triarb.provider.quotes import QuoteService
from triarb.telemetry.metrics import MetricsCollector
from tests.mocks.chain import ScriptedChainProvider


class TestQuoteService:
    """Tests for QuoteService."""

    @pytest.mark.asyncio
    async def test_quote_converts_units(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        quotes: QuoteService,
    ) -> None:
        provider.set_rate("USDC", "WETH", 1 / 2000)

        result = await quotes.quote(network, "USDC", "WETH", 1000.0, 3000)

        assert result.ok
        assert result.amount_out == pytest.approx(0.5)

    @pytest.mark.asyncio
    async def test_missing_pool_is_no_liquidity(
        self,
        network: Network,
        quotes: QuoteService,
    ) -> None:
        result = await quotes.quote(network, "USDC", "ARB", 1000.0, 3000)

        assert result.status == QuoteStatus.NO_LIQUIDITY
        assert not result.ok

    @pytest.mark.asyncio
    async def test_unknown_token_skips_provider(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        quotes: QuoteService,
    ) -> None:
        result = await quotes.quote(network, "USDC", "PEPE", 1000.0, 3000)

        assert result.status == QuoteStatus.NO_LIQUIDITY
        assert provider.quote_calls == 0

    @pytest.mark.asyncio
    async def test_dust_amount_skips_provider(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        quotes: QuoteService,
    ) -> None:
        """Amounts below one base unit of USDC never reach the quoter."""
        provider.set_rate("USDC", "WETH", 1 / 2000)

        result = await quotes.quote(network, "USDC", "WETH", 0.0000001, 3000)

        assert result.status == QuoteStatus.NO_LIQUIDITY
        assert provider.quote_calls == 0

    @pytest.mark.asyncio
    async def test_transient_failures_are_retried(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        quotes: QuoteService,
        metrics: MetricsCollector,
    ) -> None:
        provider.set_rate("USDC", "WETH", 1 / 2000)
        provider.quote_failures = 2

        result = await quotes.quote(network, "USDC", "WETH", 1000.0, 3000)

        assert result.ok
        assert provider.quote_calls == 3
        assert metrics.get_counter("quote_failures") == 2

    @pytest.mark.asyncio
    async def test_exhausted_retries_are_unavailable(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        quotes: QuoteService,
    ) -> None:
        provider.set_rate("USDC", "WETH", 1 / 2000)
        provider.quote_failures = 3

        result = await quotes.quote(network, "USDC", "WETH", 1000.0, 3000)

        assert result.status == QuoteStatus.UNAVAILABLE
        assert provider.quote_calls == 3

    @pytest.mark.asyncio
    async def test_no_retries_configured(
        self,
        network: Network,
        provider: ScriptedChainProvider,
    ) -> None:
        provider.set_rate("USDC", "WETH", 1 / 2000)
        provider.quote_failures = 1
        service = QuoteService(provider, max_retries=0, retry_delay=0.0)

        result = await service.quote(network, "USDC", "WETH", 1000.0, 3000)

        assert result.status == QuoteStatus.UNAVAILABLE
        assert provider.quote_calls == 1
