"""
Unit tests for ArbitrageSearch.

Tests fee-tier enumeration, pruning, net profit and direct path analysis.
"""

import pytest

from triarb.core.errors import InvalidPathError, NoLiquidityError, UnknownTokenError
from triarb.core.types import Network, Path, Strategy
from triarb.strategy.search import ArbitrageSearch
from tests.mocks.chain import ScriptedChainProvider


STABLE_CYCLE = Path(("USDC", "USDT", "DAI"))
DEFI_CYCLE = Path(("USDC", "WETH", "ARB"))


def script_stable_parity(provider: ScriptedChainProvider) -> None:
    provider.set_rate("USDC", "USDT", 1.0)
    provider.set_rate("USDT", "DAI", 1.0)
    provider.set_rate("DAI", "USDC", 1.0)


class TestFindBest:
    """Tests for ArbitrageSearch.find_best."""

    @pytest.mark.asyncio
    async def test_stable_parity_breaks_even(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        stable_strategy: Strategy,
    ) -> None:
        """1:1 rates and free gas give exactly zero profit."""
        script_stable_parity(provider)

        best = await search.find_best(network, STABLE_CYCLE, 1000.0, stable_strategy)

        assert best is not None
        assert best.net_profit_pct == pytest.approx(0.0, abs=1e-9)
        assert best.gross_profit_pct == pytest.approx(0.0, abs=1e-9)
        assert best.gas_cost == 0.0

    @pytest.mark.asyncio
    async def test_ties_keep_first_combination(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        stable_strategy: Strategy,
    ) -> None:
        script_stable_parity(provider)

        best = await search.find_best(network, STABLE_CYCLE, 1000.0, stable_strategy)

        assert best is not None
        assert best.fees == (500, 500, 500)

    @pytest.mark.asyncio
    async def test_best_combination_selected(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        stable_strategy: Strategy,
    ) -> None:
        script_stable_parity(provider)
        provider.set_rate("USDT", "DAI", 1.001, fees=(500,))
        provider.set_rate("USDT", "DAI", 1.002, fees=(3000,))

        best = await search.find_best(network, STABLE_CYCLE, 1000.0, stable_strategy)

        assert best is not None
        assert best.fees == (500, 3000, 500)
        assert best.net_profit_pct == pytest.approx(0.2)

    @pytest.mark.asyncio
    async def test_profitable_defi_cycle(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        defi_strategy: Strategy,
    ) -> None:
        best = await search.find_best(network, DEFI_CYCLE, 1000.0, defi_strategy)

        assert best is not None
        assert best.output_amount == pytest.approx(1015.0)
        assert best.gross_profit == pytest.approx(15.0)
        assert best.gross_profit_pct == pytest.approx(1.5)
        assert best.gas_cost == pytest.approx(2.0)
        assert best.net_profit == pytest.approx(13.0)
        assert best.net_profit_pct == pytest.approx(1.3)
        assert best.fees == (3000, 3000, 3000)
        assert best.confidence == 95
        assert best.pool_addresses[1] == "0xpool-WETH-ARB-3000"

    @pytest.mark.asyncio
    async def test_net_never_exceeds_gross(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        defi_strategy: Strategy,
    ) -> None:
        best = await search.find_best(network, DEFI_CYCLE, 1000.0, defi_strategy)

        assert best is not None
        assert best.gas_cost >= 0
        assert best.net_profit_pct <= best.gross_profit_pct

    @pytest.mark.asyncio
    async def test_missing_pool_skips_combination(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        defi_strategy: Strategy,
    ) -> None:
        """A path whose only combination lacks a pool yields nothing at all."""
        profitable_defi_provider.remove_pool("WETH", "ARB", 3000)

        best = await search.find_best(network, DEFI_CYCLE, 1000.0, defi_strategy)

        assert best is None

    @pytest.mark.asyncio
    async def test_missing_first_hop_pool_stops_early(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        defi_strategy: Strategy,
    ) -> None:
        profitable_defi_provider.remove_pool("USDC", "WETH", 3000)

        best = await search.find_best(network, DEFI_CYCLE, 1000.0, defi_strategy)

        assert best is None
        assert profitable_defi_provider.quote_calls == 0
        assert profitable_defi_provider.pool_calls == 1

    @pytest.mark.asyncio
    async def test_high_impact_hop_pruned(
        self,
        network: Network,
        provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        stable_strategy: Strategy,
    ) -> None:
        """A lucrative 0.05% pool is dropped because its impact exceeds 2%."""
        script_stable_parity(provider)
        provider.set_rate("USDC", "USDT", 1.2, fees=(500,), depth=10_000)

        best = await search.find_best(network, STABLE_CYCLE, 1000.0, stable_strategy)

        assert best is not None
        assert best.fees[0] == 3000
        assert max(best.price_impacts) <= 2.0

    @pytest.mark.asyncio
    async def test_all_hops_pruned_yields_nothing(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        defi_strategy: Strategy,
    ) -> None:
        profitable_defi_provider.set_rate("ARB", "USDC", 1.2, fees=(3000,), depth=5_000)

        assert await search.find_best(network, DEFI_CYCLE, 1000.0, defi_strategy) is None

    @pytest.mark.asyncio
    async def test_provider_outage_yields_nothing(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
        defi_strategy: Strategy,
    ) -> None:
        profitable_defi_provider.fail_pools = True

        assert await search.find_best(network, DEFI_CYCLE, 1000.0, defi_strategy) is None

    @pytest.mark.asyncio
    async def test_unknown_token_raises(
        self,
        network: Network,
        search: ArbitrageSearch,
        defi_strategy: Strategy,
    ) -> None:
        with pytest.raises(UnknownTokenError):
            await search.find_best(network, Path(("USDC", "WETH", "PEPE")), 1000.0, defi_strategy)


class TestAnalyze:
    """Tests for ArbitrageSearch.analyze."""

    @pytest.mark.asyncio
    async def test_analyze_profitable_path(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
    ) -> None:
        analysis = await search.analyze(network, DEFI_CYCLE, 1000.0, (3000, 3000, 3000))

        assert [(s.token_in, s.token_out) for s in analysis.steps] == [
            ("USDC", "WETH"),
            ("WETH", "ARB"),
            ("ARB", "USDC"),
        ]
        assert analysis.steps[0].amount_out == pytest.approx(0.5)
        assert analysis.steps[1].amount_in == pytest.approx(0.5)
        assert analysis.output_amount == pytest.approx(1015.0)
        assert analysis.net_profit == pytest.approx(13.0)
        assert analysis.profitable

        summary = analysis.to_dict()["summary"]
        assert summary["net_profit_pct"] == pytest.approx(1.3)

    @pytest.mark.asyncio
    async def test_analyze_skips_pool_validation(
        self,
        network: Network,
        profitable_defi_provider: ScriptedChainProvider,
        search: ArbitrageSearch,
    ) -> None:
        await search.analyze(network, DEFI_CYCLE, 1000.0, (3000, 3000, 3000))

        assert profitable_defi_provider.pool_calls == 0

    @pytest.mark.asyncio
    async def test_analyze_missing_liquidity(
        self,
        network: Network,
        search: ArbitrageSearch,
    ) -> None:
        with pytest.raises(NoLiquidityError, match="No liquidity for USDC → DAI"):
            await search.analyze(network, Path(("USDC", "DAI", "WETH")), 1000.0, (500, 500, 500))

    @pytest.mark.asyncio
    async def test_analyze_invalid_fee(
        self,
        network: Network,
        search: ArbitrageSearch,
    ) -> None:
        with pytest.raises(InvalidPathError):
            await search.analyze(network, DEFI_CYCLE, 1000.0, (3000, 100, 3000))

    @pytest.mark.asyncio
    async def test_analyze_unknown_token(
        self,
        network: Network,
        search: ArbitrageSearch,
    ) -> None:
        with pytest.raises(UnknownTokenError, match="Token PEPE not found on arbitrum"):
            await search.analyze(network, Path(("USDC", "PEPE", "WETH")), 1000.0, (3000, 3000, 3000))
