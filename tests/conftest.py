"""
Pytest configuration and shared fixtures.

Provides reusable test fixtures for all test modules.
"""

import pytest

from triarb.config.networks import ARBITRUM_TOKENS, build_networks, build_tokens
from triarb.config.strategies import STRATEGIES
from triarb.core.scanner import ScanService
from triarb.core.types import Network, Strategy
from triarb.market.catalog import TokenCatalog
from triarb.market.gas import GasPriceCache
from triarb.market.pools import PoolValidationCache
from triarb.provider.quotes import QuoteService
from triarb.strategy.gas_model import GasCostModel
from triarb.strategy.impact import PriceImpactEstimator
from triarb.strategy.search import ArbitrageSearch
from triarb.telemetry.metrics import MetricsCollector
from tests.mocks.chain import FakeClock, ScriptedChainProvider


# =============================================================================
# Network Fixtures
# =============================================================================

SMALL_CATALOG = ("USDC", "USDT", "DAI", "WETH", "ARB")


@pytest.fixture
def network() -> Network:
    """Arbitrum with a five-token catalog (three stables, WETH, ARB)."""
    full = build_networks()["arbitrum"]
    entries = [entry for entry in ARBITRUM_TOKENS if entry[0] in SMALL_CATALOG]
    return Network(
        id=full.id,
        name=full.name,
        chain_id=full.chain_id,
        rpc_url=full.rpc_url,
        quoter=full.quoter,
        factory=full.factory,
        tokens=build_tokens(entries),
    )


@pytest.fixture
def full_networks() -> dict[str, Network]:
    """Both configured networks with their complete catalogs."""
    return build_networks()


@pytest.fixture
def catalog(network: Network) -> TokenCatalog:
    """Catalog holding only the small test network."""
    return TokenCatalog({network.id: network})


# =============================================================================
# Strategy Fixtures
# =============================================================================


@pytest.fixture
def stable_strategy() -> Strategy:
    return STRATEGIES["stable"]


@pytest.fixture
def defi_strategy() -> Strategy:
    return STRATEGIES["defi"]


# =============================================================================
# Provider Fixtures
# =============================================================================


@pytest.fixture
def provider(network: Network) -> ScriptedChainProvider:
    """Scripted provider with no rates configured."""
    return ScriptedChainProvider(network)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def metrics() -> MetricsCollector:
    return MetricsCollector()


@pytest.fixture
def profitable_defi_provider(provider: ScriptedChainProvider) -> ScriptedChainProvider:
    """
    USDC -> WETH -> ARB -> USDC turning 1000 USDC into 1015 USDC.

    WETH trades at 2000 USDC and gas is 2 gwei, so the 500k gas units of a
    three-hop cycle cost 0.001 WETH = 2 USDC.
    """
    provider.set_rate("USDC", "WETH", 1 / 2000)
    provider.set_rate("WETH", "ARB", 2000.0)
    provider.set_rate("ARB", "USDC", 1.015)
    provider.set_rate("WETH", "USDC", 2000.0)
    provider.set_gas_gwei(2)
    return provider


# =============================================================================
# Component Fixtures
# =============================================================================


@pytest.fixture
def pools(
    provider: ScriptedChainProvider,
    clock: FakeClock,
    metrics: MetricsCollector,
) -> PoolValidationCache:
    return PoolValidationCache(provider, clock, ttl_seconds=300.0, metrics=metrics)


@pytest.fixture
def gas_prices(
    provider: ScriptedChainProvider,
    clock: FakeClock,
    metrics: MetricsCollector,
) -> GasPriceCache:
    return GasPriceCache(provider, clock, ttl_seconds=15.0, metrics=metrics)


@pytest.fixture
def quotes(provider: ScriptedChainProvider, metrics: MetricsCollector) -> QuoteService:
    """Quote service without retry delays."""
    return QuoteService(provider, max_retries=2, retry_delay=0.0, metrics=metrics)


@pytest.fixture
def gas_model(gas_prices: GasPriceCache, quotes: QuoteService) -> GasCostModel:
    return GasCostModel(gas_prices, quotes)


@pytest.fixture
def search(
    pools: PoolValidationCache,
    quotes: QuoteService,
    gas_model: GasCostModel,
) -> ArbitrageSearch:
    return ArbitrageSearch(
        pools=pools,
        impact=PriceImpactEstimator(quotes),
        quotes=quotes,
        gas_model=gas_model,
    )


@pytest.fixture
def scanner(
    catalog: TokenCatalog,
    provider: ScriptedChainProvider,
    clock: FakeClock,
    metrics: MetricsCollector,
) -> ScanService:
    """Scan service over the scripted provider with no pacing delays."""
    return ScanService(
        catalog=catalog,
        provider=provider,
        clock=clock,
        metrics=metrics,
        retry_delay=0.0,
        path_delay=0.0,
    )
