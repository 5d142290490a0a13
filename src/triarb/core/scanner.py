"""
Scan service orchestrator.

Owns the caches, quote service, search and ranker for every configured
network and exposes the operations the API serves: scans, explicit path
analysis and read-only introspection.
"""

import asyncio
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from triarb import __version__
from triarb.config.constants import (
    DEFAULT_MIN_NET_PROFIT_PCT,
    DEFAULT_NETWORK,
    DEFAULT_SCAN_AMOUNT,
    DEFAULT_STRATEGY,
    FEE_TIER_MEDIUM,
    GAS_CACHE_TTL_SECONDS,
    MAX_RPC_RETRIES,
    PATH_DELAY_SECONDS,
    POOL_CACHE_TTL_SECONDS,
    RPC_RETRY_DELAY_SECONDS,
    TOP_OPPORTUNITIES,
)
from triarb.config.networks import build_networks
from triarb.config.settings import Settings
from triarb.config.strategies import STRATEGIES, get_strategy
from triarb.core.errors import ConfigurationError, InvalidPathError, ProviderError
from triarb.core.types import ChainProvider, Clock, Network, Opportunity, Path, PathAnalysis, Strategy
from triarb.market.catalog import TokenCatalog
from triarb.market.gas import GasPriceCache
from triarb.market.pools import PoolValidationCache
from triarb.provider.quotes import QuoteService
from triarb.provider.rate_limiter import RateLimiter
from triarb.provider.web3_provider import Web3ChainProvider
from triarb.simulation.provider import SimulatedChainProvider
from triarb.strategy.gas_model import GasCostModel
from triarb.strategy.impact import PriceImpactEstimator
from triarb.strategy.paths import generate_paths
from triarb.strategy.ranker import OpportunityRanker, ScanSummary
from triarb.strategy.search import ArbitrageSearch
from triarb.telemetry.metrics import MetricsCollector
from triarb.utils.time import LatencyTimer, SystemClock, format_duration_us, get_timestamp_us


logger = logging.getLogger(__name__)


# =============================================================================
# Requests & Reports
# =============================================================================


@dataclass(slots=True, frozen=True)
class ScanRequest:
    """Parameters of a scan."""

    network: str = DEFAULT_NETWORK
    amount: float = DEFAULT_SCAN_AMOUNT
    strategy: str = DEFAULT_STRATEGY
    min_net_profit: float = DEFAULT_MIN_NET_PROFIT_PCT
    max_paths: int | None = None


@dataclass(slots=True, frozen=True)
class PathAnalysisRequest:
    """Parameters of a direct path evaluation."""

    network: str
    path: tuple[str, ...]
    amount: float = DEFAULT_SCAN_AMOUNT
    fees: tuple[int, ...] = (FEE_TIER_MEDIUM, FEE_TIER_MEDIUM, FEE_TIER_MEDIUM)


@dataclass(slots=True)
class ScanReport:
    """Result of a scan: ranked opportunities plus scan metadata."""

    request: ScanRequest
    paths_scanned: int
    scan_time_ms: int
    opportunities_found: int
    opportunities: list[Opportunity]
    summary: ScanSummary
    gas_price_gwei: float
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "scan": {
                "network": self.request.network,
                "strategy": self.request.strategy,
                "amount": self.request.amount,
                "min_net_profit": self.request.min_net_profit,
                "paths_scanned": self.paths_scanned,
                "scan_time_ms": self.scan_time_ms,
                "opportunities_found": self.opportunities_found,
            },
            "opportunities": [o.to_dict() for o in self.opportunities],
            "summary": self.summary.to_dict(),
            "metadata": {
                "timestamp": self.timestamp.isoformat(),
                "gas_price_gwei": self.gas_price_gwei,
            },
        }


# =============================================================================
# Scan Service
# =============================================================================


class ScanService:
    """
    Scanner orchestrator.

    Manages:
    - Request validation (before any external call)
    - Path generation and paced path evaluation
    - Shared pool and gas caches
    - Ranking, summary and metrics
    """

    def __init__(
        self,
        catalog: TokenCatalog,
        provider: ChainProvider,
        clock: Clock | None = None,
        metrics: MetricsCollector | None = None,
        pool_ttl_seconds: float = POOL_CACHE_TTL_SECONDS,
        gas_ttl_seconds: float = GAS_CACHE_TTL_SECONDS,
        max_retries: int = MAX_RPC_RETRIES,
        retry_delay: float = RPC_RETRY_DELAY_SECONDS,
        path_delay: float = PATH_DELAY_SECONDS,
        max_concurrent_paths: int = 1,
        top_n: int = TOP_OPPORTUNITIES,
    ) -> None:
        """
        Initialize the service.

        Args:
            catalog: Supported networks and tokens.
            provider: Chain provider answering quote, pool and gas reads.
            clock: Time source for cache expiry (default: monotonic clock).
            metrics: Metrics collector (default: a new one).
            pool_ttl_seconds: Pool validation entry lifetime.
            gas_ttl_seconds: Gas snapshot lifetime.
            max_retries: Quote retries after a transport failure.
            retry_delay: Base retry delay in seconds.
            path_delay: Pause after each evaluated path in seconds.
            max_concurrent_paths: Paths evaluated at the same time.
            top_n: Opportunities surfaced per scan.
        """
        self._catalog = catalog
        self._provider = provider
        self._clock = clock or SystemClock()
        self._metrics = metrics or MetricsCollector()
        self._path_delay = path_delay
        self._max_concurrent_paths = max(1, max_concurrent_paths)

        self._pools = PoolValidationCache(provider, self._clock, pool_ttl_seconds, self._metrics)
        self._gas_prices = GasPriceCache(provider, self._clock, gas_ttl_seconds, self._metrics)
        self._quotes = QuoteService(provider, max_retries, retry_delay, self._metrics)
        self._gas_model = GasCostModel(self._gas_prices, self._quotes)
        self._search = ArbitrageSearch(
            pools=self._pools,
            impact=PriceImpactEstimator(self._quotes),
            quotes=self._quotes,
            gas_model=self._gas_model,
        )
        self._ranker = OpportunityRanker(top_n)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        provider: ChainProvider | None = None,
    ) -> "ScanService":
        """
        Build a service from application settings.

        Uses the simulated provider when `settings.simulate` is set, the
        RPC provider otherwise, unless a provider is given explicitly.
        """
        networks = build_networks(settings.arbitrum_rpc, settings.polygon_rpc)

        if provider is None:
            if settings.simulate:
                provider = SimulatedChainProvider(networks)
            else:
                provider = Web3ChainProvider(
                    networks,
                    rate_limiter=RateLimiter(settings.rpc_requests_per_second),
                )

        return cls(
            catalog=TokenCatalog(networks),
            provider=provider,
            pool_ttl_seconds=settings.pool_cache_ttl_s,
            gas_ttl_seconds=settings.gas_cache_ttl_s,
            max_retries=settings.max_rpc_retries,
            retry_delay=settings.rpc_retry_delay,
            path_delay=settings.path_delay,
            max_concurrent_paths=settings.max_concurrent_paths,
        )

    # =========================================================================
    # Scanning
    # =========================================================================

    def _validate_scan(self, request: ScanRequest) -> tuple[Network, Strategy]:
        network = self._catalog.get_network(request.network)
        strategy = get_strategy(request.strategy)
        _check_amount(request.amount)
        if not math.isfinite(request.min_net_profit):
            raise ConfigurationError(f"min_net_profit must be finite, got {request.min_net_profit}")
        if request.max_paths is not None and request.max_paths < 1:
            raise ConfigurationError(f"max_paths must be at least 1, got {request.max_paths}")
        return network, strategy

    async def scan(self, request: ScanRequest) -> ScanReport:
        """
        Scan a network for triangular opportunities.

        Args:
            request: Scan parameters.

        Returns:
            ScanReport with at most `top_n` opportunities, best first.

        Raises:
            UnknownNetworkError: If the network is not configured.
            UnknownStrategyError: If the strategy is not configured.
            ConfigurationError: If amount, profit threshold or path cap are invalid.

        Any other failure while evaluating a path cancels the pending paths
        and propagates unchanged.
        """
        network, strategy = self._validate_scan(request)

        limit = request.max_paths or strategy.max_paths
        paths = generate_paths(network, strategy)[:limit]

        logger.info(
            f"Starting {strategy.name} scan on {network.id} with {request.amount:g} "
            f"({len(paths)} paths)"
        )

        start_us = get_timestamp_us()
        semaphore = asyncio.Semaphore(self._max_concurrent_paths)

        async def evaluate(index: int, path: Path) -> Opportunity | None:
            async with semaphore:
                logger.debug(f"Scanning path {index + 1}/{len(paths)}: {path.label}")
                with LatencyTimer() as timer:
                    result = await self._search.find_best(network, path, request.amount, strategy)
                self._metrics.record_latency("path_eval", timer.latency_us)
                self._metrics.increment_counter("paths_scanned")

                if result is not None and result.net_profit_pct >= request.min_net_profit:
                    logger.info(f"Found {path.label}: {result.net_profit_pct:.3f}% net profit")
                else:
                    result = None

                # Pacing for public RPC rate limits
                if index < len(paths) - 1:
                    await asyncio.sleep(self._path_delay)
                return result

        # A failing path cancels the rest of the scan
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [tg.create_task(evaluate(i, p)) for i, p in enumerate(paths)]
        except ExceptionGroup as group:
            raise group.exceptions[0] from None
        found = [r for r in (t.result() for t in tasks) if r is not None]

        scan_time_us = get_timestamp_us() - start_us
        self._metrics.record_latency("scan", scan_time_us)

        ranked = self._ranker.rank(found)
        summary = self._ranker.summarize(ranked, total_found=len(found))
        gas = await self._gas_prices.get(network.id)

        self._metrics.increment_counter("opportunities_found", len(found))
        self._metrics.record_scan(len(paths), len(found), summary.best_net_profit_pct)

        logger.info(
            f"Scan complete on {network.id}: {len(found)} opportunities "
            f"from {len(paths)} paths in {format_duration_us(scan_time_us)}"
        )

        return ScanReport(
            request=request,
            paths_scanned=len(paths),
            scan_time_ms=scan_time_us // 1000,
            opportunities_found=len(found),
            opportunities=ranked,
            summary=summary,
            gas_price_gwei=gas.max_fee_gwei,
        )

    async def analyze_path(self, request: PathAnalysisRequest) -> PathAnalysis:
        """
        Evaluate one explicit path and fee combination.

        Raises:
            UnknownNetworkError: If the network is not configured.
            InvalidPathError: If the path or fees are malformed.
            UnknownTokenError: If a token is not on the network.
            NoLiquidityError: If a hop has no quote.
        """
        network = self._catalog.get_network(request.network)
        if len(request.path) != 3:
            raise InvalidPathError("Path must be array of 3 token symbols")
        _check_amount(request.amount)

        path = Path((request.path[0], request.path[1], request.path[2]))
        fees = tuple(request.fees)
        if len(fees) != 3:
            raise InvalidPathError("Fees must be array of 3 fee tiers")

        return await self._search.analyze(network, path, request.amount, (fees[0], fees[1], fees[2]))

    # =========================================================================
    # Introspection
    # =========================================================================

    def list_tokens(self, network_id: str) -> dict[str, Any]:
        """Tokens of a network grouped by category."""
        network = self._catalog.get_network(network_id)
        return {
            "network": network.id,
            "total_tokens": len(network.tokens),
            "categories": self._catalog.tokens_by_category(network_id),
        }

    def list_strategies(self) -> list[dict[str, Any]]:
        """Configured strategies."""
        return [s.to_dict() for s in STRATEGIES.values()]

    async def health(self) -> dict[str, Any]:
        """
        Report provider connectivity per network.

        A network that cannot report its block height marks the service
        as degraded; the check itself never raises.
        """
        networks: dict[str, Any] = {}
        healthy = True

        for network in self._catalog:
            entry: dict[str, Any] = {
                "tokens": len(network.tokens),
                "categories": network.categories,
            }
            try:
                entry["block"] = await self._provider.block_number(network.id)
                entry["connected"] = True
            except ProviderError as e:
                logger.warning(f"Health check failed for {network.id}: {e}")
                entry["connected"] = False
                entry["error"] = str(e)
                healthy = False
            networks[network.id] = entry

        return {
            "status": "healthy" if healthy else "degraded",
            "timestamp": datetime.now().isoformat(),
            "networks": networks,
            "strategies": list(STRATEGIES),
            "version": __version__,
            "metrics": self._metrics.to_dict(),
        }

    async def close(self) -> None:
        """Release provider resources."""
        await self._provider.close()
        logger.info("Scan service closed")

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def catalog(self) -> TokenCatalog:
        return self._catalog

    @property
    def pools(self) -> PoolValidationCache:
        return self._pools

    @property
    def gas_prices(self) -> GasPriceCache:
        return self._gas_prices

    @property
    def metrics(self) -> MetricsCollector:
        return self._metrics


def _check_amount(amount: float) -> None:
    if not (math.isfinite(amount) and amount > 0):
        raise ConfigurationError(f"Amount must be a positive finite number, got {amount}")
