#!/usr/bin/env python3
"""
Latency Benchmark Script.

Measures path generation, scoring and full simulated scans.
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for direct execution
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from triarb.config.networks import build_networks
from triarb.config.strategies import STRATEGIES
from triarb.core.scanner import ScanRequest, ScanService
from triarb.market.catalog import TokenCatalog
from triarb.simulation.provider import SimulatedChainProvider
from triarb.strategy.confidence import calculate_confidence_score
from triarb.strategy.paths import generate_paths
from triarb.telemetry.metrics import LatencyStats
from triarb.utils.time import LatencyTimer, format_duration_us


def benchmark_path_generation(iterations: int = 1000) -> LatencyStats:
    """Benchmark path generation for the widest strategy."""
    network = build_networks()["arbitrum"]
    strategy = STRATEGIES["aggressive"]
    latencies: list[int] = []

    for _ in range(iterations):
        with LatencyTimer() as timer:
            generate_paths(network, strategy)
        latencies.append(timer.latency_us)

    return LatencyStats.from_samples(latencies)


def benchmark_confidence(iterations: int = 10000) -> LatencyStats:
    """Benchmark confidence scoring."""
    latencies: list[int] = []

    for i in range(iterations):
        gross = 0.1 + (i % 20) / 10
        with LatencyTimer() as timer:
            calculate_confidence_score(gross, gross * 0.8, (0.2, 0.4, 0.9))
        latencies.append(timer.latency_us)

    return LatencyStats.from_samples(latencies)


async def benchmark_simulated_scan(iterations: int = 20) -> tuple[LatencyStats, int]:
    """Benchmark full scans against the simulated provider."""
    networks = build_networks()
    provider = SimulatedChainProvider(networks)
    scanner = ScanService(TokenCatalog(networks), provider, path_delay=0.0)
    request = ScanRequest(network="arbitrum", amount=1000.0, strategy="defi", min_net_profit=-100.0)

    for _ in range(iterations):
        await scanner.scan(request)

    stats = scanner.metrics.get_latency_stats("scan")
    await scanner.close()
    return stats, provider.calls


def format_stats(stats: LatencyStats) -> str:
    return ", ".join(
        f"{label}={format_duration_us(int(value))}"
        for label, value in (
            ("min", stats.min_us),
            ("avg", stats.avg_us),
            ("p50", stats.p50_us),
            ("p99", stats.p99_us),
            ("max", stats.max_us),
        )
    )


def main() -> int:
    """Run all benchmarks."""
    print("=" * 70)
    print("  LATENCY BENCHMARK")
    print("=" * 70)
    print()

    print("Warming up...")
    benchmark_path_generation(10)
    benchmark_confidence(100)
    print()

    print("1. Path Generation, aggressive (1,000 iterations)")
    print(f"   {format_stats(benchmark_path_generation(1000))}")
    print()

    print("2. Confidence Score (10,000 iterations)")
    print(f"   {format_stats(benchmark_confidence(10000))}")
    print()

    print("3. Simulated defi Scan (20 iterations)")
    stats, calls = asyncio.run(benchmark_simulated_scan(20))
    print(f"   {format_stats(stats)}")
    print(f"   provider calls: {calls} (caches warm after the first scan)")
    print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
