"""
Scanner metrics.

In-memory counters for provider traffic and cache behaviour, rolling
latency windows for path evaluation and whole scans, and cumulative
scan statistics. Exposed read-only through the health endpoint.
"""

import time
from collections import Counter, deque
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class LatencyStats:
    """Aggregated latency statistics over one rolling window."""

    min_us: int = 0
    max_us: int = 0
    avg_us: float = 0.0
    p50_us: int = 0
    p95_us: int = 0
    p99_us: int = 0
    count: int = 0

    @classmethod
    def from_samples(cls, samples: "deque[int] | list[int]") -> "LatencyStats":
        if not samples:
            return cls()

        ordered = sorted(samples)
        n = len(ordered)
        return cls(
            min_us=ordered[0],
            max_us=ordered[-1],
            avg_us=sum(ordered) / n,
            p50_us=ordered[n // 2],
            p95_us=ordered[min(int(n * 0.95), n - 1)],
            p99_us=ordered[min(int(n * 0.99), n - 1)],
            count=n,
        )


@dataclass(slots=True)
class ScanStats:
    """Cumulative scan statistics."""

    scans_completed: int = 0
    paths_scanned: int = 0
    opportunities_found: int = 0
    best_net_profit_pct: float = 0.0

    @property
    def hit_rate(self) -> float:
        """Share of scanned paths that produced a reported opportunity."""
        if self.paths_scanned == 0:
            return 0.0
        return self.opportunities_found / self.paths_scanned


class MetricsCollector:
    """
    Counters, latency windows and scan totals for one scan service.

    Counter names used by the scanner: quote_calls, quote_failures,
    pool_lookups, pool_cache_hits, gas_cache_hits, paths_scanned,
    opportunities_found. Latency windows: path_eval, scan.
    """

    def __init__(self, latency_window_size: int = 1000) -> None:
        self._window_size = latency_window_size
        self._latencies: dict[str, deque[int]] = {}
        self._counters: Counter[str] = Counter()
        self._scan_stats = ScanStats()
        self._started = time.monotonic()

    def record_latency(self, name: str, latency_us: int) -> None:
        window = self._latencies.setdefault(name, deque(maxlen=self._window_size))
        window.append(latency_us)

    def increment_counter(self, name: str, value: int = 1) -> None:
        self._counters[name] += value

    def get_counter(self, name: str) -> int:
        return self._counters[name]

    def record_scan(self, paths_scanned: int, opportunities: int, best_net_pct: float) -> None:
        """
        Fold a completed scan into the running totals.

        Args:
            paths_scanned: Number of paths evaluated.
            opportunities: Number of opportunities that passed the filter.
            best_net_pct: Best net profit percentage of the scan.
        """
        stats = self._scan_stats
        stats.scans_completed += 1
        stats.paths_scanned += paths_scanned
        stats.opportunities_found += opportunities
        stats.best_net_profit_pct = max(stats.best_net_profit_pct, best_net_pct)

    def get_latency_stats(self, name: str) -> LatencyStats:
        return LatencyStats.from_samples(self._latencies.get(name, []))

    def get_all_latency_stats(self) -> dict[str, LatencyStats]:
        return {name: LatencyStats.from_samples(window) for name, window in self._latencies.items()}

    @property
    def scan_stats(self) -> ScanStats:
        return self._scan_stats

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of every metric, ready for JSON."""
        return {
            "uptime_seconds": round(self.uptime_seconds, 3),
            "counters": {name: value for name, value in self._counters.items() if value},
            "latencies": {name: asdict(stats) for name, stats in self.get_all_latency_stats().items()},
            "scans": {
                **asdict(self._scan_stats),
                "hit_rate": self._scan_stats.hit_rate,
            },
        }

    def reset(self) -> None:
        self._latencies.clear()
        self._counters.clear()
        self._scan_stats = ScanStats()
        self._started = time.monotonic()
