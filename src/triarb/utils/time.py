"""
Time utilities.

Wall-clock microsecond timestamps for reports, a monotonic clock for
cache expiry and a perf-counter timer for latency measurement.
"""

import time


def get_timestamp_us() -> int:
    """Current Unix timestamp in microseconds."""
    return time.time_ns() // 1000


class SystemClock:
    """Monotonic clock in seconds, used for cache expiry."""

    __slots__ = ()

    def now(self) -> float:
        return time.monotonic()


class LatencyTimer:
    """
    Context manager measuring elapsed time in microseconds.

    Uses the performance counter, so readings are immune to wall-clock
    adjustments during a scan.

    Example:
        >>> with LatencyTimer() as timer:
        ...     await search.find_best(network, path, amount, strategy)
        >>> timer.latency_us
    """

    __slots__ = ("start_us", "end_us")

    def __init__(self) -> None:
        self.start_us = 0
        self.end_us = 0

    @property
    def latency_us(self) -> int:
        return self.end_us - self.start_us

    def __enter__(self) -> "LatencyTimer":
        self.start_us = self.end_us = time.perf_counter_ns() // 1000
        return self

    def __exit__(self, *args: object) -> None:
        self.end_us = time.perf_counter_ns() // 1000


_DURATION_UNITS = ((1_000_000, "s"), (1000, "ms"))


def format_duration_us(duration_us: int) -> str:
    """
    Format a microsecond duration for display.

    Examples:
        >>> format_duration_us(500)
        '500μs'
        >>> format_duration_us(1500)
        '1.50ms'
        >>> format_duration_us(1500000)
        '1.50s'
    """
    for scale, unit in _DURATION_UNITS:
        if duration_us >= scale:
            return f"{duration_us / scale:.2f}{unit}"
    return f"{duration_us}μs"
