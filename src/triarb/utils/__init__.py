"""Utility functions for the scanner."""

from triarb.utils.time import (
    LatencyTimer,
    SystemClock,
    format_duration_us,
    get_timestamp_us,
)
from triarb.utils.units import (
    from_base_units,
    round_half_up,
    to_base_units,
)


__all__ = [
    "LatencyTimer",
    "SystemClock",
    "format_duration_us",
    "from_base_units",
    "get_timestamp_us",
    "round_half_up",
    "to_base_units",
]
