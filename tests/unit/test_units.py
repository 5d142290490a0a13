"""Unit tests for unit conversion and time helpers."""

import pytest

from triarb.utils.time import LatencyTimer, format_duration_us
from triarb.utils.units import from_base_units, round_half_up, to_base_units


class TestUnits:
    """Tests for token unit conversions."""

    def test_to_base_units(self) -> None:
        assert to_base_units(1.5, 6) == 1_500_000
        assert to_base_units(1000.0, 18) == 10**21

    def test_to_base_units_truncates(self) -> None:
        assert to_base_units(1.2345678, 6) == 1_234_567
        assert to_base_units(0.0000001, 6) == 0

    def test_from_base_units(self) -> None:
        assert from_base_units(1_500_000, 6) == 1.5
        assert from_base_units(5 * 10**17, 18) == 0.5

    @pytest.mark.parametrize(
        "value,expected",
        [(0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (94.67, 95), (77.5, 78)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestTime:
    """Tests for time utilities."""

    def test_latency_timer(self) -> None:
        with LatencyTimer() as timer:
            sum(range(1000))

        assert timer.latency_us >= 0
        assert timer.end_us >= timer.start_us

    @pytest.mark.parametrize(
        "duration,expected",
        [(500, "500μs"), (1500, "1.50ms"), (1_500_000, "1.50s")],
    )
    def test_format_duration(self, duration: int, expected: str) -> None:
        assert format_duration_us(duration) == expected
