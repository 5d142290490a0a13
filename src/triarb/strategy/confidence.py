"""Confidence scoring for opportunities."""

from collections.abc import Sequence

from triarb.utils.units import round_half_up


def calculate_confidence_score(
    gross_profit_pct: float,
    net_profit_pct: float,
    impacts: Sequence[float],
) -> int:
    """
    Score an opportunity from 0 to 100.

    Composition:
    - up to 40 points for the net/gross profit ratio
    - 30/20/10 points for a max price impact below 0.5/1.0/1.5 percent
    - 30/20/10/5 points for gross profit above 1.0/0.5/0.2/0.1 percent

    Args:
        gross_profit_pct: Gross profit in percent.
        net_profit_pct: Net profit in percent.
        impacts: Per-hop price impacts in percent.

    Returns:
        Integer score in [0, 100].
    """
    score = 0.0

    if net_profit_pct > 0 and gross_profit_pct > 0:
        score += min(40.0, net_profit_pct / gross_profit_pct * 40)

    max_impact = max(impacts) if impacts else 0.0
    if max_impact < 0.5:
        score += 30
    elif max_impact < 1.0:
        score += 20
    elif max_impact < 1.5:
        score += 10

    if gross_profit_pct > 1.0:
        score += 30
    elif gross_profit_pct > 0.5:
        score += 20
    elif gross_profit_pct > 0.2:
        score += 10
    elif gross_profit_pct > 0.1:
        score += 5

    return max(0, min(100, round_half_up(score)))
