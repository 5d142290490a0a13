"""
Opportunity ranking and scan summary.

Sorts the opportunities of a scan by net profit percentage, keeps the top
N and summarises the result for presentation.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from triarb.config.constants import TOP_OPPORTUNITIES
from triarb.core.types import Opportunity
from triarb.utils.units import round_half_up


NO_OPPORTUNITY_RECOMMENDATION = "No profitable opportunities found. Try different strategy or amount."


@dataclass(slots=True, frozen=True)
class ScanSummary:
    """Aggregate view of a scan's surfaced opportunities."""

    opportunities_found: int
    best_net_profit_pct: float
    best_gross_profit_pct: float
    estimated_gas_cost: float
    average_confidence: int
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "opportunities_found": self.opportunities_found,
            "best_net_profit_pct": self.best_net_profit_pct,
            "best_gross_profit_pct": self.best_gross_profit_pct,
            "estimated_gas_cost": self.estimated_gas_cost,
            "average_confidence": self.average_confidence,
            "recommendation": self.recommendation,
        }


class OpportunityRanker:
    """Ranks opportunities and computes the scan summary."""

    __slots__ = ("_top_n",)

    def __init__(self, top_n: int = TOP_OPPORTUNITIES) -> None:
        self._top_n = top_n

    def rank(self, opportunities: Iterable[Opportunity]) -> list[Opportunity]:
        """
        Sort by net profit percentage, descending, and truncate to the top N.

        The sort is stable, so equal opportunities keep their scan order.
        """
        ranked = sorted(opportunities, key=lambda o: o.net_profit_pct, reverse=True)
        return ranked[: self._top_n]

    def summarize(self, ranked: list[Opportunity], total_found: int | None = None) -> ScanSummary:
        """
        Summarise ranked opportunities.

        Args:
            ranked: Output of `rank`, best first.
            total_found: Opportunities found before truncation (default: len(ranked)).

        Returns:
            ScanSummary; all figures are zero when nothing was found.
        """
        found = len(ranked) if total_found is None else total_found

        if not ranked:
            return ScanSummary(
                opportunities_found=found,
                best_net_profit_pct=0.0,
                best_gross_profit_pct=0.0,
                estimated_gas_cost=0.0,
                average_confidence=0,
                recommendation=NO_OPPORTUNITY_RECOMMENDATION,
            )

        best = ranked[0]
        return ScanSummary(
            opportunities_found=found,
            best_net_profit_pct=best.net_profit_pct,
            best_gross_profit_pct=best.gross_profit_pct,
            estimated_gas_cost=best.gas_cost,
            average_confidence=round_half_up(sum(o.confidence for o in ranked) / len(ranked)),
            recommendation=f"Found {found} opportunities. Execute within 30 seconds.",
        )

    @property
    def top_n(self) -> int:
        return self._top_n
