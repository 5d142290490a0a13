"""Unit tests for OpportunityRanker."""

import pytest

from triarb.core.types import Opportunity, Path
from triarb.strategy.ranker import NO_OPPORTUNITY_RECOMMENDATION, OpportunityRanker


def make_opportunity(tokens: tuple[str, str, str], net_pct: float, confidence: int) -> Opportunity:
    return Opportunity(
        path=Path(tokens),
        network="arbitrum",
        strategy="defi",
        input_amount=1000.0,
        output_amount=1000.0 + net_pct * 10 + 2,
        gross_profit=net_pct * 10 + 2,
        gross_profit_pct=net_pct + 0.2,
        net_profit=net_pct * 10,
        net_profit_pct=net_pct,
        gas_cost=2.0,
        fees=(3000, 3000, 3000),
        pool_addresses=("0xa", "0xb", "0xc"),
        price_impacts=(0.1, 0.1, 0.1),
        confidence=confidence,
    )


class TestOpportunityRanker:
    """Tests for OpportunityRanker."""

    def test_sorted_by_net_profit_descending(self) -> None:
        ranker = OpportunityRanker()
        opportunities = [
            make_opportunity(("USDC", "WETH", "ARB"), 0.4, 60),
            make_opportunity(("USDT", "WETH", "ARB"), 1.3, 95),
            make_opportunity(("DAI", "WETH", "ARB"), 0.9, 80),
        ]

        ranked = ranker.rank(opportunities)

        assert [o.net_profit_pct for o in ranked] == [1.3, 0.9, 0.4]

    def test_truncated_to_top_n(self) -> None:
        ranker = OpportunityRanker(top_n=2)
        opportunities = [
            make_opportunity(("USDC", "WETH", "ARB"), pct, 50) for pct in (0.1, 0.5, 0.3, 0.7)
        ]

        ranked = ranker.rank(opportunities)

        assert [o.net_profit_pct for o in ranked] == [0.7, 0.5]

    def test_ties_keep_scan_order(self) -> None:
        ranker = OpportunityRanker()
        first = make_opportunity(("USDC", "WETH", "ARB"), 0.5, 50)
        second = make_opportunity(("USDT", "WETH", "ARB"), 0.5, 70)

        assert ranker.rank([first, second]) == [first, second]

    def test_summary(self) -> None:
        ranker = OpportunityRanker()
        ranked = ranker.rank(
            [
                make_opportunity(("USDC", "WETH", "ARB"), 1.3, 95),
                make_opportunity(("USDT", "WETH", "ARB"), 0.4, 60),
            ]
        )

        summary = ranker.summarize(ranked)

        assert summary.opportunities_found == 2
        assert summary.best_net_profit_pct == 1.3
        assert summary.best_gross_profit_pct == pytest.approx(1.5)
        assert summary.estimated_gas_cost == 2.0
        # (95 + 60) / 2 = 77.5
        assert summary.average_confidence == 78
        assert summary.recommendation == "Found 2 opportunities. Execute within 30 seconds."

    def test_summary_reports_total_before_truncation(self) -> None:
        ranker = OpportunityRanker(top_n=1)
        found = [make_opportunity(("USDC", "WETH", "ARB"), pct, 50) for pct in (0.2, 0.4)]

        summary = ranker.summarize(ranker.rank(found), total_found=len(found))

        assert summary.opportunities_found == 2
        assert summary.best_net_profit_pct == 0.4
        assert summary.recommendation.startswith("Found 2 opportunities")

    def test_empty_summary(self) -> None:
        summary = OpportunityRanker().summarize([])

        assert summary.opportunities_found == 0
        assert summary.best_net_profit_pct == 0.0
        assert summary.average_confidence == 0
        assert summary.recommendation == NO_OPPORTUNITY_RECOMMENDATION
        assert summary.to_dict()["recommendation"] == NO_OPPORTUNITY_RECOMMENDATION
