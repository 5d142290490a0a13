"""Search module: path generation, pruning, pricing and ranking."""

from triarb.strategy.confidence import calculate_confidence_score
from triarb.strategy.fees import hop_fee_tiers, select_fee_tiers
from triarb.strategy.gas_model import GasCostModel, gas_units
from triarb.strategy.impact import PriceImpactEstimator, price_impact_pct
from triarb.strategy.paths import PathGenerator, generate_paths
from triarb.strategy.ranker import OpportunityRanker, ScanSummary
from triarb.strategy.search import ArbitrageSearch


__all__ = [
    "ArbitrageSearch",
    "GasCostModel",
    "OpportunityRanker",
    "PathGenerator",
    "PriceImpactEstimator",
    "ScanSummary",
    "calculate_confidence_score",
    "gas_units",
    "generate_paths",
    "hop_fee_tiers",
    "price_impact_pct",
    "select_fee_tiers",
]
