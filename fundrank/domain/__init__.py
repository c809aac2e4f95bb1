"""
FundRank domain package
Rule-based scoring, clustering and contradiction detection.
Pure functions only; nothing here performs I/O.
"""

from .scoring import ScoringEngine, calculate_fund_score, format_score_display
from .completeness import is_complete
from .explanations import generate_why_included
from .clustering import (
    ClusteringEngine,
    ClusterDefinition,
    CLUSTER_DEFINITIONS,
    get_sorted_best_funds,
    get_best_funds_by_category,
)
from .contradictions import (
    ContradictionEngine,
    ContradictionRule,
    CONTRADICTION_RULES,
    TEXT_PATTERNS,
    detect_fund_contradictions,
    get_contradiction_summary,
    scan_funds,
)
from .fee_stats import FeeStatistics, calculate_fee_statistics

__all__ = [
    "ScoringEngine",
    "calculate_fund_score",
    "format_score_display",
    "is_complete",
    "generate_why_included",
    "ClusteringEngine",
    "ClusterDefinition",
    "CLUSTER_DEFINITIONS",
    "get_sorted_best_funds",
    "get_best_funds_by_category",
    "ContradictionEngine",
    "ContradictionRule",
    "CONTRADICTION_RULES",
    "TEXT_PATTERNS",
    "detect_fund_contradictions",
    "get_contradiction_summary",
    "scan_funds",
    "FeeStatistics",
    "calculate_fee_statistics",
]
