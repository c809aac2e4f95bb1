"""
FundRank schema package
Input and output models shared by the engines, agents and API.
"""

from .fund import Fund, RedemptionTerms
from .results import (
    ScoreBreakdown,
    ScoredFund,
    FundCluster,
    Contradiction,
    ContradictionLocation,
    ContradictionResult,
    ContradictionSeverity,
    ShortlistReport,
)

__all__ = [
    "Fund",
    "RedemptionTerms",
    "ScoreBreakdown",
    "ScoredFund",
    "FundCluster",
    "Contradiction",
    "ContradictionLocation",
    "ContradictionResult",
    "ContradictionSeverity",
    "ShortlistReport",
]
