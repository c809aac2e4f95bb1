"""
FundRank agent package
Each agent has one job and fixed input/output schemas.
"""

from .base import BaseAgent
from .score_agent import ScoreAgent, ScoreInput
from .cluster_agent import ClusterAgent
from .contradiction_agent import ContradictionAgent
from .report_agent import ReportAgent, ReportInput

__all__ = [
    "BaseAgent",
    "ScoreAgent",
    "ScoreInput",
    "ClusterAgent",
    "ContradictionAgent",
    "ReportAgent",
    "ReportInput",
]
