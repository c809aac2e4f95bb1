"""
Cluster Agent
Groups funds into thematic shortlists.
"""

from typing import Optional

from .base import BaseAgent
from fundrank.schemas.fund import Fund
from fundrank.schemas.results import FundCluster
from fundrank.domain.clustering import ClusteringEngine


class ClusterAgent(BaseAgent[list[Fund], list[FundCluster]]):
    """
    Clustering agent

    Wraps ClusteringEngine.get_best_funds_by_category.
    """

    name = "ClusterAgent"

    def __init__(self, engine: Optional[ClusteringEngine] = None):
        super().__init__()
        self.engine = engine or ClusteringEngine()

    def _process(self, funds: list[Fund]) -> list[FundCluster]:
        return self.engine.get_best_funds_by_category(funds)
