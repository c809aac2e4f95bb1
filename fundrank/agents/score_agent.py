"""
Score Agent
Builds the ranked shortlist.
"""

from typing import Optional

from .base import BaseAgent
from fundrank.schemas.fund import Fund
from fundrank.schemas.results import ScoredFund
from fundrank.domain.clustering import ClusteringEngine


class ScoreInput:
    """Score Agent input"""
    def __init__(self, funds: list[Fund], limit: Optional[int] = None):
        self.funds = funds
        self.limit = limit


class ScoreAgent(BaseAgent[ScoreInput, list[ScoredFund]]):
    """
    Shortlist agent

    Scores every fund with the rule-based engines and keeps the best
    complete ones.
    """

    name = "ScoreAgent"

    def __init__(self, engine: Optional[ClusteringEngine] = None):
        super().__init__()
        self.engine = engine or ClusteringEngine()

    def _validate_input(self, input_data: ScoreInput) -> None:
        super()._validate_input(input_data)
        if input_data.limit is not None and input_data.limit < 0:
            raise ValueError(f"{self.name}: limit must be >= 0, got {input_data.limit}")

    def _process(self, input_data: ScoreInput) -> list[ScoredFund]:
        """Score and rank"""
        return self.engine.get_sorted_best_funds(
            funds=input_data.funds,
            limit=input_data.limit,
        )
