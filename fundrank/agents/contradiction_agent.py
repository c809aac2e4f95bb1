"""
Contradiction Agent
Checks a fund's copy and tags against its structured data.
"""

from .base import BaseAgent
from fundrank.schemas.fund import Fund
from fundrank.schemas.results import ContradictionResult
from fundrank.domain.contradictions import ContradictionEngine


class ContradictionAgent(BaseAgent[Fund, ContradictionResult]):
    """
    Content review agent

    Uses the rule-based ContradictionEngine; results are meant to gate
    publication of fund pages.
    """

    name = "ContradictionAgent"

    def __init__(self):
        super().__init__()
        self.engine = ContradictionEngine()

    def _process(self, fund: Fund) -> ContradictionResult:
        """Run the contradiction rules"""
        return self.engine.detect(fund)
