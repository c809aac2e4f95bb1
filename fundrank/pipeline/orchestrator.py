"""
Pipeline Orchestrator
Runs the agents in order and combines their results.
"""

from typing import Optional

from loguru import logger
from fundrank.config import settings
from fundrank.schemas.fund import Fund
from fundrank.schemas.results import ShortlistReport, ContradictionResult
from fundrank.domain.clustering import ClusteringEngine
from fundrank.domain.completeness import is_complete
from fundrank.agents.score_agent import ScoreAgent, ScoreInput
from fundrank.agents.cluster_agent import ClusterAgent
from fundrank.agents.contradiction_agent import ContradictionAgent
from fundrank.agents.report_agent import ReportAgent, ReportInput


class PipelineOrchestrator:
    """
    Pipeline orchestrator

    [Ranking]
    Score → Shortlist → Clusters

    [Content review]
    Contradictions (independent of ranking)

    [Report]
    Report
    """

    def __init__(self, shortlist_limit: Optional[int] = None):
        self.shortlist_limit = (
            shortlist_limit if shortlist_limit is not None else settings.SHORTLIST_LIMIT
        )

        engine = ClusteringEngine()
        self.score_agent = ScoreAgent(engine)
        self.cluster_agent = ClusterAgent(engine)
        self.contradiction_agent = ContradictionAgent()
        self.report_agent = ReportAgent()

        self.logger = logger.bind(component="Pipeline")

    def run(self, funds: list[Fund]) -> ShortlistReport:
        """
        Run the full pipeline over one batch of fund snapshots.
        """
        self.logger.info(f"Starting pipeline for {len(funds)} funds")

        # 1. Completeness
        complete_count = sum(1 for fund in funds if is_complete(fund))
        self.logger.info(f"Step 1: {complete_count}/{len(funds)} funds complete")

        # 2. Shortlist
        self.logger.info("Step 2: Ranking funds...")
        shortlist = self.score_agent.run(
            ScoreInput(funds=funds, limit=self.shortlist_limit)
        )

        # 3. Clusters
        self.logger.info("Step 3: Building clusters...")
        clusters = self.cluster_agent.run(funds)
        self.logger.info(f"{len(clusters)} clusters kept")

        # 4. Contradictions
        self.logger.info("Step 4: Checking copy for contradictions...")
        contradiction_results = self.check_contradictions(funds)

        # 5. Report
        self.logger.info("Step 5: Generating report...")
        report = self.report_agent.run(ReportInput(
            funds=funds,
            complete_count=complete_count,
            shortlist=shortlist,
            clusters=clusters,
            contradiction_results=contradiction_results,
        ))

        self.logger.info(
            f"Pipeline complete: {len(report.shortlist)} shortlisted, "
            f"{len(report.contradictions)} flagged"
        )
        return report

    def check_contradictions(self, funds: list[Fund]) -> list[ContradictionResult]:
        """Content review pass; a failing fund is logged and skipped"""
        results = []
        for fund in funds:
            try:
                results.append(self.contradiction_agent.run(fund))
            except Exception as e:
                self.logger.error(f"Contradiction check failed for {fund.id}: {e}")
        return results
