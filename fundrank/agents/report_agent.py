"""
Report Agent
Assembles the final shortlist report.
"""

from datetime import datetime
from .base import BaseAgent
from fundrank.schemas.fund import Fund
from fundrank.schemas.results import (
    ShortlistReport,
    ScoredFund,
    FundCluster,
    ContradictionResult,
)
from fundrank.domain.contradictions import get_contradiction_summary
from fundrank.domain.fee_stats import (
    calculate_fee_statistics,
    management_fee_range,
    get_management_fee_range_label,
)
from fundrank.domain.scoring import format_score_display


class ReportInput:
    """Report Agent input"""
    def __init__(
        self,
        funds: list[Fund],
        complete_count: int,
        shortlist: list[ScoredFund],
        clusters: list[FundCluster],
        contradiction_results: list[ContradictionResult],
    ):
        self.funds = funds
        self.complete_count = complete_count
        self.shortlist = shortlist
        self.clusters = clusters
        self.contradiction_results = contradiction_results


class ReportAgent(BaseAgent[ReportInput, ShortlistReport]):
    """
    Report agent

    Combines the pipeline results into one report:
    - ranked shortlist with positions
    - thematic clusters
    - funds whose copy contradicts their data
    - summary and insights
    """

    name = "ReportAgent"

    def _process(self, input_data: ReportInput) -> ShortlistReport:
        """Build the report"""

        shortlist = [
            sf.model_copy(update={"rank": i + 1})
            for i, sf in enumerate(input_data.shortlist)
        ]

        flagged = [
            r for r in input_data.contradiction_results
            if r.has_contradictions
        ]

        return ShortlistReport(
            created_at=datetime.now(),
            total_count=len(input_data.funds),
            complete_count=input_data.complete_count,
            shortlist=shortlist,
            clusters=input_data.clusters,
            contradictions=flagged,
            summary=self._generate_summary(shortlist, input_data),
            insights=self._generate_insights(flagged, input_data),
        )

    def _generate_summary(
        self, shortlist: list[ScoredFund], input_data: ReportInput
    ) -> str:
        """Summary sentence"""
        total = len(input_data.funds)

        if not shortlist:
            return (
                f"None of the {total} funds disclose enough data to be ranked."
            )

        top = shortlist[0]
        summary = (
            f"{input_data.complete_count} of {total} funds have enough data to be ranked. "
            f"'{top.fund.name or top.fund.id}' leads with {format_score_display(top.score)}."
        )

        if input_data.clusters:
            titles = ", ".join(c.title for c in input_data.clusters)
            summary += f" Thematic shortlists: {titles}."

        return summary

    def _generate_insights(
        self, flagged: list[ContradictionResult], input_data: ReportInput
    ) -> list[str]:
        """Insights"""
        insights = []

        # 1. fees
        stats = calculate_fee_statistics(input_data.funds)
        if stats.avg_management_fee is not None:
            insights.append(
                f"Average disclosed management fee: {stats.avg_management_fee:.2f}% "
                f"(median {stats.median_management_fee:.2f}%, "
                f"{stats.funds_with_management_fee} of {stats.total_funds} funds disclose it)"
            )

        # 2. fee buckets
        bucket_counts = {}
        for fund in input_data.funds:
            if fund.management_fee is not None:
                bucket = management_fee_range(fund.management_fee)
                bucket_counts[bucket] = bucket_counts.get(bucket, 0) + 1
        if bucket_counts:
            top_bucket = max(bucket_counts, key=bucket_counts.get)
            insights.append(
                f"Most common management fee band: {get_management_fee_range_label(top_bucket)} "
                f"({_funds(bucket_counts[top_bucket])})"
            )

        # 3. incomplete data
        incomplete = len(input_data.funds) - input_data.complete_count
        if incomplete:
            insights.append(
                f"{_funds(incomplete)} left out for missing core data"
            )

        # 4. content review
        if flagged:
            insights.append(
                f"{_funds(len(flagged))} flagged for copy review "
                f"({get_contradiction_summary(_merge(flagged))})"
            )

        return insights


def _funds(count: int) -> str:
    return f"{count} fund" if count == 1 else f"{count} funds"


def _merge(results: list[ContradictionResult]) -> ContradictionResult:
    """Single result holding every finding, for summary wording"""
    return ContradictionResult(
        contradictions=[c for r in results for c in r.contradictions]
    )
