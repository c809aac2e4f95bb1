"""
Clustering engine
Builds the ranked shortlist and the thematic fund clusters.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from loguru import logger

from fundrank.config import settings
from fundrank.schemas.fund import Fund
from fundrank.schemas.results import ScoredFund, FundCluster
from fundrank.domain.scoring import ScoringEngine
from fundrank.domain import explanations


@dataclass(frozen=True)
class ClusterDefinition:
    """
    One thematic shortlist.

    `qualifies` runs on complete funds only; `sort_key` is the cluster's
    dominant sub-score, sorted descending.
    """
    id: str
    title: str
    description: str
    qualifies: Callable[[ScoredFund], bool]
    sort_key: Callable[[ScoredFund], float]
    explain: Callable[[Fund], str]


def _category_has(scored: ScoredFund, *keywords: str) -> bool:
    category = (scored.fund.category or "").lower()
    return any(keyword in category for keyword in keywords)


def _is_capital_preservation(scored: ScoredFund) -> bool:
    risk_band = (scored.fund.risk_band or "").lower()
    return _category_has(scored, "debt", "infrastructure") or risk_band == "conservative"


CLUSTER_DEFINITIONS: list[ClusterDefinition] = [
    ClusterDefinition(
        id="lowest-fees",
        title="Lowest Disclosed Ongoing Fees",
        description="Funds with the most competitive combined management and performance fee structures.",
        qualifies=lambda sf: sf.fund.management_fee is not None,
        sort_key=lambda sf: sf.breakdown.fee_score,
        explain=explanations.explain_fees,
    ),
    ClusterDefinition(
        id="flexible-liquidity",
        title="Most Flexible Liquidity Terms",
        description="Funds with shorter lock-up periods and more frequent redemption options.",
        qualifies=lambda sf: True,
        sort_key=lambda sf: sf.breakdown.liquidity_score,
        explain=explanations.explain_liquidity,
    ),
    ClusterDefinition(
        id="capital-preservation",
        title="Capital Preservation Focus",
        description="Debt and infrastructure funds typically focused on income generation and capital protection.",
        qualifies=_is_capital_preservation,
        sort_key=lambda sf: sf.breakdown.liquidity_score,
        explain=explanations.explain_capital_preservation,
    ),
    ClusterDefinition(
        id="growth-exposure",
        title="Growth & Venture Exposure",
        description="Venture capital and private equity funds targeting higher returns through equity investments.",
        qualifies=lambda sf: _category_has(sf, "venture", "private equity", "equity"),
        sort_key=lambda sf: sf.breakdown.fee_score,
        explain=explanations.explain_growth,
    ),
    ClusterDefinition(
        id="high-transparency",
        title="Higher Transparency",
        description="Funds with comprehensive governance disclosure including auditor, custodian, and regulatory details.",
        qualifies=lambda sf: True,
        sort_key=lambda sf: sf.breakdown.governance_score,
        explain=explanations.explain_transparency,
    ),
]


class ClusteringEngine:
    """
    Shortlist and cluster builder

    Sorting is stable: funds with equal keys keep their input order.
    """

    def __init__(
        self,
        scoring_engine: Optional[ScoringEngine] = None,
        definitions: Optional[list[ClusterDefinition]] = None,
        cluster_size: Optional[int] = None,
        min_cluster_size: Optional[int] = None,
    ):
        self.scoring_engine = scoring_engine or ScoringEngine()
        self.definitions = definitions if definitions is not None else CLUSTER_DEFINITIONS
        self.cluster_size = (
            cluster_size if cluster_size is not None else settings.CLUSTER_SIZE
        )
        self.min_cluster_size = (
            min_cluster_size if min_cluster_size is not None else settings.MIN_CLUSTER_SIZE
        )

    def score_complete(self, funds: Iterable[Fund]) -> list[ScoredFund]:
        """Score every fund and keep those passing the completeness gate"""
        scored = [self.scoring_engine.score(fund) for fund in funds]
        return [sf for sf in scored if sf.is_complete]

    def get_sorted_best_funds(
        self, funds: Iterable[Fund], limit: Optional[int] = None
    ) -> list[ScoredFund]:
        """
        Ranked shortlist.

        Args:
            funds: fund snapshots (any order)
            limit: maximum number of funds returned

        Returns:
            list[ScoredFund]: complete funds, composite score descending
        """
        if limit is None:
            limit = settings.SHORTLIST_LIMIT

        complete = self.score_complete(funds)
        ranked = sorted(complete, key=lambda sf: sf.score, reverse=True)

        logger.debug(f"Shortlist: {min(limit, len(ranked))} of {len(complete)} complete funds")
        return ranked[:limit]

    def get_best_funds_by_category(self, funds: Iterable[Fund]) -> list[FundCluster]:
        """
        Thematic clusters.

        A fund may appear in several clusters. Clusters holding fewer than
        `min_cluster_size` funds are left out.
        """
        complete = self.score_complete(funds)

        clusters = []
        for definition in self.definitions:
            cluster = self._build_cluster(definition, complete)
            if len(cluster.funds) < self.min_cluster_size:
                logger.debug(f"Cluster {definition.id} dropped ({len(cluster.funds)} funds)")
                continue
            clusters.append(cluster)

        return clusters

    def _build_cluster(
        self, definition: ClusterDefinition, complete: list[ScoredFund]
    ) -> FundCluster:
        members = [sf for sf in complete if definition.qualifies(sf)]
        members = sorted(members, key=definition.sort_key, reverse=True)[: self.cluster_size]

        return FundCluster(
            id=definition.id,
            title=definition.title,
            description=definition.description,
            funds=[
                sf.model_copy(update={"why_included": definition.explain(sf.fund)})
                for sf in members
            ],
        )


_default_engine = ClusteringEngine()


def get_sorted_best_funds(funds: Iterable[Fund], limit: int = 8) -> list[ScoredFund]:
    return _default_engine.get_sorted_best_funds(funds, limit)


def get_best_funds_by_category(funds: Iterable[Fund]) -> list[FundCluster]:
    return _default_engine.get_best_funds_by_category(funds)
