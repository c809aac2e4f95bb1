"""
Result schemas
Outputs of the scoring, clustering and contradiction engines.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from .fund import Fund


class ScoreBreakdown(BaseModel):
    """Sub-scores, each 0-100"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    fee_score: float = Field(ge=0, le=100, description="Fee score")
    liquidity_score: float = Field(ge=0, le=100, description="Liquidity score")
    governance_score: float = Field(ge=0, le=100, description="Governance disclosure score")
    minimum_score: float = Field(ge=0, le=100, description="Minimum investment score")


class ScoredFund(BaseModel):
    """
    Scored fund
    Derived from a single Fund; recomputed on demand and never persisted.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    fund: Fund
    score: float = Field(ge=0, le=100, description="Composite score (one decimal)")
    breakdown: ScoreBreakdown
    is_complete: bool = Field(description="Passed the completeness gate")
    why_included: str = Field(description="Short justification")
    rank: Optional[int] = Field(default=None, description="Position in a report")


class FundCluster(BaseModel):
    """
    Thematic shortlist
    Funds are ordered by the cluster's own dominant sub-score.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(examples=["lowest-fees"])
    title: str
    description: str
    funds: list[ScoredFund] = Field(default_factory=list)


class ContradictionSeverity(str, Enum):
    """Contradiction severity"""
    ERROR = "error"
    WARNING = "warning"


class ContradictionLocation(str, Enum):
    """Where the conflicting claim was found"""
    DESCRIPTION = "description"
    DETAILED_DESCRIPTION = "detailedDescription"
    AUTO_GENERATED = "auto-generated"


class Contradiction(BaseModel):
    """Single mismatch between copy (or tags) and structured data"""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True
    )

    field: str = Field(
        description="Structured field path",
        examples=["redemptionTerms.frequency"]
    )
    structured_value: str = Field(examples=["Quarterly"])
    conflicting_text: str = Field(examples=["daily liquidity"])
    location: ContradictionLocation
    severity: ContradictionSeverity
    message: str


class ContradictionResult(BaseModel):
    """
    Contradiction scan of one fund
    Counts and the flag are derived from the contradiction list.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    fund_id: Optional[str] = None
    contradictions: list[Contradiction] = Field(default_factory=list)

    @computed_field(alias="hasContradictions")
    @property
    def has_contradictions(self) -> bool:
        return len(self.contradictions) > 0

    @computed_field(alias="errorCount")
    @property
    def error_count(self) -> int:
        return sum(1 for c in self.contradictions if c.severity == ContradictionSeverity.ERROR)

    @computed_field(alias="warningCount")
    @property
    def warning_count(self) -> int:
        return sum(1 for c in self.contradictions if c.severity == ContradictionSeverity.WARNING)


class ShortlistReport(BaseModel):
    """
    Pipeline output
    Ranked shortlist, thematic clusters and content-review findings for
    one batch of funds.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    created_at: datetime = Field(default_factory=datetime.now)
    total_count: int = Field(description="Funds in the batch")
    complete_count: int = Field(description="Funds passing the completeness gate")

    shortlist: list[ScoredFund] = Field(default_factory=list)
    clusters: list[FundCluster] = Field(default_factory=list)
    contradictions: list[ContradictionResult] = Field(
        default_factory=list,
        description="Only funds with at least one finding"
    )

    summary: str
    insights: list[str] = Field(default_factory=list)
