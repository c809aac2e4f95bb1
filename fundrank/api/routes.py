"""
FundRank API router
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from fundrank.schemas.fund import Fund
from fundrank.schemas.results import (
    ScoredFund,
    FundCluster,
    ContradictionResult,
    ShortlistReport,
)
from fundrank.domain.clustering import ClusteringEngine
from fundrank.domain.contradictions import ContradictionEngine
from fundrank.domain.fee_stats import FeeStatistics, calculate_fee_statistics
from fundrank.pipeline import PipelineOrchestrator

router = APIRouter()

_EXAMPLE_FUNDS = [Fund.model_config["json_schema_extra"]["example"]]


class FundBatchRequest(BaseModel):
    """A batch of fund snapshots"""
    model_config = ConfigDict(
        json_schema_extra={"example": {"funds": _EXAMPLE_FUNDS}}
    )

    funds: list[Fund]


class ShortlistRequest(FundBatchRequest):
    """Shortlist request"""
    model_config = ConfigDict(
        json_schema_extra={"example": {"funds": _EXAMPLE_FUNDS, "limit": 8}}
    )

    limit: Optional[int] = Field(default=None, ge=0)


@router.post("/shortlist", response_model=list[ScoredFund])
async def shortlist(request: ShortlistRequest) -> list[ScoredFund]:
    """
    Ranked shortlist

    Complete funds only, ordered by composite score.
    """
    return ClusteringEngine().get_sorted_best_funds(request.funds, request.limit)


@router.post("/clusters", response_model=list[FundCluster])
async def clusters(request: FundBatchRequest) -> list[FundCluster]:
    """Thematic shortlists with at least two funds each"""
    return ClusteringEngine().get_best_funds_by_category(request.funds)


@router.post("/contradictions", response_model=list[ContradictionResult])
async def contradictions(request: FundBatchRequest) -> list[ContradictionResult]:
    """Copy-vs-data contradictions, one result per fund in request order"""
    return ContradictionEngine().scan(request.funds)


@router.post("/fees/statistics", response_model=FeeStatistics)
async def fee_statistics(request: FundBatchRequest) -> FeeStatistics:
    """Fee disclosure statistics"""
    return calculate_fee_statistics(request.funds)


@router.post("/report", response_model=ShortlistReport)
async def report(request: ShortlistRequest) -> ShortlistReport:
    """
    Full report

    - ranked shortlist
    - thematic clusters
    - contradiction findings
    - summary and insights
    """
    try:
        orchestrator = PipelineOrchestrator(shortlist_limit=request.limit)
        return orchestrator.run(request.funds)

    except Exception as e:
        logger.exception("Report generation failed")
        raise HTTPException(status_code=500, detail=f"Report generation failed: {e}")


@router.get("/schema/fund")
async def get_fund_schema():
    """Fund input schema"""
    return Fund.model_json_schema()


@router.get("/schema/report")
async def get_report_schema():
    """Report schema"""
    return ShortlistReport.model_json_schema()
