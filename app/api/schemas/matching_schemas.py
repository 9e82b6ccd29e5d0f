"""Matching API schemas."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from app.application.matching_service import BatchMatchSummary
from app.domain.services.matching_service import MatchResult


class MatchResultResponse(BaseModel):
    """Score and explanation for one CV against one job spec."""

    cv_id: str
    job_spec_id: str
    score: int = Field(..., ge=0, le=100)
    quality: str
    breakdown: Dict[str, Any] = Field(default_factory=dict)
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    insights: List[str] = Field(default_factory=list)
    recommendation: str = ""
    is_good_match: bool = False

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchResultResponse":
        return cls(
            cv_id=str(result.cv_id),
            job_spec_id=str(result.job_spec_id),
            score=result.score,
            quality=result.quality,
            breakdown=result.breakdown.to_dict(),
            strengths=list(result.strengths),
            gaps=list(result.gaps),
            insights=list(result.insights),
            recommendation=result.recommendation,
            is_good_match=result.is_good_match,
        )


class BatchMatchResponse(BaseModel):
    job_spec_id: str
    total: int
    average_score: int
    best_score: int
    results: List[MatchResultResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: BatchMatchSummary) -> "BatchMatchResponse":
        return cls(
            job_spec_id=str(summary.job_spec_id),
            total=summary.total,
            average_score=summary.average_score,
            best_score=summary.best_score,
            results=[MatchResultResponse.from_result(result) for result in summary.results],
        )


__all__ = ["MatchResultResponse", "BatchMatchResponse"]
