"""
Matching API Endpoints

Score CVs against a job specification, one at a time or across the whole
workspace, and read back stored match breakdowns.
"""

import structlog
from fastapi import APIRouter, HTTPException, Path

from app.api.dependencies import MatchingServiceDep, map_domain_exception_to_http
from app.api.schemas.cv_schemas import StoredMatchResponse
from app.api.schemas.matching_schemas import BatchMatchResponse, MatchResultResponse
from app.core.dependencies import WorkspaceDep
from app.domain.exceptions import DomainException
from app.domain.value_objects import CVId, JobSpecId

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/matching", tags=["matching"])


def _parse_ids(job_spec_id: str, cv_id: str = None):
    try:
        return JobSpecId(job_spec_id), CVId(cv_id) if cv_id is not None else None
    except (TypeError, ValueError):
        raise HTTPException(status_code=404, detail="Job specification or CV not found")


@router.post("/job-specs/{job_spec_id}/cvs/{cv_id}", response_model=MatchResultResponse)
async def match_cv(
    workspace: WorkspaceDep,
    matching_service: MatchingServiceDep,
    job_spec_id: str = Path(..., description="Job specification identifier"),
    cv_id: str = Path(..., description="CV identifier"),
) -> MatchResultResponse:
    """Match one parsed CV against a job specification and store the result."""
    spec_id, parsed_cv_id = _parse_ids(job_spec_id, cv_id)
    try:
        result = await matching_service.match_cv(workspace, spec_id, parsed_cv_id)
        return MatchResultResponse.from_result(result)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Match failed", job_spec_id=job_spec_id, cv_id=cv_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to match CV")


@router.post("/job-specs/{job_spec_id}/batch", response_model=BatchMatchResponse)
async def batch_match(
    workspace: WorkspaceDep,
    matching_service: MatchingServiceDep,
    job_spec_id: str = Path(..., description="Job specification identifier"),
) -> BatchMatchResponse:
    """
    Match every parsed CV in the workspace against a job specification.

    Results are ranked by score, highest first.
    """
    spec_id, _ = _parse_ids(job_spec_id)
    try:
        summary = await matching_service.batch_match(workspace, spec_id)
        return BatchMatchResponse.from_summary(summary)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Batch match failed", job_spec_id=job_spec_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to run batch match")


@router.get("/job-specs/{job_spec_id}/cvs/{cv_id}", response_model=StoredMatchResponse)
async def get_match_breakdown(
    workspace: WorkspaceDep,
    matching_service: MatchingServiceDep,
    job_spec_id: str = Path(..., description="Job specification identifier"),
    cv_id: str = Path(..., description="CV identifier"),
) -> StoredMatchResponse:
    spec_id, parsed_cv_id = _parse_ids(job_spec_id, cv_id)
    try:
        stored = await matching_service.get_match_breakdown(workspace, spec_id, parsed_cv_id)
        return StoredMatchResponse.from_domain(stored)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
