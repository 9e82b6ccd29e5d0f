"""
Job Specification API Endpoints

Create, list, update and delete the job specifications CVs are matched against.
"""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Path, Query, status

from app.api.dependencies import JobSpecServiceDep, map_domain_exception_to_http
from app.api.schemas.base import DeletionResponse
from app.api.schemas.job_spec_schemas import JobSpecCreate, JobSpecResponse, JobSpecUpdate
from app.core.dependencies import WorkspaceDep
from app.domain.exceptions import DomainException
from app.domain.value_objects import JobSpecId

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/job-specs", tags=["job-specs"])


def _parse_job_spec_id(job_spec_id: str) -> JobSpecId:
    try:
        return JobSpecId(job_spec_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=404, detail=f"Job specification {job_spec_id} not found")


@router.post("/", response_model=JobSpecResponse, status_code=status.HTTP_201_CREATED)
async def create_job_spec(
    body: JobSpecCreate,
    workspace: WorkspaceDep,
    job_spec_service: JobSpecServiceDep,
) -> JobSpecResponse:
    """Create a job specification, subject to the plan's job spec limit."""
    try:
        job_spec = await job_spec_service.create_job_spec(workspace, body.model_dump(exclude_none=True))
        return JobSpecResponse.from_entity(job_spec)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to create job spec", owner_id=str(workspace.owner_id), error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create job specification")


@router.get("/", response_model=List[JobSpecResponse])
async def list_job_specs(
    workspace: WorkspaceDep,
    job_spec_service: JobSpecServiceDep,
    active_only: bool = Query(False, description="Only active job specifications"),
) -> List[JobSpecResponse]:
    try:
        job_specs = await job_spec_service.list_job_specs(workspace, active_only=active_only)
        return [JobSpecResponse.from_entity(job_spec) for job_spec in job_specs]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/{job_spec_id}", response_model=JobSpecResponse)
async def get_job_spec(
    workspace: WorkspaceDep,
    job_spec_service: JobSpecServiceDep,
    job_spec_id: str = Path(..., description="Job specification identifier"),
) -> JobSpecResponse:
    try:
        job_spec = await job_spec_service.get_job_spec(workspace, _parse_job_spec_id(job_spec_id))
        return JobSpecResponse.from_entity(job_spec)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/{job_spec_id}", response_model=JobSpecResponse)
async def update_job_spec(
    body: JobSpecUpdate,
    workspace: WorkspaceDep,
    job_spec_service: JobSpecServiceDep,
    job_spec_id: str = Path(..., description="Job specification identifier"),
) -> JobSpecResponse:
    """Update the submitted fields of a job specification."""
    try:
        job_spec = await job_spec_service.update_job_spec(
            workspace,
            _parse_job_spec_id(job_spec_id),
            body.model_dump(exclude_unset=True),
        )
        return JobSpecResponse.from_entity(job_spec)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/{job_spec_id}", response_model=DeletionResponse)
async def delete_job_spec(
    workspace: WorkspaceDep,
    job_spec_service: JobSpecServiceDep,
    job_spec_id: str = Path(..., description="Job specification identifier"),
) -> DeletionResponse:
    """Delete a job specification and the match results stored against it."""
    try:
        cleared = await job_spec_service.delete_job_spec(workspace, _parse_job_spec_id(job_spec_id))
        return DeletionResponse(
            message="Job specification deleted",
            deleted_id=job_spec_id,
            details={"matches_cleared": cleared},
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
