"""Activity Log API Endpoints"""

import structlog
from fastapi import APIRouter

from app.api.dependencies import ActivityLogServiceDep, map_domain_exception_to_http
from app.api.schemas.activity_log_schemas import ActivityLogListResponse, ActivityLogResponse
from app.core.dependencies import WorkspaceDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/activity-logs", tags=["activity-logs"])


@router.get("/", response_model=ActivityLogListResponse)
async def get_activity_logs(
    workspace: WorkspaceDep,
    activity_log_service: ActivityLogServiceDep,
) -> ActivityLogListResponse:
    """Most recent workspace activity, newest first. Owners and admins only."""
    try:
        entries = await activity_log_service.get_activity_logs(workspace)
        return ActivityLogListResponse(
            items=[ActivityLogResponse.from_entity(entry) for entry in entries],
            total=len(entries),
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
