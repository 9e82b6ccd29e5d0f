"""Account API Endpoints"""

import structlog
from fastapi import APIRouter

from app.api.dependencies import AccountServiceDep, map_domain_exception_to_http
from app.api.schemas.account_schemas import AccountOverviewResponse
from app.core.dependencies import CurrentUserDep, WorkspaceDep
from app.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("/me", response_model=AccountOverviewResponse)
async def get_my_account(
    current_user: CurrentUserDep,
    workspace: WorkspaceDep,
    account_service: AccountServiceDep,
) -> AccountOverviewResponse:
    """
    The caller's account with the workspace they act in.

    Includes the workspace plan's limits and features and the current CV and
    job spec usage against them.
    """
    try:
        overview = await account_service.get_overview(current_user, workspace)
        return AccountOverviewResponse.from_overview(overview)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
