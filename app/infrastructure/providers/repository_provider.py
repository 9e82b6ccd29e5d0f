"""Repository provider utilities."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict

from app.domain.repositories import (
    IActivityLogRepository,
    ICompanyRepository,
    ICustomFieldRepository,
    ICVRepository,
    IEmployeeRepository,
    IJobSpecRepository,
    ISectorTargetRepository,
    ITeamInviteRepository,
    ITeamMemberRepository,
    IUserAccountRepository,
)
from app.infrastructure.persistence.repositories import (
    PostgresActivityLogRepository,
    PostgresCompanyRepository,
    PostgresCustomFieldRepository,
    PostgresCVRepository,
    PostgresEmployeeRepository,
    PostgresJobSpecRepository,
    PostgresSectorTargetRepository,
    PostgresTeamInviteRepository,
    PostgresTeamMemberRepository,
    PostgresUserAccountRepository,
)

_repositories: Dict[str, Any] = {}
_lock = asyncio.Lock()


async def _get_or_create(key: str, factory: Callable[[], Any]) -> Any:
    if key in _repositories:
        return _repositories[key]

    async with _lock:
        if key not in _repositories:
            _repositories[key] = factory()
        return _repositories[key]


async def get_user_account_repository() -> IUserAccountRepository:
    """Return singleton account repository implementation."""
    return await _get_or_create("accounts", PostgresUserAccountRepository)


async def get_cv_repository() -> ICVRepository:
    """Return singleton CV repository adapter satisfying the domain interface."""
    return await _get_or_create("cvs", PostgresCVRepository)


async def get_job_spec_repository() -> IJobSpecRepository:
    return await _get_or_create("job_specs", PostgresJobSpecRepository)


async def get_team_member_repository() -> ITeamMemberRepository:
    return await _get_or_create("team_members", PostgresTeamMemberRepository)


async def get_team_invite_repository() -> ITeamInviteRepository:
    return await _get_or_create("team_invites", PostgresTeamInviteRepository)


async def get_custom_field_repository() -> ICustomFieldRepository:
    return await _get_or_create("custom_fields", PostgresCustomFieldRepository)


async def get_activity_log_repository() -> IActivityLogRepository:
    return await _get_or_create("activity_logs", PostgresActivityLogRepository)


async def get_company_repository() -> ICompanyRepository:
    return await _get_or_create("companies", PostgresCompanyRepository)


async def get_employee_repository() -> IEmployeeRepository:
    return await _get_or_create("employees", PostgresEmployeeRepository)


async def get_sector_target_repository() -> ISectorTargetRepository:
    return await _get_or_create("sector_targets", PostgresSectorTargetRepository)


async def reset_repositories() -> None:
    """Forget every cached repository (tests and shutdown)."""
    async with _lock:
        _repositories.clear()


__all__ = [
    "get_user_account_repository",
    "get_cv_repository",
    "get_job_spec_repository",
    "get_team_member_repository",
    "get_team_invite_repository",
    "get_custom_field_repository",
    "get_activity_log_repository",
    "get_company_repository",
    "get_employee_repository",
    "get_sector_target_repository",
    "reset_repositories",
]
