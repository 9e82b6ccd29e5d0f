"""Concrete factory for creating AccountApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.account_dependencies import AccountDependencies
from app.infrastructure.providers.repository_provider import (
    get_cv_repository,
    get_job_spec_repository,
    get_user_account_repository,
)


async def get_account_dependencies() -> AccountDependencies:
    """Construct dependencies for the account application service."""
    return AccountDependencies(
        account_repository=await get_user_account_repository(),
        cv_repository=await get_cv_repository(),
        job_spec_repository=await get_job_spec_repository(),
    )


__all__ = ["get_account_dependencies"]
