"""Concrete factory for creating JobSpecApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.job_spec_dependencies import JobSpecDependencies
from app.infrastructure.factories.activity_log_dependency_factory import get_activity_logger
from app.infrastructure.providers.repository_provider import get_cv_repository, get_job_spec_repository


async def get_job_spec_dependencies() -> JobSpecDependencies:
    """Construct dependencies for the job specification application service."""
    return JobSpecDependencies(
        job_spec_repository=await get_job_spec_repository(),
        cv_repository=await get_cv_repository(),
        activity_logger=await get_activity_logger(),
    )


__all__ = ["get_job_spec_dependencies"]
