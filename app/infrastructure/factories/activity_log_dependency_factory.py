"""Concrete factory for creating ActivityLogApplicationService dependencies."""

from __future__ import annotations

from app.application.activity_log_service import ActivityLogApplicationService
from app.application.dependencies.activity_log_dependencies import ActivityLogDependencies
from app.core.config import get_settings
from app.infrastructure.providers.repository_provider import get_activity_log_repository


async def get_activity_log_dependencies() -> ActivityLogDependencies:
    """
    Construct dependencies for the activity log application service.

    Uses the repository provider for the singleton repository instance.
    """
    settings = get_settings()
    return ActivityLogDependencies(
        activity_log_repository=await get_activity_log_repository(),
        page_limit=settings.ACTIVITY_LOG_PAGE_LIMIT,
    )


async def get_activity_logger() -> ActivityLogApplicationService:
    """Activity log service handed to other services that record actions."""
    return ActivityLogApplicationService(await get_activity_log_dependencies())


__all__ = ["get_activity_log_dependencies", "get_activity_logger"]
