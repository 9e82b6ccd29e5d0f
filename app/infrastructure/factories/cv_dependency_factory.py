"""Concrete factory for creating CVApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.cv_dependencies import CVDependencies
from app.core.config import get_settings
from app.domain.services.cv_filter_service import CVFilterService
from app.infrastructure.factories.activity_log_dependency_factory import get_activity_logger
from app.infrastructure.providers.repository_provider import (
    get_custom_field_repository,
    get_cv_repository,
)
from app.infrastructure.providers.storage_provider import get_file_storage


async def get_cv_dependencies() -> CVDependencies:
    """
    Construct dependencies for the CV application service.

    Repositories and storage come from their providers; the filter service
    is stateless and built per call.
    """
    settings = get_settings()
    return CVDependencies(
        cv_repository=await get_cv_repository(),
        custom_field_repository=await get_custom_field_repository(),
        file_storage=await get_file_storage(),
        filter_service=CVFilterService(),
        activity_logger=await get_activity_logger(),
        max_file_size=settings.MAX_FILE_SIZE,
    )


__all__ = ["get_cv_dependencies"]
