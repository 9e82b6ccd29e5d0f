"""Concrete factory for creating MatchingApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.matching_dependencies import MatchingDependencies
from app.core.config import get_settings
from app.domain.services.matching_service import AdvancedMatchingService
from app.infrastructure.providers.repository_provider import get_cv_repository, get_job_spec_repository


async def get_matching_dependencies() -> MatchingDependencies:
    """Construct dependencies for matching workflows, with thresholds from settings."""
    settings = get_settings()
    return MatchingDependencies(
        cv_repository=await get_cv_repository(),
        job_spec_repository=await get_job_spec_repository(),
        matching_service=AdvancedMatchingService(
            skill_threshold=settings.SKILL_MATCH_THRESHOLD,
            location_threshold=settings.LOCATION_MATCH_THRESHOLD,
        ),
    )


__all__ = ["get_matching_dependencies"]
