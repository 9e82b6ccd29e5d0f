"""Concrete factory for creating TeamApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.team_dependencies import TeamDependencies
from app.core.config import get_settings
from app.infrastructure.factories.activity_log_dependency_factory import get_activity_logger
from app.infrastructure.providers.notification_provider import get_notification_service
from app.infrastructure.providers.repository_provider import (
    get_team_invite_repository,
    get_team_member_repository,
    get_user_account_repository,
)


async def get_team_dependencies() -> TeamDependencies:
    """
    Construct dependencies for the team application service.

    Invite links point at the configured frontend.
    """
    settings = get_settings()
    return TeamDependencies(
        member_repository=await get_team_member_repository(),
        invite_repository=await get_team_invite_repository(),
        account_repository=await get_user_account_repository(),
        notification_service=await get_notification_service(),
        activity_logger=await get_activity_logger(),
        invite_expiry_days=settings.TEAM_INVITE_EXPIRY_DAYS,
        invite_url_builder=settings.get_invite_url,
    )


__all__ = ["get_team_dependencies"]
