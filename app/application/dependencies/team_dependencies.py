"""Dependency container for the team collaboration application service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from app.domain.interfaces import INotificationService
from app.domain.repositories.account_repository import IUserAccountRepository
from app.domain.repositories.team_repository import ITeamInviteRepository, ITeamMemberRepository

if TYPE_CHECKING:
    from app.application.activity_log_service import ActivityLogApplicationService


def _default_invite_url(invite_id: str) -> str:
    return f"/accept-invite?inviteId={invite_id}"


@dataclass
class TeamDependencies:
    """Dependencies required by TeamApplicationService."""

    member_repository: ITeamMemberRepository
    invite_repository: ITeamInviteRepository
    account_repository: IUserAccountRepository
    notification_service: INotificationService
    activity_logger: ActivityLogApplicationService
    invite_expiry_days: int = 7
    invite_url_builder: Callable[[str], str] = _default_invite_url


__all__ = ["TeamDependencies"]
