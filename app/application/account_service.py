"""Application service for user accounts and plan overviews."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

import structlog

from app.application.workspace import CurrentUser, WorkspaceContext
from app.domain.entities.account import UserAccount
from app.domain.plans import PlanFeatures, get_plan_features

if TYPE_CHECKING:
    from app.application.dependencies.account_dependencies import AccountDependencies


@dataclass
class AccountOverview:
    """What the signed-in user can see about their account and workspace."""

    account: UserAccount
    workspace: WorkspaceContext
    plan: PlanFeatures
    usage: Dict[str, int]


class AccountApplicationService:
    """Keeps account rows in step with identity claims."""

    def __init__(self, dependencies: AccountDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def sync_account(self, user: CurrentUser) -> UserAccount:
        """
        Create or refresh the account row for the authenticated user.

        Team members resolve their owner's plan from this row, so it is
        refreshed on every authenticated request that carries new claims.
        """
        repo = self._deps.account_repository
        account = await repo.get_by_id(user.user_id)

        if account is None:
            account = UserAccount(
                id=user.user_id,
                email=user.email,
                display_name=user.display_name,
                plan=user.plan,
            )
            saved = await repo.save(account)
            self._logger.info("Account created", user_id=str(user.user_id), plan=saved.plan.value)
            return saved

        if account.sync_profile(user.email, user.display_name, user.plan.value):
            account = await repo.save(account)
            self._logger.info("Account profile synced", user_id=str(user.user_id), plan=account.plan.value)

        return account

    async def get_account(self, user: CurrentUser) -> Optional[UserAccount]:
        return await self._deps.account_repository.get_by_id(user.user_id)

    async def get_overview(self, user: CurrentUser, workspace: WorkspaceContext) -> AccountOverview:
        """
        Summarise the account, its workspace and the workspace plan usage.

        Args:
            user: Authenticated caller
            workspace: Resolved workspace for the caller

        Returns:
            AccountOverview with plan limits and current counts
        """
        account = await self.sync_account(user)

        cv_count = await self._deps.cv_repository.count_by_owner(workspace.owner_id)
        job_spec_count = await self._deps.job_spec_repository.count_by_owner(workspace.owner_id)

        return AccountOverview(
            account=account,
            workspace=workspace,
            plan=get_plan_features(workspace.plan),
            usage={"cvs": cv_count, "job_specs": job_spec_count},
        )


__all__ = ["AccountApplicationService", "AccountOverview"]
