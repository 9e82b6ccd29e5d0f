"""Unit tests for ActivityLogApplicationService."""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from app.application.activity_log_service import ActivityLogApplicationService
from app.application.dependencies.activity_log_dependencies import ActivityLogDependencies
from app.domain.entities.activity_log import ActivityAction, ResourceType
from app.domain.exceptions import InsufficientPermissionsError, PlanFeatureUnavailableError
from tests.mocks.mock_repositories import MockActivityLogRepository


@pytest.fixture
def activity_log_repository():
    return MockActivityLogRepository()


@pytest.fixture
def activity_log_service(activity_log_repository):
    return ActivityLogApplicationService(
        ActivityLogDependencies(activity_log_repository=activity_log_repository, page_limit=2)
    )


class TestLogActivity:

    @pytest.mark.asyncio
    async def test_records_acting_user(self, activity_log_service, activity_log_repository, member_workspace):
        logged = await activity_log_service.log_activity(
            member_workspace,
            ActivityAction.CV_UPLOADED,
            ResourceType.CV,
            resource_id="cv-1",
            resource_name="thandi_cv.pdf",
            metadata={"file_size": 2048},
        )

        assert logged is True
        [entry] = activity_log_repository.entries
        assert entry.owner_id == member_workspace.owner_id
        assert entry.user_id == member_workspace.user_id
        assert entry.user_email == "member@example.com"
        assert entry.user_name == "Team Member"
        assert entry.role == "member"
        assert entry.is_team_member_action
        assert entry.metadata == {"file_size": 2048}

    @pytest.mark.asyncio
    async def test_failures_are_swallowed(self, activity_log_service, activity_log_repository, workspace):
        activity_log_repository.add = AsyncMock(side_effect=RuntimeError("database unavailable"))

        logged = await activity_log_service.log_activity(workspace, ActivityAction.CV_DELETED, ResourceType.CV)

        assert logged is False


class TestGetActivityLogs:

    @pytest.mark.asyncio
    async def test_newest_first_with_page_limit(self, activity_log_service, activity_log_repository, workspace):
        for action in (ActivityAction.CV_UPLOADED, ActivityAction.CV_VIEWED, ActivityAction.CV_DELETED):
            await activity_log_service.log_activity(workspace, action, ResourceType.CV)
        base = datetime(2024, 1, 1)
        for offset, entry in enumerate(activity_log_repository.entries):
            entry.created_at = base + timedelta(minutes=offset)

        entries = await activity_log_service.get_activity_logs(workspace)

        assert [e.action for e in entries] == [ActivityAction.CV_DELETED, ActivityAction.CV_VIEWED]

    @pytest.mark.asyncio
    async def test_admin_can_read(self, activity_log_service, admin_workspace):
        assert await activity_log_service.get_activity_logs(admin_workspace) == []

    @pytest.mark.asyncio
    async def test_member_cannot_read(self, activity_log_service, member_workspace):
        with pytest.raises(InsufficientPermissionsError):
            await activity_log_service.get_activity_logs(member_workspace)

    @pytest.mark.asyncio
    async def test_plan_gate(self, activity_log_service, free_workspace):
        with pytest.raises(PlanFeatureUnavailableError):
            await activity_log_service.get_activity_logs(free_workspace)
