"""Pytest fixtures shared across the CVSift test suite."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest

# Settings are cached on first use; a valid signing key must be present
# before anything under app/ reads them.
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-cvsift-unit-tests-0123456789")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DB_AUTO_CREATE_TABLES", "false")

from app.application.workspace import WorkspaceContext  # noqa: E402
from app.domain.entities.team import TeamRole  # noqa: E402
from app.domain.plans import PlanName  # noqa: E402
from app.infrastructure.providers import reset_all_providers  # noqa: E402
from tests.fixtures.workspace_fixtures import make_member_workspace, make_user  # noqa: E402


@pytest.fixture(autouse=True)
async def reset_provider_state() -> AsyncIterator[None]:
    """Ensure each test starts with clean provider singletons."""
    await reset_all_providers()
    yield
    await reset_all_providers()


@pytest.fixture
def owner_user():
    return make_user()


@pytest.fixture
def workspace(owner_user) -> WorkspaceContext:
    """Professional-plan workspace acted on by its owner."""
    return WorkspaceContext.personal(owner_user)


@pytest.fixture
def free_workspace() -> WorkspaceContext:
    return WorkspaceContext.personal(make_user(plan=PlanName.FREE))


@pytest.fixture
def member_workspace(owner_user) -> WorkspaceContext:
    return make_member_workspace(owner_user, TeamRole.MEMBER)


@pytest.fixture
def admin_workspace(owner_user) -> WorkspaceContext:
    return make_member_workspace(owner_user, TeamRole.ADMIN, email="admin@example.com")
