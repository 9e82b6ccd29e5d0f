"""Unit tests for CustomFieldApplicationService."""

import pytest

from app.application.custom_field_service import CustomFieldApplicationService
from app.application.dependencies.custom_field_dependencies import CustomFieldDependencies
from app.application.workspace import WorkspaceContext
from app.domain.entities.custom_field import CustomFieldType
from app.domain.exceptions import (
    CustomFieldNotFoundError,
    InsufficientPermissionsError,
    NotFoundError,
    PlanFeatureUnavailableError,
    ValidationError,
)
from app.domain.value_objects import CustomFieldId
from tests.fixtures.workspace_fixtures import make_user
from tests.mocks.mock_repositories import MockCustomFieldRepository

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def custom_field_repository():
    return MockCustomFieldRepository()


@pytest.fixture
def custom_field_service(custom_field_repository):
    return CustomFieldApplicationService(CustomFieldDependencies(custom_field_repository=custom_field_repository))


# =============================================================================
# CREATE
# =============================================================================


class TestCreateField:

    @pytest.mark.asyncio
    async def test_creates_field_from_label(self, custom_field_service, workspace, custom_field_repository):
        definition = await custom_field_service.create_field(
            workspace,
            {"label": "Notice Period", "field_type": "SELECT", "options": ["1 Month", " ", "3 Months"], "required": True},
        )

        assert definition.name == "notice_period"
        assert definition.field_type == CustomFieldType.SELECT
        assert definition.options == ["1 Month", "3 Months"]
        assert definition.required
        assert definition.order == 0
        assert definition.owner_id == workspace.owner_id
        assert str(definition.id) in custom_field_repository.fields

    @pytest.mark.asyncio
    async def test_duplicate_names_get_suffix(self, custom_field_service, workspace):
        first = await custom_field_service.create_field(workspace, {"label": "Languages"})
        second = await custom_field_service.create_field(workspace, {"label": "languages!"})
        third = await custom_field_service.create_field(workspace, {"label": "Languages"})

        assert [first.name, second.name, third.name] == ["languages", "languages_2", "languages_3"]
        assert [first.order, second.order, third.order] == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_defaults_to_text(self, custom_field_service, workspace):
        definition = await custom_field_service.create_field(workspace, {"label": "Referee"})

        assert definition.field_type == CustomFieldType.TEXT

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "data,message",
        [
            ({"label": ""}, "Field label is required"),
            ({"label": "Colour", "field_type": "colour"}, "Field type must be one of"),
            ({"label": "Shift", "field_type": "select"}, "at least one option"),
            ({"label": "Licence Code", "conditional_on": "driver_license"}, "does not exist"),
        ],
    )
    async def test_invalid_definitions(self, custom_field_service, workspace, data, message):
        with pytest.raises(ValidationError, match=message):
            await custom_field_service.create_field(workspace, data)

    @pytest.mark.asyncio
    async def test_conditional_on_existing_field(self, custom_field_service, workspace):
        await custom_field_service.create_field(workspace, {"label": "Driver License", "field_type": "boolean"})

        definition = await custom_field_service.create_field(
            workspace,
            {"label": "Licence Code", "conditional_on": "driver_license", "conditional_value": "true"},
        )

        assert definition.conditional_on == "driver_license"
        assert definition.conditional_value == "true"

    @pytest.mark.asyncio
    async def test_members_cannot_manage_fields(self, custom_field_service, member_workspace):
        with pytest.raises(InsufficientPermissionsError):
            await custom_field_service.create_field(member_workspace, {"label": "Referee"})

    @pytest.mark.asyncio
    async def test_admins_can_manage_fields(self, custom_field_service, admin_workspace):
        definition = await custom_field_service.create_field(admin_workspace, {"label": "Referee"})

        assert definition.owner_id == admin_workspace.owner_id

    @pytest.mark.asyncio
    async def test_plan_gate(self, custom_field_service, free_workspace):
        with pytest.raises(PlanFeatureUnavailableError):
            await custom_field_service.create_field(free_workspace, {"label": "Referee"})


# =============================================================================
# LIST, UPDATE, DELETE
# =============================================================================


class TestManageFields:

    @pytest.mark.asyncio
    async def test_list_sorted_by_order(self, custom_field_service, workspace, custom_field_repository):
        first = await custom_field_service.create_field(workspace, {"label": "First"})
        second = await custom_field_service.create_field(workspace, {"label": "Second"})
        await custom_field_service.update_field(workspace, first.id, {"order": 5})

        fields = await custom_field_service.list_fields(workspace)

        assert [f.name for f in fields] == ["second", "first"]
        assert second.order == 1

    @pytest.mark.asyncio
    async def test_members_can_list(self, custom_field_service, workspace, member_workspace):
        await custom_field_service.create_field(workspace, {"label": "Referee"})

        assert [f.name for f in await custom_field_service.list_fields(member_workspace)] == ["referee"]

    @pytest.mark.asyncio
    async def test_update_keeps_name(self, custom_field_service, workspace):
        definition = await custom_field_service.create_field(workspace, {"label": "Referee"})

        updated = await custom_field_service.update_field(
            workspace, definition.id, {"label": "Reference Contact", "name": "ignored", "field_type": "number"}
        )

        assert updated.name == "referee"
        assert updated.label == "Reference Contact"
        assert updated.field_type == CustomFieldType.NUMBER

    @pytest.mark.asyncio
    async def test_update_rejects_self_condition(self, custom_field_service, workspace):
        definition = await custom_field_service.create_field(workspace, {"label": "Referee"})

        with pytest.raises(ValidationError):
            await custom_field_service.update_field(workspace, definition.id, {"conditional_on": "referee"})

    @pytest.mark.asyncio
    async def test_update_unknown_field(self, custom_field_service, workspace):
        with pytest.raises(CustomFieldNotFoundError):
            await custom_field_service.update_field(workspace, CustomFieldId.generate(), {"label": "x"})

    @pytest.mark.asyncio
    async def test_delete_clears_dependent_conditions(self, custom_field_service, workspace, custom_field_repository):
        parent = await custom_field_service.create_field(workspace, {"label": "Driver License", "field_type": "boolean"})
        child = await custom_field_service.create_field(
            workspace, {"label": "Licence Code", "conditional_on": "driver_license", "conditional_value": "true"}
        )

        await custom_field_service.delete_field(workspace, parent.id)

        assert str(parent.id) not in custom_field_repository.fields
        remaining = custom_field_repository.fields[str(child.id)]
        assert remaining.conditional_on is None
        assert remaining.conditional_value is None

    @pytest.mark.asyncio
    async def test_cannot_delete_another_workspaces_field(self, custom_field_service, workspace, custom_field_repository):
        definition = await custom_field_service.create_field(workspace, {"label": "Referee"})
        stranger = WorkspaceContext.personal(make_user())

        with pytest.raises(CustomFieldNotFoundError):
            await custom_field_service.delete_field(stranger, definition.id)

        assert str(definition.id) in custom_field_repository.fields


# =============================================================================
# TEMPLATES
# =============================================================================


class TestTemplates:

    def test_lists_builtin_templates(self, custom_field_service):
        keys = [template.key for template in custom_field_service.list_templates()]

        assert keys == ["recruitment", "internal", "trades", "tech"]

    @pytest.mark.asyncio
    async def test_apply_template(self, custom_field_service, workspace):
        added = await custom_field_service.apply_template(workspace, "Recruitment")

        assert [f.name for f in added][:2] == ["notice_period", "salary_expectation"]
        assert len(added) == 6
        assert added[0].options[0] == "Immediate"
        assert [f.order for f in added] == list(range(6))

    @pytest.mark.asyncio
    async def test_apply_template_skips_existing_names(self, custom_field_service, workspace):
        await custom_field_service.create_field(workspace, {"label": "Notice Period"})

        added = await custom_field_service.apply_template(workspace, "recruitment")

        assert "notice_period" not in [f.name for f in added]
        assert len(added) == 5
        assert added[0].order == 1

    @pytest.mark.asyncio
    async def test_unknown_template(self, custom_field_service, workspace):
        with pytest.raises(NotFoundError):
            await custom_field_service.apply_template(workspace, "astronauts")
