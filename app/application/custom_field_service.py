"""Application service for workspace custom field definitions and templates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

from app.application.workspace import WorkspaceContext
from app.domain.entities.custom_field import (
    CUSTOM_FIELD_TEMPLATES,
    CustomFieldDefinition,
    CustomFieldTemplate,
    CustomFieldType,
    to_field_name,
)
from app.domain.exceptions import CustomFieldNotFoundError, NotFoundError, ValidationError
from app.domain.plans import PlanFeature
from app.domain.value_objects import CustomFieldId

if TYPE_CHECKING:
    from app.application.dependencies.custom_field_dependencies import CustomFieldDependencies


class CustomFieldApplicationService:
    """Manages the custom fields a workspace attaches to its CVs."""

    def __init__(self, dependencies: CustomFieldDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def list_fields(self, workspace: WorkspaceContext) -> List[CustomFieldDefinition]:
        workspace.require_feature(PlanFeature.CUSTOM_FIELDS)
        fields = await self._deps.custom_field_repository.list_by_owner(workspace.owner_id)
        return sorted(fields, key=lambda definition: (definition.order, definition.created_at))

    @staticmethod
    def _parse_type(value: Any) -> CustomFieldType:
        try:
            return CustomFieldType(str(value or "text").lower())
        except ValueError:
            allowed = ", ".join(field_type.value for field_type in CustomFieldType)
            raise ValidationError(f"Field type must be one of: {allowed}")

    @staticmethod
    def _unique_name(base: str, taken: set) -> str:
        if base not in taken:
            return base
        suffix = 2
        while f"{base}_{suffix}" in taken:
            suffix += 1
        return f"{base}_{suffix}"

    @staticmethod
    def _check_condition(conditional_on: Optional[str], existing: List[CustomFieldDefinition]) -> None:
        if conditional_on and conditional_on not in {definition.name for definition in existing}:
            raise ValidationError(f"Conditional field '{conditional_on}' does not exist")

    async def create_field(self, workspace: WorkspaceContext, data: Dict[str, Any]) -> CustomFieldDefinition:
        """
        Add a custom field to the end of the workspace's field list.

        Args:
            workspace: Workspace that owns the field
            data: label, field_type, required, options, conditional_on, conditional_value

        Returns:
            The stored definition, with a name unique within the workspace

        Raises:
            ValidationError: If the definition is invalid
        """
        workspace.require_feature(PlanFeature.CUSTOM_FIELDS)
        workspace.require_manager("Only team owners and admins can manage custom fields")

        existing = await self._deps.custom_field_repository.list_by_owner(workspace.owner_id)
        label = (data.get("label") or "").strip()
        base_name = to_field_name(data.get("name") or label)
        if not base_name:
            raise ValidationError("Field label is required")

        self._check_condition(data.get("conditional_on"), existing)

        try:
            definition = CustomFieldDefinition(
                id=CustomFieldId.generate(),
                owner_id=workspace.owner_id,
                name=self._unique_name(base_name, {field.name for field in existing}),
                label=label,
                field_type=self._parse_type(data.get("field_type")),
                required=bool(data.get("required", False)),
                options=list(data.get("options") or []),
                conditional_on=data.get("conditional_on") or None,
                conditional_value=data.get("conditional_value"),
                order=max((field.order for field in existing), default=-1) + 1,
            )
        except ValueError as e:
            raise ValidationError(str(e))

        self._logger.info("Creating custom field", owner_id=str(workspace.owner_id), name=definition.name)
        return await self._deps.custom_field_repository.save(definition)

    async def update_field(
        self,
        workspace: WorkspaceContext,
        field_id: CustomFieldId,
        changes: Dict[str, Any],
    ) -> CustomFieldDefinition:
        workspace.require_feature(PlanFeature.CUSTOM_FIELDS)
        workspace.require_manager("Only team owners and admins can manage custom fields")

        definition = await self._deps.custom_field_repository.get_by_id(field_id, workspace.owner_id)
        if definition is None:
            raise CustomFieldNotFoundError(f"Custom field {field_id} not found")

        updates = {key: value for key, value in changes.items() if key not in {"id", "owner_id", "name"}}
        if "field_type" in updates:
            updates["field_type"] = self._parse_type(updates["field_type"])
        if "conditional_on" in updates:
            others = await self._deps.custom_field_repository.list_by_owner(workspace.owner_id)
            self._check_condition(updates["conditional_on"], [f for f in others if f.id != definition.id])
            updates["conditional_on"] = updates["conditional_on"] or None

        try:
            definition.update(**updates)
        except ValueError as e:
            raise ValidationError(str(e))

        saved = await self._deps.custom_field_repository.save(definition)
        self._logger.info("Custom field updated", field_id=str(field_id))
        return saved

    async def delete_field(self, workspace: WorkspaceContext, field_id: CustomFieldId) -> None:
        """Delete a field; fields conditional on it lose their condition."""
        workspace.require_feature(PlanFeature.CUSTOM_FIELDS)
        workspace.require_manager("Only team owners and admins can manage custom fields")

        repo = self._deps.custom_field_repository
        definition = await repo.get_by_id(field_id, workspace.owner_id)
        if definition is None:
            raise CustomFieldNotFoundError(f"Custom field {field_id} not found")

        for dependent in await repo.list_by_owner(workspace.owner_id):
            if dependent.conditional_on == definition.name:
                dependent.update(conditional_on=None, conditional_value=None)
                await repo.save(dependent)

        await repo.delete(field_id, workspace.owner_id)
        self._logger.info("Custom field deleted", field_id=str(field_id), name=definition.name)

    def list_templates(self) -> List[CustomFieldTemplate]:
        return list(CUSTOM_FIELD_TEMPLATES.values())

    async def apply_template(self, workspace: WorkspaceContext, template_key: str) -> List[CustomFieldDefinition]:
        """
        Add a template's fields to the workspace.

        Fields whose name already exists are skipped.

        Returns:
            The definitions that were added
        """
        workspace.require_feature(PlanFeature.CUSTOM_FIELDS)
        workspace.require_manager("Only team owners and admins can manage custom fields")

        template = CUSTOM_FIELD_TEMPLATES.get((template_key or "").lower())
        if template is None:
            raise NotFoundError(f"Custom field template '{template_key}' not found")

        existing = await self._deps.custom_field_repository.list_by_owner(workspace.owner_id)
        taken = {definition.name for definition in existing}
        next_order = max((definition.order for definition in existing), default=-1) + 1

        added: List[CustomFieldDefinition] = []
        for template_field in template.fields:
            if template_field.name in taken:
                continue
            definition = CustomFieldDefinition(
                id=CustomFieldId.generate(),
                owner_id=workspace.owner_id,
                name=template_field.name,
                label=template_field.label,
                field_type=template_field.field_type,
                required=template_field.required,
                options=list(template_field.options),
                order=next_order,
            )
            added.append(await self._deps.custom_field_repository.save(definition))
            taken.add(definition.name)
            next_order += 1

        self._logger.info(
            "Custom field template applied",
            owner_id=str(workspace.owner_id),
            template=template.key,
            added=len(added),
        )
        return added


__all__ = ["CustomFieldApplicationService"]
