"""Mapper between custom field definitions and CustomFieldTable rows."""

from __future__ import annotations

from app.domain.entities.custom_field import CustomFieldDefinition, CustomFieldType
from app.domain.value_objects import CustomFieldId, UserId
from app.infrastructure.persistence.models.custom_field_table import CustomFieldTable


class CustomFieldMapper:

    @staticmethod
    def to_domain(table: CustomFieldTable) -> CustomFieldDefinition:
        return CustomFieldDefinition(
            id=CustomFieldId(table.id),
            owner_id=UserId(table.owner_id),
            name=table.name,
            label=table.label,
            field_type=CustomFieldType(table.field_type),
            required=table.required,
            options=list(table.options or []),
            conditional_on=table.conditional_on,
            conditional_value=table.conditional_value,
            order=table.order,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: CustomFieldDefinition) -> CustomFieldTable:
        table = CustomFieldTable(
            id=entity.id.value,
            owner_id=entity.owner_id.value,
            name=entity.name,
            label=entity.label,
            field_type=entity.field_type.value,
            created_at=entity.created_at,
        )
        CustomFieldMapper.update_table_from_domain(table, entity)
        return table

    @staticmethod
    def update_table_from_domain(table: CustomFieldTable, entity: CustomFieldDefinition) -> None:
        table.name = entity.name
        table.label = entity.label
        table.field_type = entity.field_type.value
        table.required = entity.required
        table.options = list(entity.options)
        table.conditional_on = entity.conditional_on
        table.conditional_value = entity.conditional_value
        table.order = entity.order
        table.updated_at = entity.updated_at


__all__ = ["CustomFieldMapper"]
