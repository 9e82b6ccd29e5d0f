"""PostgreSQL implementation of ICustomFieldRepository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import asc
from sqlmodel import select

from app.domain.entities.custom_field import CustomFieldDefinition
from app.domain.repositories.custom_field_repository import ICustomFieldRepository
from app.domain.value_objects import CustomFieldId, UserId
from app.infrastructure.persistence.mappers.custom_field_mapper import CustomFieldMapper
from app.infrastructure.persistence.models.custom_field_table import CustomFieldTable
from app.infrastructure.persistence.repositories.base import PostgresRepositoryBase


class PostgresCustomFieldRepository(PostgresRepositoryBase, ICustomFieldRepository):

    async def get_by_id(self, field_id: CustomFieldId, owner_id: UserId) -> Optional[CustomFieldDefinition]:
        async with self._session("get custom field") as session:
            stmt = select(CustomFieldTable).where(
                CustomFieldTable.id == field_id.value,
                CustomFieldTable.owner_id == owner_id.value,
            )
            row = (await session.execute(stmt)).scalars().first()
            return CustomFieldMapper.to_domain(row) if row else None

    async def list_by_owner(self, owner_id: UserId) -> List[CustomFieldDefinition]:
        async with self._session("list custom fields") as session:
            stmt = (
                select(CustomFieldTable)
                .where(CustomFieldTable.owner_id == owner_id.value)
                .order_by(asc(CustomFieldTable.order), asc(CustomFieldTable.created_at))
            )
            rows = (await session.execute(stmt)).scalars().all()
        return [CustomFieldMapper.to_domain(row) for row in rows]

    async def save(self, definition: CustomFieldDefinition) -> CustomFieldDefinition:
        async with self._session("save custom field") as session:
            existing = await session.get(CustomFieldTable, definition.id.value)
            if existing:
                CustomFieldMapper.update_table_from_domain(existing, definition)
            else:
                session.add(CustomFieldMapper.to_table(definition))
        return definition

    async def delete(self, field_id: CustomFieldId, owner_id: UserId) -> bool:
        async with self._session("delete custom field") as session:
            stmt = select(CustomFieldTable).where(
                CustomFieldTable.id == field_id.value,
                CustomFieldTable.owner_id == owner_id.value,
            )
            row = (await session.execute(stmt)).scalars().first()
            if not row:
                return False
            await session.delete(row)
            return True


__all__ = ["PostgresCustomFieldRepository"]
