"""Mapper between UserAccount entities and UserAccountTable rows."""

from __future__ import annotations

from app.domain.entities.account import UserAccount
from app.domain.plans import resolve_plan
from app.domain.value_objects import UserId
from app.infrastructure.persistence.models.account_table import UserAccountTable


class UserAccountMapper:

    @staticmethod
    def to_domain(table: UserAccountTable) -> UserAccount:
        return UserAccount(
            id=UserId(table.id),
            email=table.email,
            display_name=table.display_name,
            plan=resolve_plan(table.plan),
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: UserAccount) -> UserAccountTable:
        return UserAccountTable(
            id=entity.id.value,
            email=entity.email,
            display_name=entity.display_name,
            plan=entity.plan.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def update_table_from_domain(table: UserAccountTable, entity: UserAccount) -> None:
        table.email = entity.email
        table.display_name = entity.display_name
        table.plan = entity.plan.value
        table.updated_at = entity.updated_at


__all__ = ["UserAccountMapper"]
