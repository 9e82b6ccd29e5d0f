"""PostgreSQL implementation of IUserAccountRepository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from app.domain.entities.account import UserAccount
from app.domain.repositories.account_repository import IUserAccountRepository
from app.domain.value_objects import UserId
from app.infrastructure.persistence.mappers.account_mapper import UserAccountMapper
from app.infrastructure.persistence.models.account_table import UserAccountTable
from app.infrastructure.persistence.repositories.base import PostgresRepositoryBase


class PostgresUserAccountRepository(PostgresRepositoryBase, IUserAccountRepository):

    async def get_by_id(self, user_id: UserId) -> Optional[UserAccount]:
        async with self._session("get account") as session:
            row = await session.get(UserAccountTable, user_id.value)
            return UserAccountMapper.to_domain(row) if row else None

    async def get_by_email(self, email: str) -> Optional[UserAccount]:
        async with self._session("get account by email") as session:
            stmt = select(UserAccountTable).where(UserAccountTable.email == (email or "").strip().lower())
            result = await session.execute(stmt)
            row = result.scalars().first()
            return UserAccountMapper.to_domain(row) if row else None

    async def save(self, account: UserAccount) -> UserAccount:
        async with self._session("save account") as session:
            existing = await session.get(UserAccountTable, account.id.value)
            if existing:
                UserAccountMapper.update_table_from_domain(existing, account)
            else:
                session.add(UserAccountMapper.to_table(account))
        return account


__all__ = ["PostgresUserAccountRepository"]
