"""Domain repository contract for user accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.entities.account import UserAccount
from app.domain.value_objects import UserId


class IUserAccountRepository(ABC):
    """Persistence operations for the accounts synced from token claims."""

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[UserAccount]:
        """Load an account by identifier."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserAccount]:
        """Load an account by (case-insensitive) email."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, account: UserAccount) -> UserAccount:
        """Insert or update an account."""
        raise NotImplementedError


__all__ = ["IUserAccountRepository"]
