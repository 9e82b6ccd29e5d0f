"""Domain-layer service interfaces.

These abstractions define the stable contracts that the application layer relies on,
while infrastructure adapters provide concrete implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class IHealthCheck:
    """Health check interface mixin."""

    @abstractmethod
    async def check_health(self) -> Dict[str, Any]:
        """Return health check details."""
        pass


class IFileStorage(IHealthCheck, ABC):
    """Binary storage for uploaded CV files, partitioned per workspace owner."""

    @abstractmethod
    async def save_file(self, owner_id: str, cv_id: str, filename: str, content: bytes) -> str:
        """Persist file content and return its storage path ``{owner}/{cv}/{filename}``."""
        pass

    @abstractmethod
    async def retrieve_file(self, storage_path: str) -> bytes:
        """Return file content for a storage path."""
        pass

    @abstractmethod
    async def delete_file(self, storage_path: str) -> bool:
        """Delete a stored file; returns False if it did not exist."""
        pass


class INotificationService(IHealthCheck, ABC):
    """Notification service interface."""

    @abstractmethod
    async def send_email(self, to: str, subject: str, body: str, is_html: bool = False) -> bool:
        """Send email notification."""
        pass


__all__ = [
    "IHealthCheck",
    "IFileStorage",
    "INotificationService",
]
