"""Infrastructure adapters for external services."""

from .notification_adapter import HttpEmailNotificationService, LocalNotificationService
from .storage_adapter import LocalFileStorageAdapter

__all__ = [
    # Storage
    "LocalFileStorageAdapter",

    # Notifications
    "LocalNotificationService",
    "HttpEmailNotificationService",
]
