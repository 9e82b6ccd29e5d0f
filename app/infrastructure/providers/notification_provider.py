"""Notification service provider."""

from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from app.core.config import get_settings
from app.domain.exceptions import ConfigurationError
from app.domain.interfaces import INotificationService
from app.infrastructure.adapters.notification_adapter import (
    HttpEmailNotificationService,
    LocalNotificationService,
)

logger = structlog.get_logger(__name__)

_notification_service: Optional[INotificationService] = None
_lock = asyncio.Lock()


def _create_notification_service() -> INotificationService:
    settings = get_settings()
    provider = settings.EMAIL_PROVIDER.lower()

    if provider == "local":
        return LocalNotificationService()

    if provider == "http":
        if not settings.EMAIL_API_URL:
            raise ConfigurationError("EMAIL_API_URL is required when EMAIL_PROVIDER=http")
        return HttpEmailNotificationService(
            api_url=settings.EMAIL_API_URL,
            api_key=settings.EMAIL_API_KEY,
            sender=settings.EMAIL_FROM,
        )

    raise ConfigurationError(
        f"Unsupported email provider: {provider}. Supported providers: 'local', 'http'"
    )


async def get_notification_service() -> INotificationService:
    global _notification_service

    if _notification_service is not None:
        return _notification_service

    async with _lock:
        if _notification_service is not None:
            return _notification_service

        _notification_service = _create_notification_service()
        logger.info("Notification service initialized", service=type(_notification_service).__name__)
        return _notification_service


async def reset_notification_service() -> None:
    global _notification_service
    async with _lock:
        _notification_service = None


__all__ = ["get_notification_service", "reset_notification_service"]
