"""Notification adapter implementations for local and production environments."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
import structlog

from app.domain.interfaces import INotificationService

logger = structlog.get_logger(__name__)


class LocalNotificationService(INotificationService):
    """Simple notification service that logs messages locally for development."""

    def __init__(self):
        self._sent_email_count = 0

    async def check_health(self) -> Dict[str, Any]:
        """Check service health."""
        return {
            "status": "healthy",
            "service": "LocalNotificationService",
            "emails_sent": self._sent_email_count,
        }

    async def send_email(
        self,
        to: str,
        subject: str,
        body: str,
        is_html: bool = False
    ) -> bool:
        """Send email notification (logs locally)."""
        self._sent_email_count += 1
        logger.info(
            "Email notification dispatched (local)",
            recipient=to,
            subject=subject,
            is_html=is_html,
            body_length=len(body),
        )
        logger.debug("Email body", recipient=to, body_content=body)
        return True


class HttpEmailNotificationService(INotificationService):
    """Delivers email through an HTTP mail API (JSON POST with bearer key)."""

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str] = None,
        sender: str = "no-reply@cvsift.co.za",
        timeout: float = 30.0,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.sender = sender
        self.timeout = timeout

    async def check_health(self) -> Dict[str, Any]:
        return {
            "status": "healthy" if self.api_url else "unconfigured",
            "service": "HttpEmailNotificationService",
        }

    async def send_email(
        self,
        to: str,
        subject: str,
        body: str,
        is_html: bool = False
    ) -> bool:
        """Send email notification; failures are logged and reported as False."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "from": self.sender,
            "to": to,
            "subject": subject,
            "html" if is_html else "text": body,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
                response.raise_for_status()

            logger.info("Email notification sent", recipient=to, subject=subject)
            return True

        except httpx.HTTPStatusError as e:
            logger.error(
                "Email API HTTP error",
                recipient=to,
                status_code=e.response.status_code,
                error=str(e)
            )
        except httpx.RequestError as e:
            logger.error("Email API request error", recipient=to, error=str(e))

        return False


__all__ = ["LocalNotificationService", "HttpEmailNotificationService"]
