"""Tests for the local and HTTP email notification adapters."""

import json

import httpx
import pytest

from app.infrastructure.adapters.notification_adapter import (
    HttpEmailNotificationService,
    LocalNotificationService,
)


@pytest.fixture
def captured_requests():
    return []


@pytest.fixture
def use_transport(monkeypatch, captured_requests):
    """Route the adapter's AsyncClient through a MockTransport answering with ``status_code``."""
    real_client = httpx.AsyncClient

    def install(status_code: int = 202, error: Exception = None):
        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            if error is not None:
                raise error
            return httpx.Response(status_code, json={"id": "msg-1"})

        transport = httpx.MockTransport(handler)
        monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: real_client(transport=transport, **kwargs))

    return install


class TestLocalNotificationService:

    @pytest.mark.asyncio
    async def test_send_email_counts_messages(self):
        service = LocalNotificationService()

        assert await service.send_email("a@example.com", "Invite", "Join my team") is True
        assert await service.send_email("b@example.com", "Invite", "<p>Join</p>", is_html=True) is True

        health = await service.check_health()
        assert health["status"] == "healthy"
        assert health["emails_sent"] == 2


class TestHttpEmailNotificationService:

    @pytest.mark.asyncio
    async def test_posts_json_with_bearer_key(self, use_transport, captured_requests):
        use_transport(202)
        service = HttpEmailNotificationService("https://mail.example.com/send", api_key="key-123")

        sent = await service.send_email("new@example.com", "You're invited", "<p>Hello</p>", is_html=True)

        assert sent is True
        [request] = captured_requests
        assert request.url == "https://mail.example.com/send"
        assert request.headers["Authorization"] == "Bearer key-123"
        assert json.loads(request.content) == {
            "from": "no-reply@cvsift.co.za",
            "to": "new@example.com",
            "subject": "You're invited",
            "html": "<p>Hello</p>",
        }

    @pytest.mark.asyncio
    async def test_plain_text_without_key(self, use_transport, captured_requests):
        use_transport(200)
        service = HttpEmailNotificationService("https://mail.example.com/send")

        await service.send_email("new@example.com", "Subject", "Body")

        [request] = captured_requests
        assert "Authorization" not in request.headers
        assert json.loads(request.content)["text"] == "Body"

    @pytest.mark.asyncio
    async def test_http_error_returns_false(self, use_transport):
        use_transport(500)
        service = HttpEmailNotificationService("https://mail.example.com/send")

        assert await service.send_email("new@example.com", "Subject", "Body") is False

    @pytest.mark.asyncio
    async def test_connection_error_returns_false(self, use_transport):
        use_transport(error=httpx.ConnectError("connection refused"))
        service = HttpEmailNotificationService("https://mail.example.com/send")

        assert await service.send_email("new@example.com", "Subject", "Body") is False

    @pytest.mark.asyncio
    async def test_health_reports_missing_url(self):
        assert (await HttpEmailNotificationService("").check_health())["status"] == "unconfigured"
