"""Tests for TelegramNotifier with a mocked HTTP transport."""

import json

import httpx
import pytest

from src.alert_bot.models import ParseMode
from src.alert_bot.notifications.telegram import TelegramNotifier


def make_notifier(handler, **kwargs) -> TelegramNotifier:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return TelegramNotifier("123:ABC", "-1001", client=client, **kwargs)


class TestSend:
    """Tests for send method."""

    @pytest.mark.asyncio
    async def test_send_posts_markdown_message(self):
        """Test that send posts chat_id, text and parse_mode to sendMessage."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True, "result": {}})

        notifier = make_notifier(handler)
        result = await notifier.send("*hello*")

        assert result is True
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.telegram.org/bot123:ABC/sendMessage"
        assert json.loads(request.content) == {
            "chat_id": "-1001",
            "text": "*hello*",
            "parse_mode": "Markdown",
        }

    @pytest.mark.asyncio
    async def test_send_without_parse_mode(self):
        """Test that parse_mode is omitted when disabled."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        notifier = make_notifier(handler, parse_mode=None)
        await notifier.send("plain")

        assert "parse_mode" not in json.loads(seen[0].content)

    @pytest.mark.asyncio
    async def test_send_with_html_parse_mode(self):
        """Test that a custom parse mode is forwarded."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        notifier = make_notifier(handler, parse_mode=ParseMode.HTML)
        await notifier.send("<b>hi</b>")

        assert json.loads(seen[0].content)["parse_mode"] == "HTML"

    @pytest.mark.asyncio
    async def test_send_returns_false_on_api_error(self, caplog):
        """Test that a non-200 response is logged and reported as False."""
        notifier = make_notifier(
            lambda request: httpx.Response(
                400, json={"ok": False, "description": "Bad Request: chat not found"}
            )
        )

        assert await notifier.send("hello") is False
        assert "Telegram API error 400" in caplog.text

    @pytest.mark.asyncio
    async def test_send_returns_false_on_transport_error(self):
        """Test that network failures do not raise."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        notifier = make_notifier(handler)

        assert await notifier.send("hello") is False


class TestInit:
    """Tests for TelegramNotifier initialization."""

    def test_requires_token_and_chat(self):
        """Test that missing credentials are rejected."""
        with pytest.raises(ValueError, match="required"):
            TelegramNotifier("", "-1001")

    @pytest.mark.asyncio
    async def test_context_manager_closes_own_client(self):
        """Test that the default client is closed on exit."""
        async with TelegramNotifier("123:ABC", 42) as notifier:
            client = notifier.client
            assert notifier.chat_id == "42"

        assert client.is_closed is True
