"""Telegram Bot API notifier."""

import logging

import httpx

from src.alert_bot.models import ParseMode, SendMessageRequest
from src.alert_bot.notifications.base import BaseNotifier

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramNotifier(BaseNotifier):
    """Send messages to a single Telegram chat through ``sendMessage``."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        parse_mode: ParseMode | None = ParseMode.MARKDOWN,
        client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
    ) -> None:
        """Initialize the notifier.

        Args:
            bot_token: Bot token issued by @BotFather.
            chat_id: Destination chat identifier.
            parse_mode: Rich text format used for every message.
            client: Optional HTTP client, mainly for testing.
            timeout: Request timeout in seconds for the default client.
        """
        if not bot_token or not chat_id:
            raise ValueError("bot_token and chat_id are required")
        self.bot_token = bot_token
        self.chat_id = str(chat_id)
        self.parse_mode = parse_mode
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def send_message_url(self) -> str:
        return f"{TELEGRAM_API_URL}/bot{self.bot_token}/sendMessage"

    async def send(self, text: str) -> bool:
        """Send a message to the configured chat.

        Args:
            text: Message body, formatted for ``parse_mode``.

        Returns:
            True if Telegram accepted the message, False otherwise.
        """
        request = SendMessageRequest(
            chat_id=self.chat_id,
            text=text,
            parse_mode=self.parse_mode,
        )
        payload = request.model_dump(mode="json", exclude_none=True)

        try:
            response = await self.client.post(self.send_message_url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Telegram send failed: {e}")
            return False

        if response.status_code != 200:
            logger.warning(
                f"Telegram API error {response.status_code}: {response.text}"
            )
            return False

        return True

    async def close(self) -> None:
        """Close the HTTP client if this notifier created it."""
        if self._owns_client:
            await self.client.aclose()
