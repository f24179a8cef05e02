"""Chat notifications for alert-bot."""

from src.alert_bot.notifications.base import BaseNotifier
from src.alert_bot.notifications.messages import (
    escape_markdown,
    format_cycle_start,
    format_pair_error,
    format_recommendation,
)
from src.alert_bot.notifications.telegram import TelegramNotifier

__all__ = [
    "BaseNotifier",
    "TelegramNotifier",
    "escape_markdown",
    "format_cycle_start",
    "format_pair_error",
    "format_recommendation",
]
