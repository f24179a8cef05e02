"""Models for alert-bot."""

from src.alert_bot.models.candle import Candle, CandleSeries
from src.alert_bot.models.metrics import Metrics
from src.alert_bot.models.recommendation import Recommendation, RecommendationAction
from src.alert_bot.models.telegram import ParseMode, SendMessageRequest

__all__ = [
    # Candle
    "Candle",
    "CandleSeries",
    # Metrics
    "Metrics",
    # Recommendation
    "Recommendation",
    "RecommendationAction",
    # Telegram
    "ParseMode",
    "SendMessageRequest",
]
