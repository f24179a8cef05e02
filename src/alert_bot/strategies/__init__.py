"""Recommendation strategies for alert-bot."""

from src.alert_bot.strategies.base import BaseStrategy
from src.alert_bot.strategies.liquidity_breakout import (
    LiquidityBreakoutStrategy,
    recommend,
)

__all__ = [
    "BaseStrategy",
    "LiquidityBreakoutStrategy",
    "recommend",
]
