from src.alert_bot.models import Metrics, Recommendation, RecommendationAction
from src.alert_bot.strategies.base import BaseStrategy

MIN_LIQUIDITY = 50_000
MIN_PRICE_CHANGE_PCT = 2.5
TARGET_MULTIPLIER = 1.05
STOP_LOSS_MULTIPLIER = 0.95


class LiquidityBreakoutStrategy(BaseStrategy):
    """Buy when a liquid pair is rising fast over the window.

    Both thresholds are strict: a pair needs more than ``min_liquidity``
    quote volume and more than ``min_price_change_pct`` percent gain. There
    is no sell or short rule; anything else yields no recommendation.
    """

    name = "liquidity_breakout"

    def __init__(
        self,
        min_liquidity: float = MIN_LIQUIDITY,
        min_price_change_pct: float = MIN_PRICE_CHANGE_PCT,
        target_multiplier: float = TARGET_MULTIPLIER,
        stop_loss_multiplier: float = STOP_LOSS_MULTIPLIER,
    ) -> None:
        self.min_liquidity = min_liquidity
        self.min_price_change_pct = min_price_change_pct
        self.target_multiplier = target_multiplier
        self.stop_loss_multiplier = stop_loss_multiplier

    def generate_recommendation(self, metrics: Metrics) -> Recommendation | None:
        if metrics.liquidity <= self.min_liquidity:
            return None
        if metrics.price_change_percent <= self.min_price_change_pct:
            return None

        return Recommendation(
            action=RecommendationAction.BUY,
            liquidity=metrics.liquidity,
            price_change_percent=metrics.price_change_percent,
            last_price=metrics.last_price,
            target_price=round(metrics.last_price * self.target_multiplier, 2),
            stop_loss=round(metrics.last_price * self.stop_loss_multiplier, 2),
        )


_default_strategy = LiquidityBreakoutStrategy()


def recommend(metrics: Metrics) -> Recommendation | None:
    """Apply the default buy rule (liquidity > 50000 and change > 2.5%)."""
    return _default_strategy.generate_recommendation(metrics)
