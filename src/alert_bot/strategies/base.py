from abc import ABC, abstractmethod

from src.alert_bot.models import Metrics, Recommendation


class BaseStrategy(ABC):
    """Turns window metrics into an optional recommendation.

    Strategies are pure: they hold only their thresholds and never mutate
    state between calls.
    """

    name: str = "base"

    @abstractmethod
    def generate_recommendation(self, metrics: Metrics) -> Recommendation | None:
        """Generate a recommendation based on the window metrics.

        Args:
            metrics: Liquidity and price change for one pair.

        Returns:
            A recommendation, or None when the pair is not actionable.
        """
        ...

    def __call__(self, metrics: Metrics) -> Recommendation | None:
        return self.generate_recommendation(metrics)
