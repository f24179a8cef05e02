"""Recommendation models emitted by strategies."""

from enum import Enum

from pydantic import BaseModel, Field


class RecommendationAction(str, Enum):
    """Available recommendation actions."""

    BUY = "buy"


class Recommendation(BaseModel):
    """Actionable recommendation with target and stop-loss levels."""

    action: RecommendationAction = Field(
        RecommendationAction.BUY, description="Suggested action"
    )
    liquidity: float = Field(..., description="Quote volume over the window")
    price_change_percent: float = Field(..., description="Price change in percent")
    last_price: float = Field(..., description="Last close price")
    target_price: float = Field(..., description="Take-profit level")
    stop_loss: float = Field(..., description="Stop-loss level")

    model_config = {"frozen": True}
