"""Derived liquidity and price-change metrics."""

from pydantic import BaseModel, Field


class Metrics(BaseModel):
    """Metrics computed fresh per cycle from a candle series. Never persisted."""

    liquidity: float = Field(
        ..., ge=0, description="Summed quote-currency volume over the window"
    )
    price_change_percent: float = Field(
        ..., description="Signed change between first and last close, in percent"
    )
    last_price: float = Field(..., gt=0, description="Close of the newest candle")

    model_config = {"frozen": True}
