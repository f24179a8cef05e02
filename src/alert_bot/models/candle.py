"""Candle model for one-minute OHLCV market data."""

from pydantic import AliasChoices, BaseModel, Field


class Candle(BaseModel):
    """Single time-bucketed price/volume sample for one pair.

    Accepts both CryptoCompare histominute points (``time``, ``volumefrom``,
    ``volumeto``) and CCXT-style dicts (``timestamp``, ``volume``,
    ``quoteVolume``). Candles are immutable once received.
    See: https://min-api.cryptocompare.com/documentation?key=Historical&cat=dataHistominute
    """

    symbol: str = Field(..., description="Base asset symbol (e.g., 'BTC')")
    timestamp: int = Field(
        ...,
        validation_alias=AliasChoices("timestamp", "time"),
        description="Candle opening time (Unix timestamp)",
    )

    # OHLCV data
    open: float | None = Field(None, description="Opening price")
    high: float | None = Field(None, description="Highest price during the period")
    low: float | None = Field(None, description="Lowest price during the period")
    close: float = Field(..., description="Closing price")
    volume: float | None = Field(
        None,
        validation_alias=AliasChoices("volume", "volumefrom"),
        description="Trading volume in base currency",
    )
    quote_volume: float = Field(
        ...,
        validation_alias=AliasChoices("quote_volume", "quoteVolume", "volumeto"),
        description="Trading volume in quote currency",
    )

    model_config = {
        "extra": "ignore",
        "frozen": True,
    }


CandleSeries = list[Candle]
