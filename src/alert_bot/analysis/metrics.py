"""Liquidity and price-change metrics over a short candle window."""

from src.alert_bot.exceptions import InvalidInputError
from src.alert_bot.models import CandleSeries, Metrics


def compute_metrics(series: CandleSeries) -> Metrics:
    """Compute liquidity and price change over exactly the given window.

    Liquidity is the sum of every candle's quote volume. The price change is
    measured from the close of the first (oldest) candle to the close of the
    last (newest) one. No smoothing or outlier handling is applied.

    Args:
        series: Candles ordered oldest first.

    Returns:
        Metrics for the window.

    Raises:
        InvalidInputError: If the series is empty, the first close is zero or
            the last close is not positive.
    """
    if not series:
        raise InvalidInputError("Cannot compute metrics for an empty candle series")

    first_price = series[0].close
    last_price = series[-1].close
    if first_price == 0:
        raise InvalidInputError("First close price is zero, price change is undefined")
    if last_price <= 0:
        raise InvalidInputError(f"Last close price must be positive, got {last_price}")

    liquidity = sum(candle.quote_volume for candle in series)
    price_change = (last_price - first_price) / first_price * 100

    return Metrics(
        liquidity=liquidity,
        price_change_percent=price_change,
        last_price=last_price,
    )
