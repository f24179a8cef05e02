"""Tests for compute_metrics."""

import pytest

from src.alert_bot.analysis import compute_metrics
from src.alert_bot.exceptions import InvalidInputError
from src.alert_bot.models import Candle


def make_series(
    closes: list[float], volumes: list[float], symbol: str = "BTC"
) -> list[Candle]:
    """Build a one-minute candle series, oldest first."""
    return [
        Candle(symbol=symbol, timestamp=1700000000 + i * 60, close=c, quote_volume=v)
        for i, (c, v) in enumerate(zip(closes, volumes))
    ]


class TestLiquidity:
    """Tests for the liquidity metric."""

    def test_liquidity_is_sum_of_quote_volumes(self):
        """Test that liquidity equals the exact sum of quote volumes."""
        series = make_series([100.0] * 4, [1000.0, 2500.5, 0.0, 750.25])

        metrics = compute_metrics(series)

        assert metrics.liquidity == pytest.approx(4250.75)

    def test_liquidity_is_order_independent(self):
        """Test that reordering volumes does not change liquidity."""
        volumes = [12.5, 9000.0, 3.25, 480.0, 77.0]
        forward = compute_metrics(make_series([10.0] * 5, volumes))
        backward = compute_metrics(make_series([10.0] * 5, list(reversed(volumes))))

        assert forward.liquidity == pytest.approx(backward.liquidity)
        assert forward.liquidity >= 0

    def test_zero_volume_window(self):
        """Test that an all-zero window yields zero liquidity."""
        metrics = compute_metrics(make_series([1.0, 2.0], [0.0, 0.0]))

        assert metrics.liquidity == 0


class TestPriceChange:
    """Tests for the price change and last price metrics."""

    def test_price_change_from_first_to_last_close(self):
        """Test that price change compares the oldest and newest closes."""
        series = make_series([100.0, 90.0, 110.0, 103.0], [1.0] * 4)

        metrics = compute_metrics(series)

        assert metrics.price_change_percent == pytest.approx(3.0)
        assert metrics.last_price == 103.0

    def test_negative_price_change(self):
        """Test that a falling window yields a signed negative change."""
        metrics = compute_metrics(make_series([200.0, 190.0], [1.0, 1.0]))

        assert metrics.price_change_percent == pytest.approx(-5.0)

    def test_single_candle_has_zero_change(self):
        """Test that a single-candle series has no price change."""
        metrics = compute_metrics(make_series([42.0], [500.0]))

        assert metrics.price_change_percent == 0
        assert metrics.liquidity == 500.0
        assert metrics.last_price == 42.0


class TestInvalidInput:
    """Tests for rejected series."""

    def test_empty_series_raises(self):
        """Test that an empty series raises InvalidInputError."""
        with pytest.raises(InvalidInputError, match="empty"):
            compute_metrics([])

    def test_invalid_input_is_value_error(self):
        """Test that InvalidInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            compute_metrics([])

    def test_zero_first_close_raises(self):
        """Test that a zero first close is rejected."""
        with pytest.raises(InvalidInputError, match="zero"):
            compute_metrics(make_series([0.0, 1.0], [1.0, 1.0]))

    @pytest.mark.parametrize("last_close", [0.0, -1.0])
    def test_non_positive_last_close_raises(self, last_close):
        """Test that a last close at or below zero is rejected."""
        with pytest.raises(InvalidInputError, match="Last close price must be positive"):
            compute_metrics(make_series([1.0, last_close], [1.0, 1.0]))
