"""Tests for message formatting."""

from datetime import datetime

from src.alert_bot.models import Recommendation, RecommendationAction
from src.alert_bot.notifications.messages import (
    escape_markdown,
    format_cycle_start,
    format_pair_error,
    format_recommendation,
)


def make_recommendation() -> Recommendation:
    return Recommendation(
        action=RecommendationAction.BUY,
        liquidity=60000.0,
        price_change_percent=3.0,
        last_price=103.0,
        target_price=108.15,
        stop_loss=97.85,
    )


class TestFormatCycleStart:
    """Tests for the cycle-start message."""

    def test_contains_time_and_pair_count(self):
        """Test that the message reports cycle time and number of pairs."""
        text = format_cycle_start(datetime(2024, 5, 1, 12, 30, 5), 7)

        assert "2024-05-01 12:30:05" in text
        assert "Pairs checked: 7" in text


class TestFormatRecommendation:
    """Tests for the recommendation message."""

    def test_contains_levels(self):
        """Test that liquidity, change, price and levels are rendered."""
        text = format_recommendation("BTC", make_recommendation())

        assert "BTC/USDT" in text
        assert "60,000.00 USDT" in text
        assert "3.00%" in text
        assert "103.00 USDT" in text
        assert "108.15 USDT" in text
        assert "97.85 USDT" in text
        assert "Buy" in text

    def test_uses_quote_and_window(self):
        """Test that quote symbol and window length are configurable."""
        text = format_recommendation("ETH", make_recommendation(), quote="BTC", window_minutes=5)

        assert "ETH/BTC" in text
        assert "last 5 minutes" in text

    def test_escapes_pair(self):
        """Test that the pair is escaped outside of any bold entity."""
        text = format_recommendation("SHIB_1000", make_recommendation())
        header = text.splitlines()[0]

        assert header == "📊 *Pair analysis:* SHIB\\_1000/USDT"


class TestFormatPairError:
    """Tests for the per-pair error message."""

    def test_names_pair_and_error(self):
        """Test that the message names the pair and the error."""
        text = format_pair_error("ETH", RuntimeError("source down"))

        assert "ETH" in text
        assert "source down" in text

    def test_falls_back_to_exception_type(self):
        """Test that an error without a message is named by its type."""
        text = format_pair_error("ETH", KeyError())

        assert "KeyError" in text


class TestEscapeMarkdown:
    """Tests for escape_markdown."""

    def test_escapes_special_characters(self):
        """Test that legacy markdown entities are escaped."""
        assert escape_markdown("a_b*c`d[e") == "a\\_b\\*c\\`d\\[e"

    def test_plain_text_unchanged(self):
        """Test that text without entities is returned as-is."""
        assert escape_markdown("BTC") == "BTC"
