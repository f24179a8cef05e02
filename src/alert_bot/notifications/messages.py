"""Human-readable message texts in Telegram Markdown."""

from datetime import datetime

from src.alert_bot.models import Recommendation

_MARKDOWN_SPECIAL = ("_", "*", "`", "[")

_ACTION_LABELS = {
    "buy": "Buy",
}


def escape_markdown(text: str) -> str:
    """Escape characters with special meaning in legacy Telegram Markdown."""
    for char in _MARKDOWN_SPECIAL:
        text = text.replace(char, f"\\{char}")
    return text


def format_cycle_start(cycle_time: datetime, pair_count: int) -> str:
    return (
        "🚀 *Automatic pair analysis started*\n"
        "-------------------------\n"
        f"📅 Time: {cycle_time.strftime('%Y-%m-%d %H:%M:%S')}\n"
        f"📊 Pairs checked: {pair_count}\n"
        "-------------------------\n"
        "Recommendations will be sent as soon as they are available."
    )


def format_recommendation(
    pair: str,
    recommendation: Recommendation,
    quote: str = "USDT",
    window_minutes: int = 10,
) -> str:
    """Build the alert sent for an actionable pair."""
    action = _ACTION_LABELS.get(recommendation.action.value, recommendation.action.value)
    return (
        f"📊 *Pair analysis:* {escape_markdown(pair)}/{quote}\n"
        "-------------------------\n"
        f"💧 *Liquidity (last {window_minutes} minutes):* "
        f"{recommendation.liquidity:,.2f} {quote}\n"
        f"📈 *Price change:* {recommendation.price_change_percent:.2f}%\n"
        f"💵 *Current price:* {recommendation.last_price:.2f} {quote}\n"
        f"🎯 *Target:* {recommendation.target_price:.2f} {quote}\n"
        f"🛑 *Stop loss:* {recommendation.stop_loss:.2f} {quote}\n"
        "-------------------------\n"
        f"💡 *Recommendation:* {action}"
    )


def format_pair_error(pair: str, error: BaseException) -> str:
    detail = str(error) or type(error).__name__
    return f"⚠️ Error while analyzing pair {escape_markdown(pair)}: {escape_markdown(detail)}"
