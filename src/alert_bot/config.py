"""Configuration management."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from src.alert_bot.exceptions import ConfigurationMissingError

MarketDataSource = Literal["cryptocompare", "ccxt"]

_UPPERCASE = ("QUOTE_SYMBOL", "LOG_LEVEL")


class Settings(BaseModel):
    """Process configuration read once at startup from environment variables."""

    telegram_bot_token: str = Field(..., min_length=1)
    telegram_chat_id: str = Field(..., min_length=1)
    cryptocompare_api_key: str | None = None

    market_data_source: MarketDataSource = "cryptocompare"
    ccxt_exchange: str = "binance"
    pairs_file: Path = Path("pairs.txt")
    quote_symbol: str = "USDT"
    candle_limit: int = Field(10, gt=0)
    cycle_interval_seconds: float = Field(10.0, ge=0)
    cache_ttl_seconds: float | None = Field(None, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ConfigurationMissingError: If a required variable is absent or a
                value cannot be parsed.
        """
        env = os.environ if environ is None else environ

        missing = [
            name
            for name in ("TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID")
            if not env.get(name, "").strip()
        ]
        source = env.get("MARKET_DATA_SOURCE", "cryptocompare").strip().lower()
        if source == "cryptocompare" and not env.get("CRYPTOCOMPARE_API_KEY", "").strip():
            missing.append("CRYPTOCOMPARE_API_KEY")
        if missing:
            raise ConfigurationMissingError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        values = {
            "telegram_bot_token": env["TELEGRAM_BOT_TOKEN"].strip(),
            "telegram_chat_id": env["TELEGRAM_CHAT_ID"].strip(),
            "cryptocompare_api_key": env.get("CRYPTOCOMPARE_API_KEY", "").strip() or None,
            "market_data_source": source,
        }
        optional = {
            "CCXT_EXCHANGE": "ccxt_exchange",
            "PAIRS_FILE": "pairs_file",
            "QUOTE_SYMBOL": "quote_symbol",
            "CANDLE_LIMIT": "candle_limit",
            "CYCLE_INTERVAL_SECONDS": "cycle_interval_seconds",
            "CACHE_TTL_SECONDS": "cache_ttl_seconds",
            "LOG_LEVEL": "log_level",
        }
        for var, field_name in optional.items():
            raw = env.get(var, "").strip()
            if raw:
                values[field_name] = raw.upper() if var in _UPPERCASE else raw

        try:
            settings = cls.model_validate(values)
        except ValidationError as e:
            invalid = ", ".join(
                _env_name(str(err["loc"][0]), optional) for err in e.errors()
            )
            raise ConfigurationMissingError(
                f"Invalid configuration for {invalid}: {e}"
            ) from e

        return settings


def _env_name(field_name: str, optional: Mapping[str, str]) -> str:
    for var, name in optional.items():
        if name == field_name:
            return var
    return field_name.upper()
