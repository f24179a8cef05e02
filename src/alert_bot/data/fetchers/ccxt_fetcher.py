"""CCXT-based data fetcher implementation."""

import logging
from typing import Any

import ccxt.async_support as ccxt
from pydantic import ValidationError

from src.alert_bot.data.fetchers.base import BaseFetcher
from src.alert_bot.models import Candle, CandleSeries

logger = logging.getLogger(__name__)


class CCXTFetcher(BaseFetcher):
    """CCXT implementation of the market data source.

    Unified OHLCV rows only carry base volume, so the quote volume of each
    candle is estimated as ``close * volume``.
    """

    def __init__(self, exchange_id: str, sandbox: bool = False, timeframe: str = "1m"):
        """Initialize the CCXT fetcher.

        Args:
            exchange_id: The ccxt exchange identifier (e.g., 'binance', 'bitget').
            sandbox: Whether to use the exchange's sandbox/testnet mode.
            timeframe: Candlestick timeframe to request.
        """
        super().__init__(exchange_id)
        self.exchange_id = exchange_id
        self.sandbox = sandbox
        self.timeframe = timeframe
        exchange_class = getattr(ccxt, exchange_id)
        self.exchange = exchange_class({"enableRateLimit": True})
        if sandbox:
            self.exchange.set_sandbox_mode(True)

    async def fetch_candles(
        self, pair: str, quote: str = "USDT", limit: int = 10
    ) -> CandleSeries | None:
        """Fetch the latest candles for ``pair/quote``.

        Args:
            pair: Base asset symbol (e.g., 'BTC').
            quote: Quote currency symbol (e.g., 'USDT').
            limit: Maximum number of candles to retrieve.

        Returns:
            Candles ordered oldest first, or None if the exchange call failed
            or returned rows that cannot be converted.
        """
        symbol = f"{pair}/{quote}"
        try:
            rows = await self.exchange.fetch_ohlcv(symbol, self.timeframe, limit=limit)
        except ccxt.BaseError as e:
            logger.warning(f"Error fetching OHLCV for {symbol} on {self.exchange_id}: {e}")
            return None

        try:
            return self._to_candles(pair, rows)
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Malformed OHLCV data for {symbol} on {self.exchange_id}: {e}")
            return None

    def _to_candles(self, pair: str, rows: list[Any]) -> CandleSeries:
        """Convert [timestamp, open, high, low, close, volume] rows to candles."""
        candles = []
        for ts, open_, high, low, close, volume in rows:
            base_volume = float(volume or 0.0)
            candles.append(
                Candle(
                    symbol=pair,
                    timestamp=int(ts),
                    open=open_,
                    high=high,
                    low=low,
                    close=float(close),
                    volume=base_volume,
                    quote_volume=float(close) * base_volume,
                )
            )
        return sorted(candles, key=lambda c: c.timestamp)

    async def close(self) -> None:
        """Close the exchange connection and release resources."""
        await self.exchange.close()
