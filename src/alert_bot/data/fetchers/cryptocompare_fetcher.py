"""CryptoCompare histominute data fetcher implementation."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from src.alert_bot.data.fetchers.base import BaseFetcher
from src.alert_bot.exceptions import DataFetchError
from src.alert_bot.models import Candle, CandleSeries

logger = logging.getLogger(__name__)

HISTOMINUTE_URL = "https://min-api.cryptocompare.com/data/v2/histominute"


class CryptoCompareFetcher(BaseFetcher):
    """Fetch one-minute candles from the CryptoCompare REST API."""

    def __init__(
        self,
        api_key: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        """Initialize the CryptoCompare fetcher.

        Args:
            api_key: CryptoCompare API key.
            client: Optional HTTP client, mainly for testing.
            timeout: Request timeout in seconds for the default client.
        """
        super().__init__("cryptocompare")
        self.api_key = api_key
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_candles(
        self, pair: str, quote: str = "USDT", limit: int = 10
    ) -> CandleSeries | None:
        """Fetch the latest one-minute candles for a pair.

        Args:
            pair: Base asset symbol (e.g., 'BTC').
            quote: Quote currency symbol (e.g., 'USDT').
            limit: Number of candles to request.

        Returns:
            Candles ordered oldest first, or None if the request failed.
        """
        try:
            payload = await self._request(pair, quote, limit)
            return self._to_candles(pair, payload)
        except (httpx.HTTPError, DataFetchError) as e:
            logger.warning(f"Error fetching market data for {pair}/{quote}: {e}")
            return None

    async def _request(self, pair: str, quote: str, limit: int) -> dict[str, Any]:
        params = {
            "fsym": pair,
            "tsym": quote,
            "limit": limit,
            "api_key": self.api_key,
        }
        response = await self.client.get(HISTOMINUTE_URL, params=params)
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise DataFetchError(f"Invalid JSON from CryptoCompare: {e}") from e

        if not isinstance(payload, dict):
            raise DataFetchError(
                f"Unexpected CryptoCompare payload type: {type(payload).__name__}"
            )

        # CryptoCompare reports API errors with a 200 status
        if payload.get("Response") == "Error":
            raise DataFetchError(payload.get("Message") or "CryptoCompare error")

        return payload

    def _to_candles(self, pair: str, payload: dict[str, Any]) -> CandleSeries:
        """Convert a histominute payload to a list of candles."""
        data = payload.get("Data")
        rows = data.get("Data") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise DataFetchError("Missing Data.Data in CryptoCompare response")

        try:
            candles = [Candle.model_validate({**row, "symbol": pair}) for row in rows]
        except (TypeError, ValidationError) as e:
            raise DataFetchError(f"Malformed candle in CryptoCompare response: {e}") from e

        return sorted(candles, key=lambda c: c.timestamp)

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.client.aclose()
