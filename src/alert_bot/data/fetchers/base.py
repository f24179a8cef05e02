from abc import ABC, abstractmethod
from typing import Any

from src.alert_bot.models import CandleSeries


class BaseFetcher(ABC):
    """Abstract base class for market data sources.

    A fetcher returns the most recent one-minute candles for a pair, or
    ``None`` when the data is unavailable. Fetch failures are consumed as
    "no data" and never propagated to the caller.

    Attributes:
        source_id (str): Short name of the data source (e.g., 'cryptocompare').
    """

    def __init__(self, source_id: str):
        """Initialize the fetcher.

        Args:
            source_id: The unique identifier for the data source.
        """
        self.source_id = source_id

    @abstractmethod
    async def fetch_candles(
        self, pair: str, quote: str = "USDT", limit: int = 10
    ) -> CandleSeries | None:
        """Fetch the latest one-minute candles for a pair.

        Args:
            pair: The base asset symbol (e.g., 'BTC').
            quote: The quote currency symbol (e.g., 'USDT').
            limit: The number of candles to request.

        Returns:
            Candles ordered oldest first, or None if the fetch failed.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release any resources held by the fetcher (e.g., HTTP sessions)."""
        pass

    async def __aenter__(self) -> "BaseFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()
