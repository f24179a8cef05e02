"""In-memory memo cache of candle series per pair."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from src.alert_bot.models import CandleSeries

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    series: CandleSeries | None
    stored_at: float


class PairCache:
    """Process-lifetime memo store mapping pair symbol to its candle series.

    Entries are populated lazily on the first fetch for a pair. A failed or
    empty fetch is stored too, so the pair is skipped without retry on every
    later cycle. With the default ``ttl_seconds=None`` entries never expire
    and the cache is unbounded for the lifetime of the process.

    Concurrent ``get_or_fetch`` calls for the same pair share one in-flight
    fetch instead of racing to write the entry.

    Attributes:
        ttl_seconds: Optional lifetime of an entry, in seconds.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._pending: dict[str, asyncio.Future[CandleSeries | None]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, pair: str) -> bool:
        """Return True if an entry (series or failure marker) is stored for pair."""
        entry = self._entries.get(pair)
        if entry is None:
            return False
        if self._is_expired(entry):
            del self._entries[pair]
            logger.debug(f"Cache entry for {pair} expired")
            return False
        return True

    def get(self, pair: str) -> CandleSeries | None:
        """Return the cached series, or None on a miss or a stored failure."""
        if not self.contains(pair):
            return None
        return self._entries[pair].series

    def set(self, pair: str, series: CandleSeries | None) -> None:
        """Store a series, or None to mark the pair as having no data."""
        self._entries[pair] = CacheEntry(series=series, stored_at=self._clock())

    async def get_or_fetch(
        self, pair: str, loader: Callable[[], Awaitable[CandleSeries | None]]
    ) -> CandleSeries | None:
        """Return the cached series for pair, calling loader on a miss.

        The loaded value is stored whatever it is, including None. Callers
        that miss while a fetch for the same pair is in flight await that
        fetch instead of starting another one. If the loader raises, nothing
        is stored and the error propagates to every waiting caller.
        """
        if self.contains(pair):
            return self._entries[pair].series

        pending = self._pending.get(pair)
        if pending is not None:
            return await asyncio.shield(pending)

        future: asyncio.Future[CandleSeries | None] = (
            asyncio.get_running_loop().create_future()
        )
        self._pending[pair] = future
        try:
            series = await loader()
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as e:
            future.set_exception(e)
            future.exception()  # mark retrieved, there may be no waiters
            raise
        else:
            self.set(pair, series)
            future.set_result(series)
            return series
        finally:
            del self._pending[pair]

    def _is_expired(self, entry: CacheEntry) -> bool:
        if self.ttl_seconds is None:
            return False
        return self._clock() - entry.stored_at >= self.ttl_seconds
