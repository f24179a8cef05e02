"""Periodic multi-pair analysis cycle."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from src.alert_bot.analysis import compute_metrics
from src.alert_bot.data import BaseFetcher, PairCache, PairListFile
from src.alert_bot.models import CandleSeries
from src.alert_bot.notifications import (
    BaseNotifier,
    format_cycle_start,
    format_pair_error,
    format_recommendation,
)
from src.alert_bot.strategies import BaseStrategy, LiquidityBreakoutStrategy

logger = logging.getLogger(__name__)


class PairOutcome(str, Enum):
    """How the analysis of one pair ended within a cycle."""

    RECOMMENDED = "recommended"
    NO_SIGNAL = "no_signal"
    NO_DATA = "no_data"
    FAILED = "failed"


@dataclass
class CycleReport:
    """Summary of one completed cycle."""

    started_at: datetime
    outcomes: dict[str, PairOutcome] = field(default_factory=dict)

    @property
    def pair_count(self) -> int:
        return len(self.outcomes)

    def count(self, outcome: PairOutcome) -> int:
        return sum(1 for o in self.outcomes.values() if o is outcome)


class CycleOrchestrator:
    """Runs one analysis pass over every configured pair.

    Each pair is analyzed in its own task: cache lookup (fetching on a miss),
    metrics, recommendation and notification. All tasks run concurrently on
    the event loop and the cycle returns only once every task has settled.
    An exception raised while analyzing one pair is logged and reported to
    the chat, and never reaches the other pairs or the caller.
    """

    def __init__(
        self,
        pairs: PairListFile,
        fetcher: BaseFetcher,
        notifier: BaseNotifier,
        cache: PairCache | None = None,
        strategy: BaseStrategy | None = None,
        quote: str = "USDT",
        candle_limit: int = 10,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.pairs = pairs
        self.fetcher = fetcher
        self.notifier = notifier
        self.cache = cache if cache is not None else PairCache()
        self.strategy = strategy or LiquidityBreakoutStrategy()
        self.quote = quote
        self.candle_limit = candle_limit
        self._now = now

    async def run_cycle(self) -> CycleReport:
        """Analyze every pair in the pair list once."""
        # A pair listed more than once is analyzed and reported once
        pairs = list(dict.fromkeys(self.pairs.load()))
        report = CycleReport(started_at=self._now())
        logger.info(f"Starting cycle with {len(pairs)} pairs")

        # Sent before any task starts so it precedes every per-pair message
        await self._send(format_cycle_start(report.started_at, len(pairs)))

        outcomes = await asyncio.gather(*(self._analyze_isolated(p) for p in pairs))
        report.outcomes = dict(zip(pairs, outcomes))

        logger.info(
            f"Cycle finished: {report.count(PairOutcome.RECOMMENDED)} recommended, "
            f"{report.count(PairOutcome.NO_DATA)} without data, "
            f"{report.count(PairOutcome.FAILED)} failed"
        )
        return report

    async def analyze_pair(self, pair: str) -> PairOutcome:
        """Analyze a single pair. Errors propagate to the caller."""
        series = await self.cache.get_or_fetch(pair, lambda: self._fetch(pair))
        if not series:
            logger.debug(f"No market data for {pair}, skipping")
            return PairOutcome.NO_DATA

        metrics = compute_metrics(series)
        recommendation = self.strategy.generate_recommendation(metrics)
        if recommendation is None:
            return PairOutcome.NO_SIGNAL

        logger.info(
            f"{recommendation.action.value.upper()} {pair}/{self.quote}: "
            f"liquidity={metrics.liquidity:.2f} "
            f"change={metrics.price_change_percent:.2f}%"
        )
        message = format_recommendation(
            pair, recommendation, quote=self.quote, window_minutes=self.candle_limit
        )
        await self.notifier.send(message)
        return PairOutcome.RECOMMENDED

    async def _fetch(self, pair: str) -> CandleSeries | None:
        return await self.fetcher.fetch_candles(
            pair, quote=self.quote, limit=self.candle_limit
        )

    async def _analyze_isolated(self, pair: str) -> PairOutcome:
        try:
            return await self.analyze_pair(pair)
        except Exception as e:
            logger.exception(f"Error analyzing pair {pair}")
            await self._send(format_pair_error(pair, e))
            return PairOutcome.FAILED

    async def _send(self, text: str) -> None:
        try:
            await self.notifier.send(text)
        except Exception as e:
            logger.error(f"Notification failed: {e}")
