"""Repeat-with-interval task runner."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class SchedulerState(str, Enum):
    IDLE = "idle"
    CYCLING = "cycling"


class IntervalScheduler:
    """Run a job forever with a fixed pause between runs.

    The pause is measured from the end of one run to the start of the next,
    so a slow run pushes the following one back. The sleep capability is
    injectable so the loop can be driven without real waits.

    Attributes:
        interval: Seconds to stay idle between two runs.
        state: Whether a run is in flight or the scheduler is waiting.
    """

    def __init__(
        self,
        job: Callable[[], Awaitable[Any]],
        interval: float = 10.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be non-negative")
        self.job = job
        self.interval = interval
        self._sleep = sleep
        self._running: bool = False
        self.state = SchedulerState.IDLE
        self.cycles: int = 0

    async def run(self, max_cycles: int | None = None) -> int:
        """Run until stop() is called or max_cycles runs have completed.

        A run that raises is logged and counted like any other; the scheduler
        always goes back to idle and starts the next run after the interval.

        Returns:
            The number of completed runs.
        """
        self._running = True
        completed = 0

        while self._running:
            self.state = SchedulerState.CYCLING
            try:
                await self.job()
            except Exception:
                logger.exception("Scheduled job failed")
            finally:
                self.state = SchedulerState.IDLE

            completed += 1
            self.cycles += 1
            if max_cycles is not None and completed >= max_cycles:
                break
            if not self._running:
                break

            await self._sleep(self.interval)

        self._running = False
        return completed

    def stop(self) -> None:
        """Stop after the current run or pause."""
        self._running = False

    @property
    def running(self) -> bool:
        return self._running
