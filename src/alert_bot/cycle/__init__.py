"""Cycle orchestration and scheduling."""

from src.alert_bot.cycle.orchestrator import CycleOrchestrator, CycleReport, PairOutcome
from src.alert_bot.cycle.scheduler import IntervalScheduler, SchedulerState

__all__ = [
    "CycleOrchestrator",
    "CycleReport",
    "IntervalScheduler",
    "PairOutcome",
    "SchedulerState",
]
