"""Metric computations over candle series."""

from src.alert_bot.analysis.metrics import compute_metrics

__all__ = ["compute_metrics"]
