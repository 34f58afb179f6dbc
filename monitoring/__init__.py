"""Monitoring utilities for cache statistics and telemetry."""

from .metrics import CacheStats, StatsRecorder, summarize_stats

__all__ = ["CacheStats", "StatsRecorder", "summarize_stats"]
