from __future__ import annotations

from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from typing import Dict, List

import structlog


@dataclass(frozen=True)
class CacheStats:
    name: str
    capacity: int
    size: int
    hits: int
    misses: int
    evictions: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.lookups if self.lookups else 0.0

    def as_dict(self) -> Dict[str, float | int | str]:
        data = asdict(self)
        data.pop("timestamp")
        data["hit_rate"] = self.hit_rate
        return data


class StatsRecorder:
    """Record and summarize cache statistics snapshots."""

    def __init__(self) -> None:
        self.snapshots: List[CacheStats] = []
        self.logger = structlog.get_logger(__name__)

    def record(self, stats: CacheStats) -> None:
        self.snapshots.append(stats)
        self.logger.info("cache_stats", **stats.as_dict())

    def summary(self, last_n: int = 5) -> Dict[str, float | int]:
        recent = self.snapshots[-last_n:]
        if not recent:
            return {}
        return {
            "snapshots": len(recent),
            "avg_size": sum(s.size for s in recent) / len(recent),
            "avg_fill_ratio": sum(s.size / s.capacity for s in recent) / len(recent),
            "hit_rate": recent[-1].hit_rate,
            "evictions": recent[-1].evictions - recent[0].evictions,
        }


def summarize_stats(stats: CacheStats) -> str:
    return (
        f"{stats.name}: {stats.size}/{stats.capacity} entries, "
        f"hits: {stats.hits}, misses: {stats.misses}, "
        f"hit rate: {stats.hit_rate:.2%}, evictions: {stats.evictions}"
    )
