from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class CacheStats:
    """Per-container counters. Informational only; never consulted for results."""

    hits: int = 0
    misses: int = 0
    invalidations: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_ratio(self) -> float | None:
        total = self.lookups
        if total == 0:
            return None
        return self.hits / total

    def record_hit(self) -> None:
        self.hits += 1

    def record_miss(self) -> None:
        self.misses += 1

    def record_invalidation(self) -> None:
        self.invalidations += 1

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
        self.invalidations = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
