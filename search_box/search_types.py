from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import Record


@dataclass
class SearchResponse:
    query: str
    cache_hit: bool
    latency_ms: int
    results: list[Record] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "cache_hit": self.cache_hit,
            "latency_ms": self.latency_ms,
            "count": len(self.results),
            "results": [r.to_dict() for r in self.results],
        }


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    def to_dict(self) -> dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "lookups": self.lookups}
