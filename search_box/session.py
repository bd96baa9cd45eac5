from __future__ import annotations

import logging
import time
from typing import Callable, Sequence

from .cache import LRUCache
from .config import SearchBoxConfig
from .dataset import filter_records
from .debounce import Debouncer
from .models import Record
from .navigation import navigate
from .search_types import CacheStats, SearchResponse
from .utils import normalize_query

logger = logging.getLogger(__name__)


class SearchSession:
    """
    State of one active search box: typed input, visible suggestions,
    keyboard highlight and the result cache scoped to this session.
    """

    def __init__(
        self,
        records: Sequence[Record],
        cfg: SearchBoxConfig | None = None,
        clock: Callable[[], float] | None = None,
    ):
        self.cfg = cfg or SearchBoxConfig()
        self.records = list(records)
        self.cache = LRUCache(self.cfg.cache_capacity)
        self.debouncer = Debouncer(self.cfg.debounce_ms, clock=clock)
        self.stats = CacheStats()

        self.input_value = ""
        self.highlight = ""
        self.filtered: list[Record] = []
        self.show_suggestions = False
        self.active_index = -1

    # ── Input ──

    def type_text(self, value: str) -> None:
        self.input_value = value
        self.debouncer.push(value)

    def tick(self) -> bool:
        settled = self.debouncer.poll()
        if settled is None:
            return False
        self.apply_query(settled)
        return True

    def flush(self) -> bool:
        settled = self.debouncer.flush()
        if settled is None:
            return False
        self.apply_query(settled)
        return True

    def apply_query(self, value: str) -> SearchResponse:
        start = time.perf_counter()
        key = normalize_query(value)
        self.highlight = key
        if not key:
            self._hide(clear_results=True)
            return SearchResponse(query=key, cache_hit=False, latency_ms=0)

        results = self.cache.get(key)
        hit = results is not None
        if hit:
            logger.debug(f"Cache hit for: {key}")
            self.stats.hits += 1
        else:
            logger.debug(f"Filtering for: {key}")
            self.stats.misses += 1
            results = filter_records(self.records, key)
            self.cache.put(key, results)

        self.filtered = results
        self.show_suggestions = True
        self.active_index = -1
        latency_ms = int((time.perf_counter() - start) * 1000)
        return SearchResponse(query=key, cache_hit=hit, latency_ms=latency_ms, results=list(results))

    # ── Pointer / keyboard ──

    def handle_key(self, key: str) -> Record | None:
        nav = navigate(self.active_index, key, len(self.filtered), self.show_suggestions)
        self.active_index = nav.active_index
        self.show_suggestions = nav.show_suggestions
        if nav.selected_index is not None:
            return self.select_index(nav.selected_index)
        return None

    def hover(self, index: int) -> None:
        if self.show_suggestions and 0 <= index < len(self.filtered):
            self.active_index = index

    def select_index(self, index: int) -> Record:
        if not 0 <= index < len(self.filtered):
            raise IndexError(f"No suggestion at index {index}")
        return self.select(self.filtered[index])

    def select(self, record: Record) -> Record:
        # picking a suggestion fills the box without reopening the list
        self.input_value = record.name
        self.debouncer.cancel()
        self._hide(clear_results=False)
        logger.debug(f"Selected {record.id}: {record.name}")
        return record

    def clear_input(self) -> None:
        self.input_value = ""
        self.debouncer.cancel()
        self._hide(clear_results=True)

    def focus(self) -> None:
        self.show_suggestions = len(self.input_value) > 0

    def _hide(self, clear_results: bool) -> None:
        if clear_results:
            self.filtered = []
        self.show_suggestions = False
        self.active_index = -1

    # ── View ──

    @property
    def no_results(self) -> bool:
        return self.show_suggestions and not self.filtered and len(self.input_value) > 0

    @property
    def visible_suggestions(self) -> list[Record]:
        return list(self.filtered) if self.show_suggestions else []
