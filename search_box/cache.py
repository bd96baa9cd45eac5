from __future__ import annotations

from collections import OrderedDict
from typing import Any

from .errors import InvalidCapacityError, InvalidKeyError


class LRUCache:
    """Fixed-capacity query -> results cache with least-recently-used eviction.

    Both ``get`` and ``put`` promote a key to the most-recently-used end.
    Keys are used as given; callers normalize queries before lookup.
    """

    def __init__(self, capacity: int = 10):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 1:
            raise InvalidCapacityError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._store: OrderedDict[str, Any] = OrderedDict()

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise InvalidKeyError(f"cache keys must be str, got {type(key).__name__}")

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: str) -> Any | None:
        self._check_key(key)
        if key not in self._store:
            return None
        self._store.move_to_end(key)
        return self._store[key]

    def put(self, key: str, value: Any) -> None:
        self._check_key(key)
        if key in self._store:
            self._store.move_to_end(key)
        elif len(self._store) >= self._capacity:
            self._store.popitem(last=False)
        self._store[key] = value

    def size(self) -> int:
        return len(self._store)

    def keys(self) -> list[str]:
        # LRU first, MRU last
        return list(self._store)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store
