from __future__ import annotations

import time
from typing import Callable


class Debouncer:
    """Holds the latest pushed value until no new value arrived for delay_ms."""

    def __init__(self, delay_ms: int = 300, clock: Callable[[], float] | None = None):
        self.delay_s = max(0, int(delay_ms)) / 1000.0
        self._clock = clock or time.monotonic
        self._value: str | None = None
        self._deadline = 0.0

    @property
    def pending(self) -> bool:
        return self._value is not None

    def push(self, value: str) -> None:
        self._value = value
        self._deadline = self._clock() + self.delay_s

    def poll(self) -> str | None:
        if self._value is None or self._clock() < self._deadline:
            return None
        return self.flush()

    def flush(self) -> str | None:
        value, self._value = self._value, None
        return value

    def cancel(self) -> None:
        self._value = None
