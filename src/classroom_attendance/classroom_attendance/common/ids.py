from __future__ import annotations

import threading
import time
from typing import Callable, Optional


class TimestampIdGenerator:
    """Issue string ids derived from the creation time in milliseconds.

    Two calls within the same millisecond would collide, so every id is bumped
    to be strictly greater than the previous one issued by this generator.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)

    __call__ = next_id
