"""Tracking of the last refresh time relative to a start instant."""

import math
import threading
import time
from typing import Callable


class UpdatedAt:
    """Remembers when it was last refreshed, in whole seconds since creation."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at = clock()
        self._updated_at = 0
        self._lock = threading.Lock()

    def _elapsed_secs(self) -> int:
        return max(0, math.floor(self._clock() - self._started_at))

    def refresh(self) -> None:
        """Mark the current moment as the last update."""
        elapsed = self._elapsed_secs()
        with self._lock:
            self._updated_at = elapsed

    def is_expired(self, timeout: int) -> bool:
        """Return True if at least ``timeout`` seconds passed since the last update."""
        with self._lock:
            updated_at = self._updated_at
        return self._elapsed_secs() >= updated_at + timeout