"""Timeout and roundtrip arithmetic for RLDP transfers."""

import time
from dataclasses import dataclass
from typing import Optional, Tuple

TRANSFER_LOOP_INTERVAL_MS = 10


def _elapsed_ms(started_at: float) -> int:
    return max(0, int((time.monotonic() - started_at) * 1000))


@dataclass(frozen=True)
class QueryOptions:
    """Timing parameters of a query transfer."""

    query_wave_len: int = 10
    query_wave_interval_ms: int = 10
    query_min_timeout_ms: int = 500
    query_max_timeout_ms: int = 10000

    def update_roundtrip(self, roundtrip: int, started_at: float) -> Tuple[int, int]:
        """Fold the time since ``started_at`` into ``roundtrip``.

        ``started_at`` is a ``time.monotonic()`` value. Returns the new
        roundtrip and the timeout derived from it, both in milliseconds.
        """
        elapsed = _elapsed_ms(started_at)
        if roundtrip == 0:
            new_roundtrip = elapsed
        else:
            new_roundtrip = (roundtrip + elapsed) // 2
        return new_roundtrip, self.compute_timeout(new_roundtrip)

    def compute_timeout(self, roundtrip: Optional[int]) -> int:
        """Clamp ``roundtrip`` into the allowed timeout range."""
        if roundtrip is None or roundtrip > self.query_max_timeout_ms:
            return self.query_max_timeout_ms
        return max(roundtrip, self.query_min_timeout_ms)

    def big_roundtrip(self, roundtrip: int) -> int:
        """Roundtrip to use after a failed query."""
        return min(roundtrip * 2, self.query_max_timeout_ms)

    def completion_interval(self) -> float:
        """Seconds to keep finished transfers around."""
        return self.query_max_timeout_ms * 2 / 1000


def is_timed_out(started_at: float, timeout: int, updates: int) -> bool:
    """Whether more than the update-extended timeout passed since ``started_at``."""
    return _elapsed_ms(started_at) > timeout + timeout * updates // 100


def negate_id(transfer_id: bytes) -> bytes:
    """Flip every bit of a transfer id."""
    return bytes(b ^ 0xFF for b in transfer_id)