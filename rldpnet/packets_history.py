"""Sliding-window history of delivered packet sequence numbers."""

import logging
import threading
from typing import List, Optional

_log = logging.getLogger(__name__)

_HISTORY_BITS = 512
_HISTORY_SIZE = _HISTORY_BITS // 64
_INDEX_MASK = _HISTORY_BITS // 2 - 1
_U64_MASK = 0xFFFFFFFFFFFFFFFF


class _HistoryBits:
    __slots__ = ("index", "bits")

    def __init__(self) -> None:
        self.index = 0
        self.bits: List[int] = [0] * _HISTORY_SIZE


class PacketsHistory:
    """Sequence number tracker.

    A sending history only counts sequence numbers; a receiving history also
    remembers which recent packets were already delivered.
    """

    def __init__(self, mask: Optional[_HistoryBits]) -> None:
        self._mask = mask
        self._seqno = 0
        self._lock = threading.Lock()

    @classmethod
    def for_send(cls) -> "PacketsHistory":
        """Create a history for outgoing packets."""
        return cls(None)

    @classmethod
    def for_recv(cls) -> "PacketsHistory":
        """Create a history for incoming packets with duplicate detection."""
        return cls(_HistoryBits())

    def reset(self) -> None:
        """Return to the initial state."""
        with self._lock:
            mask = self._mask
            if mask is not None:
                mask.bits = [int(i == _HISTORY_SIZE // 2) for i in range(_HISTORY_SIZE)]
                mask.index = 0
            self._seqno = 0

    def seqno(self) -> int:
        """The highest sequence number seen or issued."""
        with self._lock:
            return self._seqno

    def bump_seqno(self) -> int:
        """Increment the sequence number and return the new value."""
        with self._lock:
            self._seqno = (self._seqno + 1) & _U64_MASK
            return self._seqno

    def deliver_packet(self, seqno: int) -> bool:
        """Record a packet; return False if it is a duplicate or too old."""
        with self._lock:
            mask = self._mask
            if mask is None:
                if self._seqno < seqno:
                    self._seqno = seqno
                return True
            return self._deliver_masked(mask, seqno)

    def _deliver_masked(self, mask: _HistoryBits, seqno: int) -> bool:
        seqno_masked = seqno & _INDEX_MASK
        seqno_normalized = seqno & ~_INDEX_MASK & _U64_MASK

        index = mask.index
        index_masked = index & _INDEX_MASK
        index_normalized = index & ~_INDEX_MASK & _U64_MASK

        if index_normalized > seqno_normalized + _INDEX_MASK + 1:
            _log.debug(
                "peer packet is too old: seqno=%d index_normalized=%d",
                seqno,
                index_normalized,
            )
            return False

        mask_bit = 1 << (seqno_masked % 64)
        if index_normalized > seqno_normalized:
            mask_offset: Optional[int] = 0
        elif index_normalized == seqno_normalized:
            mask_offset = _HISTORY_SIZE // 2
        else:
            mask_offset = None

        half = _HISTORY_SIZE // 2
        if mask_offset is not None:
            offset = mask_offset + seqno_masked // 64
            if mask.bits[offset] & mask_bit:
                _log.debug("peer packet was already received: seqno=%d", seqno)
                return False
            mask.bits[offset] |= mask_bit
            next_index = index
        else:
            if index_normalized + _INDEX_MASK + 1 == seqno_normalized:
                mask.bits = mask.bits[half:] + [0] * half
            else:
                mask.bits = [0] * _HISTORY_SIZE
            next_index = index_normalized

        if self._seqno < seqno:
            self._seqno = seqno

        index_masked = (index_masked + 1) & ~_INDEX_MASK & _U64_MASK
        mask.index = next_index | index_masked
        return True