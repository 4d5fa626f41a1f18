"""Shared progress state of incoming and outgoing transfers."""

import threading

_U32_MASK = 0xFFFFFFFF


class IncomingTransferState:
    """Counts how many message parts an incoming transfer has processed."""

    def __init__(self) -> None:
        self._updates = 0
        self._lock = threading.Lock()

    def updates(self) -> int:
        """Number of processed message parts so far."""
        with self._lock:
            return self._updates

    def increase_updates(self) -> None:
        """Record one more processed message part."""
        with self._lock:
            self._updates = (self._updates + 1) & _U32_MASK


class OutgoingTransferState:
    """Progress of an outgoing transfer as acknowledged by the peer."""

    def __init__(self) -> None:
        self._part = 0
        self._has_reply = False
        self._seqno_out = 0
        self._seqno_in = 0
        self._lock = threading.Lock()

    def part(self) -> int:
        """Index of the message part currently being sent."""
        with self._lock:
            return self._part

    def set_part(self, part: int) -> None:
        """Advance to ``part`` only if it directly follows the current part."""
        expected = (part - 1) & _U32_MASK
        with self._lock:
            if self._part == expected:
                self._part = part & _U32_MASK

    def has_reply(self) -> bool:
        """Whether the peer has sent anything back."""
        with self._lock:
            return self._has_reply

    def set_reply(self) -> None:
        """Mark that the peer has replied."""
        with self._lock:
            self._has_reply = True

    def seqno_out(self) -> int:
        """Highest sequence number sent."""
        with self._lock:
            return self._seqno_out

    def set_seqno_out(self, seqno: int) -> None:
        """Raise the sent sequence number to ``seqno`` if it is larger."""
        with self._lock:
            self._seqno_out = max(self._seqno_out, seqno & _U32_MASK)

    def seqno_in(self) -> int:
        """Highest sequence number confirmed by the peer."""
        with self._lock:
            return self._seqno_in

    def set_seqno_in(self, seqno: int) -> None:
        """Raise the confirmed sequence number, ignoring values never sent."""
        with self._lock:
            if seqno > self._seqno_out:
                return
            self._seqno_in = max(self._seqno_in, seqno)