"""Fast, non-cryptographic per-thread random generator."""

import os
import random
import threading

_local = threading.local()


def fast_thread_rng() -> random.Random:
    """Return the random generator bound to the calling thread."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random(int.from_bytes(os.urandom(32), "little"))
        _local.rng = rng
    return rng


def gen_fast_bytes(n: int = 32) -> bytes:
    """Return ``n`` random bytes from the thread's fast generator."""
    if n < 0:
        raise ValueError("byte count must be non-negative")
    return fast_thread_rng().randbytes(n)