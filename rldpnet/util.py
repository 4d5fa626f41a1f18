"""Small shared helpers."""

import time

_U32_MASK = 0xFFFFFFFF


def now() -> int:
    """Return the current Unix time in whole seconds as an unsigned 32-bit value.

    A clock set before the epoch yields 0.
    """
    seconds = int(time.time())
    if seconds < 0:
        return 0
    return seconds & _U32_MASK