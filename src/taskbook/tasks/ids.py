# src/taskbook/tasks/ids.py

"""
Task id generation.

Ids look like "<time36>-<rand6>": a millisecond timestamp in base 36 followed
by six random base-36 characters.

Uniqueness:
- within one generator the time part is forced strictly increasing, so ids
  never collide even when the clock stalls or steps backwards;
- across generators (e.g. two stores) uniqueness is best-effort only and
  rests on the random suffix. It is not a cryptographic guarantee.
"""

from __future__ import annotations

import secrets
import threading
import time
from collections.abc import Callable

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
SUFFIX_LEN = 6


def to_base36(n: int) -> str:
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return "0"
    out: list[str] = []
    while n:
        n, rem = divmod(n, 36)
        out.append(_ALPHABET[rem])
    return "".join(reversed(out))


class TaskIdGenerator:
    def __init__(self, clock_ms: Callable[[], int] | None = None) -> None:
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._last_ms = -1
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            ms = int(self._clock_ms())
            if ms <= self._last_ms:
                ms = self._last_ms + 1
            self._last_ms = ms

        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(SUFFIX_LEN))
        return f"{to_base36(ms)}-{suffix}"
