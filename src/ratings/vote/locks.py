"""In-process critical sections keyed by an arbitrary string.

Vote casting and review deletion lock on the review id, so two voters'
rescans of one review never interleave and leave stale counters behind.
Rating submission locks on ``"{media}:{user}"``. Locks are created on demand
and dropped once unused.
"""

import threading
from contextlib import contextmanager


class KeyedLocks:
    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._holders: dict[str, int] = {}

    @contextmanager
    def hold(self, key):
        key = str(key)
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._holders[key] = self._holders.get(key, 0) + 1

        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._holders[key] -= 1
                if self._holders[key] == 0:
                    del self._holders[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


keyed_locks = KeyedLocks()
