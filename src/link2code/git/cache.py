"""Process-scoped cache with per-key locking."""

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class KeyedCache(Generic[T]):
    """A dict that computes each missing key at most once.

    Concurrent callers asking for the same key wait on that key's lock
    while callers for other keys proceed. Failed computations are not
    stored, so the next caller retries.
    """

    def __init__(self) -> None:
        self._values: dict[str, T] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        if key in self._values:
            return self._values[key]

        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())

        with lock:
            if key in self._values:
                return self._values[key]
            value = compute()
            self._values[key] = value
            return value
