"""Duplicate-action guard for per-id operations."""

import threading
from contextlib import contextmanager
from typing import Hashable, Iterator, Set


class InFlightGuard:
    """Track ids with an operation in flight.

    ``hold(id)`` yields True for the first caller and False for any repeat
    trigger on the same id until the first one settles.
    """

    def __init__(self) -> None:
        self._in_flight: Set[Hashable] = set()
        self._lock = threading.Lock()

    def is_in_flight(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._in_flight

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[bool]:
        with self._lock:
            acquired = key not in self._in_flight
            if acquired:
                self._in_flight.add(key)
        try:
            yield acquired
        finally:
            if acquired:
                with self._lock:
                    self._in_flight.discard(key)
