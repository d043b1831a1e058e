from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Callable, Optional


# PUBLIC_INTERFACE
class IdAllocator(ABC):
    """Hands out task ids. Callers serialize access (the registry holds its lock)."""

    @abstractmethod
    def allocate(self) -> int:
        """Return a new id, strictly greater than any id previously returned."""


class CounterIdAllocator(IdAllocator):
    """Sequential ids starting at 1."""

    def __init__(self, start: int = 1) -> None:
        self._next_id = start

    def allocate(self) -> int:
        i = self._next_id
        self._next_id += 1
        return i


class TimestampIdAllocator(IdAllocator):
    """
    Millisecond-epoch ids.

    A raw clock reading collides when two tasks are created within the same
    millisecond (or when the clock steps backwards), so each id is bumped to
    at least one past the previous one.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.time
        self._last = 0

    def allocate(self) -> int:
        now_ms = int(self._clock() * 1000)
        i = max(now_ms, self._last + 1)
        self._last = i
        return i


# PUBLIC_INTERFACE
def make_allocator(strategy: str) -> IdAllocator:
    """
    Build the allocator for a strategy name.
    - counter: CounterIdAllocator
    - timestamp: TimestampIdAllocator
    Unknown names fall back to counter.
    """
    if strategy == "timestamp":
        return TimestampIdAllocator()
    return CounterIdAllocator()
