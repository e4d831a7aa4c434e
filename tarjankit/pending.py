"""A queue of searches waiting to be resumed."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterable
from typing import Any, Optional


class PendingQueue:
    """A thread-safe first-in first-out queue of searches."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._waiting: deque = deque()

    def add(self, search: Any) -> None:
        """Queue one search."""
        with self._lock:
            self._waiting.append(search)

    def add_all(self, searches: Iterable[Any]) -> None:
        """Queue every search, skipping entries that are ``None``."""
        with self._lock:
            self._waiting.extend(s for s in searches if s is not None)

    def get(self) -> Optional[Any]:
        """Remove and return the oldest search, or ``None`` if the queue is empty."""
        if not self._waiting:
            return None
        with self._lock:
            return self._waiting.popleft() if self._waiting else None

    def is_done(self) -> bool:
        """Return whether no search is waiting."""
        return not self._waiting