"""Thread-safe insert-once dictionaries for sharing cells between workers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any


class Dictionary(ABC):
    """A map whose :meth:`put` inserts only when the key is absent.

    Implementations must be safe to use from several threads at once.
    """

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> tuple[Any, bool]:
        """Insert ``value`` if ``key`` is new.

        Returns the value stored for ``key`` afterwards and whether the
        insertion happened.
        """

    @abstractmethod
    def get(self, key: Hashable) -> Any:
        """Return the value for ``key``; KeyError if absent."""

    def __getitem__(self, key: Hashable) -> Any:
        return self.get(key)

    @abstractmethod
    def __contains__(self, key: object) -> bool: ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def keys(self) -> list:
        """Return a list of all keys."""

    @abstractmethod
    def values(self) -> list:
        """Return a list of all values."""


class MutexDict(Dictionary):
    """A dictionary guarded by a single lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._map: dict = {}

    def put(self, key: Hashable, value: Any) -> tuple[Any, bool]:
        with self._lock:
            if key in self._map:
                return self._map[key], False
            self._map[key] = value
            return value, True

    def get(self, key: Hashable) -> Any:
        with self._lock:
            return self._map[key]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._map

    def __len__(self) -> int:
        with self._lock:
            return len(self._map)

    def keys(self) -> list:
        with self._lock:
            return list(self._map)

    def values(self) -> list:
        with self._lock:
            return list(self._map.values())


class ShardedMap(Dictionary):
    """An integer-keyed dictionary split into lock-protected shards.

    There are ``2 << bits`` shards and a key lives in the shard selected by
    its low bits, so threads working on different shards never contend.
    """

    def __init__(self, bits: int = 9) -> None:
        if bits < 0:
            raise ValueError("bits must be non-negative")
        self._count = 2 << bits
        self._locks = [threading.Lock() for _ in range(self._count)]
        self._shards: list[dict] = [{} for _ in range(self._count)]

    def _shard(self, key: int) -> int:
        return key & (self._count - 1)

    def put(self, key: int, value: Any) -> tuple[Any, bool]:
        index = self._shard(key)
        with self._locks[index]:
            shard = self._shards[index]
            if key in shard:
                return shard[key], False
            shard[key] = value
            return value, True

    def get(self, key: int) -> Any:
        index = self._shard(key)
        with self._locks[index]:
            return self._shards[index][key]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        index = self._shard(key)
        with self._locks[index]:
            return key in self._shards[index]

    def __len__(self) -> int:
        return sum(len(shard) for shard in self._shards)

    def keys(self) -> list:
        return [key for shard in self._shards for key in shard]

    def values(self) -> list:
        return [value for shard in self._shards for value in shard.values()]