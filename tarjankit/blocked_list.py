"""An append-only list made of geometrically growing blocks."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from itertools import chain, islice
from typing import Any


class BlockedList:
    """A thread-safe append-only list.

    The first block holds ``2 ** power`` items and every later block is
    ``2 ** power`` times larger than the one before it. There are ``levels``
    blocks in total, so capacity is fixed at construction. Blocks after the
    first are allocated only when an append first reaches them.
    """

    def __init__(self, power: int = 3, levels: int = 8) -> None:
        if power < 1:
            raise ValueError("power must be at least 1")
        if levels < 1:
            raise ValueError("levels must be at least 1")
        base = 1 << power
        sizes = [base]
        totals = [base]
        for _ in range(1, levels):
            sizes.append(sizes[-1] << power)
            totals.append(totals[-1] + sizes[-1])
        self._base = base
        self._powers = tuple(sizes)
        self._sums = tuple(totals)
        self._blocks: list[list | None] = [None] * levels
        self._blocks[0] = [None] * base
        self._head = 0
        self._lock = threading.Lock()

    @property
    def base(self) -> int:
        """Size of the first block."""
        return self._base

    @property
    def powers(self) -> tuple[int, ...]:
        """Size of each block."""
        return self._powers

    @property
    def sums(self) -> tuple[int, ...]:
        """Running total of block sizes; the last entry is the capacity."""
        return self._sums

    @property
    def capacity(self) -> int:
        return self._sums[-1]

    def find_location(self, index: int) -> int:
        """Return the number of the block that holds position ``index``."""
        if index < 0:
            raise IndexError("negative index")
        for location, total in enumerate(self._sums):
            if index < total:
                return location
        raise IndexError(f"index {index} is beyond capacity {self.capacity}")

    def append(self, item: Any) -> None:
        """Store ``item`` at the next free position."""
        with self._lock:
            index = self._head
            location = self.find_location(index)
            self._head += 1
            if self._blocks[location] is None:
                self._blocks[location] = [None] * self._powers[location]
            block = self._blocks[location]
        position = index if location == 0 else index - self._sums[location - 1]
        block[position] = item

    def __len__(self) -> int:
        return self._head

    def is_small(self, count: int) -> bool:
        """Return whether ``count`` items fit in the first block."""
        return count < self._base

    def small_item(self, index: int) -> Any:
        """Return an item from the first block."""
        return self._blocks[0][index]

    def items(self, count: int) -> Iterator[Any]:
        """Yield the first ``count`` positions in order."""
        if count < 0 or count > self.capacity:
            raise ValueError(f"count must be between 0 and {self.capacity}")
        blocks = (
            block if block is not None else [None] * size
            for block, size in zip(self._blocks, self._powers)
        )
        return islice(chain.from_iterable(blocks), count)

    def __iter__(self) -> Iterator[Any]:
        return self.items(len(self))