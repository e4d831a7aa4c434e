"""Cells: the per-vertex records that concurrent searches claim and complete."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterable
from typing import Any, Optional

from .status import CellState, ConquerResult


class Cell:
    """The state of one vertex during a strongly-connected-component search.

    The ``status`` slot holds :attr:`CellState.NEW_CELL` until a search claims
    the cell, then the owning search, and finally
    :attr:`CellState.COMPLETE_CELL` once the cell's component is known.
    """

    def __init__(self, vertex: Optional[Hashable] = None) -> None:
        self.vertex = vertex
        self.index = 0
        self.rank = 0
        self.status: Any = CellState.NEW_CELL
        self.transferred = False
        self.root = False
        self._neighbor_queue: Optional[list[Cell]] = None
        self._blocked_on: list = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"Cell(vertex={self.vertex!r}, index={self.index}, "
            f"rank={self.rank}, status={self.status!r})"
        )

    # Unsynchronised queries: a best guess of the current state.

    def is_complete(self) -> bool:
        """Return whether the cell has been retired into a component."""
        return self.status is CellState.COMPLETE_CELL

    def is_new(self) -> bool:
        """Return whether no search has claimed the cell yet."""
        return self.status is CellState.NEW_CELL

    def is_unclaimed(self) -> bool:
        """Return whether no search currently owns the cell."""
        return self.is_new() or self.is_complete()

    def on_stack_of(self, search: Any) -> bool:
        """Return whether ``search`` currently owns the cell."""
        return self.status is search

    def init_index(self, index: int) -> None:
        """Set both the index and the rank to ``index``."""
        self.index = index
        self.rank = index

    def promote(self, rank: int) -> None:
        """Lower the rank to ``rank`` if that is smaller."""
        self.rank = min(self.rank, rank)

    # Synchronised operations.

    def mark_complete(self) -> None:
        """Retire the cell; the caller must own it and have explored it fully."""
        with self._lock:
            self.status = CellState.COMPLETE_CELL

    def remove_blocked_list(self) -> list:
        """Return the searches blocked on this cell and start an empty list."""
        with self._lock:
            blocked, self._blocked_on = self._blocked_on, []
            return blocked

    def transfer(self, delta: int, new_owner: Any) -> list:
        """Hand the cell to ``new_owner``, shifting index and rank by ``delta``.

        Returns a copy of the searches that were blocked on the cell.
        """
        with self._lock:
            self.transferred = True
            self.rank += delta
            self.index += delta
            self.status = new_owner
            return list(self._blocked_on)

    def get_owner(self) -> Optional[Any]:
        """Return the owning search, or ``None`` if the cell is unclaimed."""
        owner = self.status
        if owner is CellState.NEW_CELL or owner is CellState.COMPLETE_CELL:
            return None
        return owner

    def add_to_blocked_list(self, search: Any) -> bool:
        """Record ``search`` as blocked here unless the cell is complete.

        Returns whether the search was recorded.
        """
        with self._lock:
            if self.is_complete():
                return False
            self._blocked_on.append(search)
            return True

    def block_search(self, search: Any) -> None:
        """Record ``search`` as blocked here unconditionally."""
        with self._lock:
            self._blocked_on.append(search)

    def unblock_search(self, search: Any) -> None:
        """Remove the first record of ``search`` from the blocked list."""
        with self._lock:
            for position, blocked in enumerate(self._blocked_on):
                if blocked is search:
                    del self._blocked_on[position]
                    return

    def conquer(self, conqueror: Any) -> ConquerResult:
        """Try to claim the cell for ``conqueror``."""
        with self._lock:
            if self.status is CellState.NEW_CELL:
                self.status = conqueror
                return ConquerResult.CONQUERED
            if self.status is CellState.COMPLETE_CELL:
                return ConquerResult.COMPLETE
            return ConquerResult.OCCUPIED

    def conquer_or_fail(self, conqueror: Any) -> bool:
        """Claim the cell for ``conqueror`` if it is new; return whether it was."""
        with self._lock:
            if self.status is CellState.NEW_CELL:
                self.status = conqueror
                return True
            return False

    # Operations that assume the caller owns the cell.

    def set_owner(self, owner: Any) -> None:
        """Label the cell as owned by ``owner`` without contention checks."""
        self.status = owner

    def set_neighbors(self, neighbors: Iterable[Cell]) -> None:
        """Set the queue of neighbouring cells still to be explored."""
        queue = list(neighbors)
        self._neighbor_queue = queue if queue else None

    def all_neighbors_done(self) -> bool:
        """Return whether every neighbour has been handed out."""
        return self._neighbor_queue is None

    def _available(self, candidate: Cell) -> bool:
        return candidate.is_unclaimed() or candidate.on_stack_of(self.status)

    def best_neighbor(self) -> Cell:
        """Remove and return the next neighbour to explore.

        The last queued neighbour is preferred if no other search owns it;
        otherwise the first neighbour that is unclaimed or owned by this cell's
        owner is chosen, falling back to the last one.
        """
        queue = self._neighbor_queue
        if queue is None:
            raise IndexError("no neighbours left to explore")
        candidate = queue[-1]
        if self._available(candidate):
            queue.pop()
        else:
            position = next(
                (i for i, cell in enumerate(queue) if self._available(cell)), None
            )
            if position is None:
                candidate = queue.pop()
            else:
                candidate = queue.pop(position)
        if not queue:
            self._neighbor_queue = None
        return candidate