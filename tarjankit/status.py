"""Markers describing the state of a cell and the outcome of claiming it."""

from __future__ import annotations

from enum import Enum, IntEnum


class ConquerResult(IntEnum):
    """Outcome of a search trying to claim a cell."""

    OCCUPIED = 0
    CONQUERED = 1
    COMPLETE = 2


class CellState(Enum):
    """States a cell's owner slot holds when no search owns it."""

    NEW_CELL = "new"
    COMPLETE_CELL = "complete"
    UNCLAIMED_CELL = "new"