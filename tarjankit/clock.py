"""A stopwatch that can time single spans or accumulate several."""

from __future__ import annotations

import sys
import time
from typing import Optional, TextIO


class SimpleClock:
    """A stopwatch started on creation and restarted by :meth:`begin`."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()
        self._accum = 0.0
        self._accum_init = False

    def begin(self) -> None:
        """Restart the current span."""
        self._start = time.perf_counter_ns()

    def accumulate(self) -> None:
        """Add the time since the last start to the accumulated total.

        After :meth:`reset_accum` the total is replaced instead of added to.
        """
        span = (time.perf_counter_ns() - self._start) / 1e9
        if self._accum_init:
            self._accum += span
        else:
            self._accum = span
            self._accum_init = True

    def reset_accum(self) -> None:
        """Make the next :meth:`accumulate` start a fresh total."""
        self._accum_init = False

    def accumulated(self) -> float:
        """Return the accumulated total in seconds."""
        return self._accum

    def print_accum(
        self, msg: str = "", divisor: int = 1, file: Optional[TextIO] = None
    ) -> None:
        """Write the accumulated total divided by ``divisor``."""
        out = file if file is not None else sys.stdout
        value = self._accum / divisor
        if msg:
            out.write(f"\nTime elapsed for {msg}:  {value:g} seconds.\n")
        else:
            out.write(f"\nTime elapsed:  {value:g} seconds.\n")

    def end(self, msg: str = "", file: Optional[TextIO] = None) -> None:
        """Write the time since the last start."""
        out = file if file is not None else sys.stdout
        value = (time.perf_counter_ns() - self._start) / 1e9
        if msg:
            out.write(f"Time elapsed for {msg}:  {value:g} seconds.\n")
        else:
            out.write(f"Time elapsed:  {value:g} seconds.\n")

    def elapsed(self) -> int:
        """Return the nanoseconds since the last start."""
        return time.perf_counter_ns() - self._start