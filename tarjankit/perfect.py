"""Search for perfect numbers with a shared record of tested numbers."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from math import isqrt
from typing import Optional, Sequence

KEY = 38977
MAX_PROCS = 20
MAX_INT = 1 << 25
MAX_PERFECT = 20

FLAG_CLEAR = "\0"
FLAG_BUSY = "u"
FLAG_CHANGED = "*"


def is_perfect(n: int) -> bool:
    """Return whether ``n`` equals 1 plus its proper divisors above 1.

    One counts as perfect under this rule.
    """
    total = 1
    limit = isqrt(n) if n > 0 else 0
    for divisor in range(2, limit + 1):
        if n % divisor == 0:
            total += divisor
            if divisor * divisor != n:
                total += n // divisor
    return total == n


@dataclass
class ProcessStats:
    """Counters kept for one registered process."""

    pid: int = 0
    num_found: int = 0
    num_tested: int = 0
    num_skipped: int = 0


@dataclass
class SharedState:
    """State shared by the processes searching for perfect numbers."""

    flag: str = FLAG_CLEAR
    perfect: list = field(default_factory=list)
    procs: list = field(
        default_factory=lambda: [ProcessStats() for _ in range(MAX_PROCS)]
    )
    _bits: int = 0

    @property
    def num_perfect(self) -> int:
        return len(self.perfect)

    @staticmethod
    def _check(k: int) -> None:
        if not 0 <= k <= MAX_INT:
            raise IndexError(f"bit {k} is outside 0..{MAX_INT}")

    def set_bit(self, k: int) -> None:
        """Mark ``k`` as tested."""
        self._check(k)
        self._bits |= 1 << k

    def clear_bit(self, k: int) -> None:
        """Mark ``k`` as untested."""
        self._check(k)
        self._bits &= ~(1 << k)

    def is_bit(self, k: int) -> bool:
        """Return whether ``k`` is marked as tested."""
        self._check(k)
        return bool(self._bits >> k & 1)

    def register(self, pid: int) -> ProcessStats:
        """Return the slot for ``pid``, claiming a free one if needed."""
        for proc in self.procs:
            if proc.pid == pid:
                self.flag = FLAG_CHANGED
                return proc
        for proc in self.procs:
            if proc.pid == 0:
                proc.pid = pid
                self.flag = FLAG_CHANGED
                return proc
        raise RuntimeError("too many processes")

    def test_perfect(self, proc: ProcessStats, n: int) -> int:
        """Test ``n`` on behalf of ``proc`` and return the next number to test.

        Returns 0 once the maximum number of perfect numbers has been found
        or the range is exhausted.
        """
        self.set_bit(n)
        proc.num_tested += 1
        if is_perfect(n) and self.num_perfect < MAX_PERFECT:
            proc.num_found += 1
            self.perfect.append(n)
        if self.num_perfect == MAX_PERFECT:
            return 0
        return (n + 1) % MAX_INT


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Test one number with ``N -i``, or search upward from ``N``."""
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) == 2 and args[1] == "-i":
        if is_perfect(_atoi(args[0])):
            print(f"{args[0]} is perfect!")
        return 0

    if len(args) == 1:
        n = _atoi(args[0])
        if n == 0:
            print(f"Invalid starting number {args[0]}")
            return 1
        state = SharedState()
        try:
            proc = state.register(os.getpid())
        except RuntimeError as exc:
            print(exc)
            return 1
        while n > 0:
            before = state.num_perfect
            next_n = state.test_perfect(proc, n)
            if state.num_perfect > before:
                print(f"found {n}")
            if state.num_perfect == MAX_PERFECT:
                print("max number of perfects found")
            n = next_n
    return 0