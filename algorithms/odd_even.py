"""
odd_even.py — Odd-Even (brick) Sort
====================================
Alternates an odd phase (pairs 1-2, 3-4, …) with an even phase (pairs
0-1, 2-3, …).  Stops after a full odd+even round without a swap.

  1. COMPARISON (i, i+1)
  2. SWAP (i, i+1)   – when out of order
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "repeat:",
    "    clean ← true",
    "    for i in 1, 3, 5, …: if a[i] > a[i+1]: swap;  clean ← false",
    "    for i in 0, 2, 4, …: if a[i] > a[i+1]: swap;  clean ← false",
    "until clean",
]


class OddEvenSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self._start = 1
        self.i      = 1
        self._clean = True
        self._swap_due = False

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr

        if self._swap_due:
            self._swap_due = False
            self._clean    = False
            i = self.i
            self.i += 2
            return self._swap(i, i + 1)

        while True:
            if self.i + 1 < len(arr):
                i = self.i
                event = self._compare(i, i + 1)
                if arr[i] > arr[i + 1]:
                    self._swap_due = True
                else:
                    self.i += 2
                return event

            # the even phase closes a round
            if self._start == 0:
                if self._clean:
                    return None
                self._clean = True
            self._start = 1 - self._start
            self.i      = self._start
