"""
comb.py — Comb Sort
====================
Bubble sort over a shrinking gap (factor 1.3).  Once the gap reaches 1
it keeps making passes until one finishes without a swap.

  1. COMPARISON (i, i+gap)
  2. SWAP (i, i+gap)   – when out of order
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "gap ← n;  sorted ← false",
    "while not sorted:",
    "    gap ← max(1, floor(gap / 1.3));  sorted ← (gap == 1)",
    "    for i in 0 .. n-gap-1:",
    "        if a[i] > a[i+gap]: swap a[i], a[i+gap];  sorted ← false",
]

SHRINK = 1.3


class CombSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.gap = len(self.arr)
        self.i   = 0
        self._pass_open = False
        self._swapped   = False
        self._swap_due  = False

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr
        n   = len(arr)

        if self._swap_due:
            self._swap_due = False
            self._swapped  = True
            i = self.i
            self.i += 1
            return self._swap(i, i + self.gap)

        while True:
            if self._pass_open and self.i + self.gap < n:
                i = self.i
                event = self._compare(i, i + self.gap)
                if arr[i] > arr[i + self.gap]:
                    self._swap_due = True
                else:
                    self.i += 1
                return event

            if self._pass_open and self.gap == 1 and not self._swapped:
                return None

            self.gap = max(1, int(self.gap / SHRINK))
            self.i   = 0
            self._swapped   = False
            self._pass_open = True
