"""
shell.py — Shell Sort
======================
Gapped insertion sort with Shell's original gaps n//2, n//4, …, 1.
Elements move by SWAP rather than by shifting, so every move is a
single event:

  1. COMPARISON (j-gap, j)
  2. SWAP (j-gap, j)   – when out of order; then keep walking left by gap
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "gap ← n // 2",
    "while gap > 0:",
    "    for i in gap .. n-1:",
    "        j ← i",
    "        while j ≥ gap and a[j-gap] > a[j]:",
    "            swap a[j-gap], a[j];  j ← j-gap",
    "    gap ← gap // 2",
]


class ShellSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.gap = len(self.arr) // 2
        self.i   = self.gap
        self.j   = self.i
        self._swap_due = False

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr
        n   = len(arr)

        while self.gap > 0:
            gap = self.gap
            if self._swap_due:
                self._swap_due = False
                j = self.j
                self.j -= gap
                return self._swap(j - gap, j)

            if self.i < n:
                if self.j >= gap:
                    j = self.j
                    event = self._compare(j - gap, j)
                    if arr[j - gap] > arr[j]:
                        self._swap_due = True
                    else:
                        self.j = -1
                    return event
                self.i += 1
                self.j  = self.i
                continue

            self.gap //= 2
            self.i = self.gap
            self.j = self.i
        return None
