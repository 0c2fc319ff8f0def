"""
bubble.py — Bubble Sort
========================
Events, in order, for each pass i and position j:
  1. COMPARISON (j, j+1)
  2. SWAP (j, j+1)      – only when arr[j] > arr[j+1]

Always runs the full n(n-1)/2 comparisons (no early exit), so a reversed
array of 5 elements reports exactly 10 comparisons.
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    for j in 0 .. n-i-2:",
    "        compare a[j], a[j+1]",
    "        if a[j] > a[j+1]:",
    "            swap a[j], a[j+1]",
]


class BubbleSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.i = 0
        self.j = 0
        self._swap_due = False

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr
        n   = len(arr)

        if self._swap_due:
            self._swap_due = False
            j = self.j
            self.j += 1
            return self._swap(j, j + 1)

        while self.i < n - 1:
            if self.j < n - self.i - 1:
                j = self.j
                event = self._compare(j, j + 1)
                if arr[j] > arr[j + 1]:
                    self._swap_due = True
                else:
                    self.j += 1
                return event
            self.i += 1
            self.j = 0
        return None
