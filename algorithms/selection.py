"""
selection.py — Selection Sort
==============================
For each i, scans j = i+1 .. n-1 reporting COMPARISON (min_index, j)
before min_index moves, then a single SWAP (i, min_index) if a smaller
element was found.
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "for i in 0 .. n-2:",
    "    min ← i",
    "    for j in i+1 .. n-1:",
    "        compare a[min], a[j]",
    "        if a[j] < a[min]: min ← j",
    "    if min ≠ i: swap a[i], a[min]",
]


class SelectionSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.i         = 0
        self.j         = 1
        self.min_index = 0

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr
        n   = len(arr)

        while self.i < n - 1:
            if self.j < n:
                j = self.j
                event = self._compare(self.min_index, j)
                if arr[j] < arr[self.min_index]:
                    self.min_index = j
                self.j += 1
                return event

            # inner scan finished; swap the minimum into place
            i, m = self.i, self.min_index
            self.i        += 1
            self.min_index = self.i
            self.j         = self.i + 1
            if m != i:
                return self._swap(i, m)
        return None
