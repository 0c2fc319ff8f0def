"""
gnome.py — Gnome Sort
======================
A single cursor walks right while neighbours are ordered and steps back
after every swap.

  1. COMPARISON (pos-1, pos)
  2. SWAP (pos-1, pos)   – when out of order; cursor moves left
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "pos ← 0",
    "while pos < n:",
    "    if pos == 0 or a[pos-1] ≤ a[pos]: pos ← pos+1",
    "    else: swap a[pos-1], a[pos];  pos ← pos-1",
]


class GnomeSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.pos = 0
        self._swap_due = False

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr

        if self._swap_due:
            self._swap_due = False
            pos = self.pos
            self.pos -= 1
            return self._swap(pos - 1, pos)

        while self.pos < len(arr):
            if self.pos == 0:
                self.pos = 1
                continue
            pos = self.pos
            event = self._compare(pos - 1, pos)
            if arr[pos - 1] > arr[pos]:
                self._swap_due = True
            else:
                self.pos += 1
            return event
        return None
