"""
cycle.py — Cycle Sort
======================
Writes every element straight to its final slot, following each
permutation cycle from `cycle_start`.  The element in flight is held
outside the array.

  1. COMPARISON (cycle_start, i)   – counting how many elements are
                                     smaller than the held item
  2. UPDATE (pos)                  – held item written to its slot; the
                                     displaced value becomes the new item

A cycle closes when the write lands back on cycle_start.
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "for start in 0 .. n-2:",
    "    item ← a[start];  pos ← start + #{i > start : a[i] < item}",
    "    if pos == start: continue",
    "    swap item into a[pos]",
    "    while pos ≠ start:",
    "        pos ← start + #{i > start : a[i] < item}",
    "        swap item into a[pos]",
]

_START, _SCAN = "start", "scan"


class CycleSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.cycle_start = 0
        self.item  = 0
        self.pos   = 0
        self.i     = 0
        self._first = True
        self._phase = _START

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr
        n   = len(arr)

        while self.cycle_start < n - 1:
            start = self.cycle_start

            if self._phase == _START:
                self.item   = arr[start]
                self.pos    = start
                self.i      = start + 1
                self._first = True
                self._phase = _SCAN

            if self.i < n:
                i = self.i
                event = self._compare(start, i)
                if arr[i] < self.item:
                    self.pos += 1
                self.i += 1
                return event

            if self._first and self.pos == start:
                self._next_cycle()
                continue

            while self.pos < n - 1 and self.item == arr[self.pos] and self.pos != start:
                self.pos += 1

            target = self.pos
            arr[target], self.item = self.item, arr[target]
            event = SortEvent.update(arr, target)

            if target == start:
                self._next_cycle()
            else:
                self.pos    = start
                self.i      = start + 1
                self._first = False
            return event
        return None

    def _next_cycle(self) -> None:
        self.cycle_start += 1
        self._phase = _START
