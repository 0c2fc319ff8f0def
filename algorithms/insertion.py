"""
insertion.py — Insertion Sort
==============================
For each i ≥ 1 the element arr[i] is held as `key` and walked left:

  1. COMPARISON (j, j+1) before every test of arr[j] > key
  2. UPDATE (j+1)        when arr[j] shifts one slot right
  3. UPDATE (j+1)        once the scan stops and key is dropped in

The scan is a small phase machine (load → compare ⇄ shift → place) so
the stream can stop between any two of those events.
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "for i in 1 .. n-1:",
    "    key ← a[i];  j ← i-1",
    "    while j ≥ 0:",
    "        compare a[j], a[j+1]",
    "        if a[j] > key: a[j+1] ← a[j];  j ← j-1",
    "        else: break",
    "    a[j+1] ← key",
]

_LOAD, _COMPARE, _SHIFT, _PLACE = "load", "compare", "shift", "place"


class InsertionSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.i      = 1
        self.j      = 0
        self.key    = 0
        self._phase = _LOAD

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr

        while self.i < len(arr):
            if self._phase == _LOAD:
                self.key    = arr[self.i]
                self.j      = self.i - 1
                self._phase = _COMPARE

            if self._phase == _COMPARE:
                if self.j >= 0:
                    j = self.j
                    event = self._compare(j, j + 1)
                    self._phase = _SHIFT if arr[j] > self.key else _PLACE
                    return event
                self._phase = _PLACE

            if self._phase == _SHIFT:
                j = self.j
                self.j     -= 1
                self._phase = _COMPARE
                return self._write(j + 1, arr[j])

            pos = self.j + 1
            self.i     += 1
            self._phase = _LOAD
            return self._write(pos, self.key)
        return None
