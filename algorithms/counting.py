"""
counting.py — Counting Sort
============================
Comparison-free.  Three passes, all reported as UPDATE events:

  1. count      UPDATE (i)          – arr[i] tallied
  2. place      UPDATE (i, pos)     – arr[i] placed at output[pos],
                                      i walking n-1 → 0 (stable)
  3. copy back  UPDATE (i)          – arr[i] ← output[i]

The prefix-sum between passes 1 and 2 is bookkeeping on the count table
only and produces no event.  Values must be non-negative integers.
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "count ← [0] * (max(a) + 1)",
    "for i in 0 .. n-1: count[a[i]] += 1",
    "for v in 1 .. max: count[v] += count[v-1]",
    "for i in n-1 .. 0:",
    "    count[a[i]] -= 1;  out[count[a[i]]] ← a[i]",
    "for i in 0 .. n-1: a[i] ← out[i]",
]

_COUNT, _PLACE, _COPY = "count", "place", "copy"


class CountingSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self._count:  List[int] = [0] * (max(self.arr, default=0) + 1)
        self._output: List[int] = [0] * len(self.arr)
        self._phase = _COUNT
        self.i      = 0

    def _advance(self) -> Optional[SortEvent]:
        arr   = self.arr
        n     = len(arr)
        count = self._count

        if self._phase == _COUNT:
            if self.i < n:
                i = self.i
                count[arr[i]] += 1
                self.i += 1
                return SortEvent.update(arr, i)
            for v in range(1, len(count)):
                count[v] += count[v - 1]
            self._phase = _PLACE
            self.i      = n - 1

        if self._phase == _PLACE:
            if self.i >= 0:
                i     = self.i
                value = arr[i]
                count[value] -= 1
                pos = count[value]
                self._output[pos] = value
                self.i -= 1
                return SortEvent.update(arr, i, pos)
            self._phase = _COPY
            self.i      = 0

        if self.i < n:
            i = self.i
            self.i += 1
            return self._write(i, self._output[i])
        return None
