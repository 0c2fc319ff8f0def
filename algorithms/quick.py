"""
quick.py — Quick Sort (Lomuto partition)
=========================================
Pivot is the last element of the range.  Partition events:

  1. COMPARISON (j, high)   – for every j in [low, high-1]
  2. SWAP (i, j)            – when arr[j] < pivot (i is the grown boundary;
                              reported even when i == j)
  3. SWAP (i+1, high)       – pivot dropped into its final slot

Sub-ranges go onto an explicit stack, low side on top so it is sorted
first, the same order the recursive version visits them.
"""

from typing import Iterable, List, Optional, Tuple, Union

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "def quick_sort(a, lo, hi):",
    "    if lo < hi:",
    "        p ← partition(a, lo, hi)",
    "        quick_sort(a, lo, p-1);  quick_sort(a, p+1, hi)",
    "def partition(a, lo, hi):",
    "    pivot ← a[hi];  i ← lo-1",
    "    for j in lo .. hi-1:",
    "        if a[j] < pivot: i ← i+1;  swap a[i], a[j]",
    "    swap a[i+1], a[hi];  return i+1",
]


class _PartitionFrame:
    """Suspended Lomuto partition of arr[low..high]."""

    def __init__(self, low: int, high: int):
        self.low   = low
        self.high  = high
        self.i     = low - 1
        self.j     = low
        self.pivot_index: Optional[int] = None
        self._swap_due = False

    def advance(self, stream: SortStream) -> Optional[SortEvent]:
        if self._swap_due:
            self._swap_due = False
            self.i += 1
            j = self.j
            self.j += 1
            return stream._swap(self.i, j)

        if self.j < self.high:
            j = self.j
            event = stream._compare(j, self.high)
            if stream.arr[j] < stream.arr[self.high]:
                self._swap_due = True
            else:
                self.j += 1
            return event

        if self.pivot_index is None:
            self.pivot_index = self.i + 1
            return stream._swap(self.pivot_index, self.high)
        return None


Frame = Union[Tuple[int, int], _PartitionFrame]


class QuickSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self._stack: List[Frame] = [(0, len(self.arr) - 1)] if self.arr else []

    def _advance(self) -> Optional[SortEvent]:
        while self._stack:
            top = self._stack[-1]

            if isinstance(top, _PartitionFrame):
                event = top.advance(self)
                if event is not None:
                    return event
                self._stack.pop()
                p = top.pivot_index
                self._stack.append((p + 1, top.high))
                self._stack.append((top.low, p - 1))
                continue

            low, high = self._stack.pop()
            if low < high:
                self._stack.append(_PartitionFrame(low, high))
        return None
