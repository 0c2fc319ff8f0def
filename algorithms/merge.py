"""
merge.py — Merge Sort (top-down)
=================================
Recursion is replaced by an explicit frame stack.  Two frame kinds:

  • a (left, right) range still to be split
  • a _MergeFrame that merges two sorted neighbours

Splitting a range pushes [merge, right half, left half] so the left half
is sorted first and the merge runs only after both halves are done.

Merge events:
  1. COMPARISON (left+i, mid+1+j)   – heads of the two runs, by their
                                      original positions
  2. UPDATE (k)                     – after each write back into the array
  3. UPDATE (k)                     – for every element drained from
                                      whichever run is left over

Ties take from the left run, so the sort is stable.
"""

from typing import Iterable, List, Optional, Tuple, Union

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "def merge_sort(a, l, r):",
    "    if l < r:",
    "        m ← (l + r) // 2",
    "        merge_sort(a, l, m);  merge_sort(a, m+1, r)",
    "        merge(a, l, m, r)",
    "def merge(a, l, m, r):",
    "    L ← a[l..m];  R ← a[m+1..r]",
    "    while both non-empty: compare heads, write smaller to a[k]",
    "    copy the rest of L, then the rest of R",
]


class _MergeFrame:
    """Suspended merge of arr[left..mid] with arr[mid+1..right]."""

    def __init__(self, left: int, mid: int, right: int):
        self.left  = left
        self.mid   = mid
        self.right = right
        self.L: Optional[List[int]] = None
        self.R: Optional[List[int]] = None
        self.i = 0
        self.j = 0
        self.k = left
        self._write_due = False

    def advance(self, stream: SortStream) -> Optional[SortEvent]:
        # runs are copied lazily: the halves are only sorted once this
        # frame reaches the top of the stack
        if self.L is None:
            self.L = stream.arr[self.left:self.mid + 1]
            self.R = stream.arr[self.mid + 1:self.right + 1]
        L, R = self.L, self.R

        if self._write_due:
            self._write_due = False
            if L[self.i] <= R[self.j]:
                value = L[self.i]
                self.i += 1
            else:
                value = R[self.j]
                self.j += 1
            return self._emit(stream, value)

        if self.i < len(L) and self.j < len(R):
            self._write_due = True
            return stream._compare(self.left + self.i, self.mid + 1 + self.j)

        if self.i < len(L):
            value = L[self.i]
            self.i += 1
            return self._emit(stream, value)
        if self.j < len(R):
            value = R[self.j]
            self.j += 1
            return self._emit(stream, value)
        return None

    def _emit(self, stream: SortStream, value: int) -> SortEvent:
        k = self.k
        self.k += 1
        return stream._write(k, value)


Frame = Union[Tuple[int, int], _MergeFrame]


class MergeSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self._stack: List[Frame] = [(0, len(self.arr) - 1)] if self.arr else []

    def _advance(self) -> Optional[SortEvent]:
        while self._stack:
            top = self._stack[-1]

            if isinstance(top, _MergeFrame):
                event = top.advance(self)
                if event is not None:
                    return event
                self._stack.pop()
                continue

            left, right = self._stack.pop()
            if left < right:
                mid = (left + right) // 2
                self._stack.append(_MergeFrame(left, mid, right))
                self._stack.append((mid + 1, right))
                self._stack.append((left, mid))
        return None
