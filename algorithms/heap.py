"""
heap.py — Heap Sort
====================
Phase 1 builds a max-heap bottom-up (sift-down from n//2-1 to 0).
Phase 2 repeatedly moves the max to the end and re-sifts the shrunk heap.

Sift-down events, per node:
  1. COMPARISON (largest, left)    – if the left child exists
  2. COMPARISON (largest, right)   – if the right child exists
  3. SWAP (node, largest)          – if a child won; then continue at
                                     the child's slot
Extraction event:
  •  SWAP (0, end)                 – before each re-sift of [0, end)

Sift-down is tail-recursive, so a single _SiftDown cursor replaces the
recursion.
"""

from typing import Iterable, List, Optional

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "for i in n//2-1 .. 0: heapify(a, n, i)",
    "for end in n-1 .. 1:",
    "    swap a[0], a[end]",
    "    heapify(a, end, 0)",
    "def heapify(a, size, i):",
    "    largest ← i;  compare with children 2i+1, 2i+2",
    "    if largest ≠ i: swap a[i], a[largest];  heapify(a, size, largest)",
]

_LEFT, _RIGHT, _SWAP = "left", "right", "swap"


class _SiftDown:
    """Cursor for one sift-down over arr[0:size] starting at `node`."""

    def __init__(self, size: int, node: int):
        self.size    = size
        self.node    = node
        self.largest = node
        self._stage  = _LEFT

    def advance(self, stream: SortStream) -> Optional[SortEvent]:
        while True:
            if self._stage == _LEFT:
                self._stage = _RIGHT
                child = 2 * self.node + 1
                if child < self.size:
                    return self._challenge(stream, child)

            if self._stage == _RIGHT:
                self._stage = _SWAP
                child = 2 * self.node + 2
                if child < self.size:
                    return self._challenge(stream, child)

            if self.largest == self.node:
                return None
            node, largest = self.node, self.largest
            self.node   = largest
            self._stage = _LEFT
            return stream._swap(node, largest)

    def _challenge(self, stream: SortStream, child: int) -> SortEvent:
        event = stream._compare(self.largest, child)
        if stream.arr[child] > stream.arr[self.largest]:
            self.largest = child
        return event


class HeapSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        n = len(self.arr)
        self._build_index = n // 2 - 1
        self._end         = n - 1
        self._sift: Optional[_SiftDown] = None

    def _advance(self) -> Optional[SortEvent]:
        while True:
            if self._sift is not None:
                event = self._sift.advance(self)
                if event is not None:
                    return event
                self._sift = None

            if self._build_index >= 0:
                self._sift = _SiftDown(len(self.arr), self._build_index)
                self._build_index -= 1
                continue

            if self._end > 0:
                end = self._end
                self._end -= 1
                self._sift = _SiftDown(end, 0)
                return self._swap(0, end)
            return None
