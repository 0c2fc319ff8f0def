"""
pancake.py — Pancake Sort
==========================
Only prefix reversals ("flips") are allowed.  For each shrinking size:

  1. COMPARISON (max_idx, i)   – find the largest of a[0:size]
  2. SWAP (l, k-l) …           – flip it to the front (skipped if it is
                                 already there), then flip it down to
                                 a[size-1]

A flip of a[0..k] is reported as its individual end-to-end swaps, which
are queued and handed out one per event.
"""

from collections import deque
from typing import Deque, Iterable, List, Optional, Tuple

from algorithms.event import SortEvent
from algorithms.stream import SortStream


PSEUDOCODE: List[str] = [
    "for size in n .. 2:",
    "    m ← argmax(a[0:size])",
    "    if m ≠ size-1:",
    "        flip(a, m)           # bring max to the front",
    "        flip(a, size-1)      # and down into place",
]


def flip_pairs(k: int) -> List[Tuple[int, int]]:
    """Swaps that reverse a[0..k]."""
    return [(left, k - left) for left in range((k + 1) // 2)]


class PancakeSortStream(SortStream):
    def __init__(self, values: Iterable[int]):
        super().__init__(values)
        self.size    = len(self.arr)
        self.i       = 1
        self.max_idx = 0
        self._pending: Deque[Tuple[int, int]] = deque()

    def _advance(self) -> Optional[SortEvent]:
        arr = self.arr

        if self._pending:
            return self._swap(*self._pending.popleft())

        while self.size > 1:
            if self.i < self.size:
                i = self.i
                event = self._compare(self.max_idx, i)
                if arr[i] > arr[self.max_idx]:
                    self.max_idx = i
                self.i += 1
                return event

            m, last = self.max_idx, self.size - 1
            self.size   -= 1
            self.i       = 1
            self.max_idx = 0
            if m != last:
                self._pending.extend(flip_pairs(m))
                self._pending.extend(flip_pairs(last))
                return self._swap(*self._pending.popleft())
        return None
