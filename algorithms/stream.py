"""
stream.py — Suspendable Sort Stream Base
=========================================
A SortStream is an iterator that performs a sort one observable step at
a time.  Each call to next() runs the algorithm forward until it has
exactly one SortEvent to report, then returns it.  The algorithm's loop
counters, pending actions and (for the divide-and-conquer sorts) call
frames live on the instance, so a stream can sit suspended between any
two events for as long as the caller likes.

Subclasses implement `_advance()`:
    return the next SortEvent, or None once the array is sorted.

The base class turns the first None into the COMPLETE event and every
call after that into StopIteration.

    stream = BubbleSortStream([5, 3, 4, 1, 2])
    for event in stream:
        ...
"""

from typing import Iterable, Iterator, List, Optional

from algorithms.event import SortEvent


class StreamContractError(RuntimeError):
    """A stream ended without reporting COMPLETE."""


class SortStream(Iterator[SortEvent]):
    """
    Attributes:
        arr      : The stream's private working copy.
        finished : True once the COMPLETE event has been handed out.
    """

    def __init__(self, values: Iterable[int]):
        self.arr:      List[int] = list(values)
        self.finished: bool      = False

    def __iter__(self) -> "SortStream":
        return self

    def __next__(self) -> SortEvent:
        if self.finished:
            raise StopIteration
        event = self._advance()
        if event is None:
            self.finished = True
            return SortEvent.complete(self.arr)
        return event

    def _advance(self) -> Optional[SortEvent]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Mutation helpers: mutate, then snapshot
    # ------------------------------------------------------------------
    def _swap(self, a: int, b: int) -> SortEvent:
        arr = self.arr
        arr[a], arr[b] = arr[b], arr[a]
        return SortEvent.swap(arr, a, b)

    def _write(self, idx: int, value: int) -> SortEvent:
        self.arr[idx] = value
        return SortEvent.update(self.arr, idx)

    def _compare(self, a: int, b: int) -> SortEvent:
        return SortEvent.comparison(self.arr, a, b)
