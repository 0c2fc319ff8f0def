"""
event.py — Sort Event Snapshot
===============================
Every sorting algorithm is a stream of SortEvent objects.  A SortEvent
is a frozen-in-time picture of one observable step:

    • kind      – COMPARISON, SWAP, UPDATE or COMPLETE
    • indices   – the 0–2 positions the step touched
    • snapshot  – the full array at that instant

Design decisions:
  - SortEvent is a frozen dataclass and the snapshot is a tuple.  The
    stream is the only writer of its private list; every event carries
    its own copy, so the driver / renderer can keep old events around
    without them changing underneath.
  - COMPARISON snapshots are taken before anything moves.  SWAP / UPDATE
    snapshots are taken after the mutation they describe.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Tuple


class EventKind(Enum):
    COMPARISON = "comparison"
    SWAP       = "swap"
    UPDATE     = "update"
    COMPLETE   = "complete"


@dataclass(frozen=True)
class SortEvent:
    """
    Attributes:
        kind     : EventKind tag.
        indices  : Positions into `snapshot` (empty for COMPLETE).
        snapshot : Array state; post-mutation for SWAP / UPDATE.
    """

    kind:     EventKind
    indices:  Tuple[int, ...]
    snapshot: Tuple[int, ...]

    # -- constructors used by the streams --
    @classmethod
    def comparison(cls, arr: Sequence[int], a: int, b: int) -> "SortEvent":
        return cls(EventKind.COMPARISON, (a, b), tuple(arr))

    @classmethod
    def swap(cls, arr: Sequence[int], a: int, b: int) -> "SortEvent":
        return cls(EventKind.SWAP, (a, b), tuple(arr))

    @classmethod
    def update(cls, arr: Sequence[int], *indices: int) -> "SortEvent":
        return cls(EventKind.UPDATE, tuple(indices), tuple(arr))

    @classmethod
    def complete(cls, arr: Sequence[int]) -> "SortEvent":
        return cls(EventKind.COMPLETE, (), tuple(arr))

    # -- queries --
    @property
    def is_comparison(self) -> bool:
        return self.kind is EventKind.COMPARISON

    @property
    def is_complete(self) -> bool:
        return self.kind is EventKind.COMPLETE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type":    self.kind.value,
            "indices": list(self.indices),
            "array":   list(self.snapshot),
        }
