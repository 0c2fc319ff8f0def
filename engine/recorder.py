"""
recorder.py — Run Recorder & Analytics
========================================
Drains a complete sort stream (no pacing), counts its events by kind and
checks the stream kept its contract.  Feeds the summary panel and
Comparison Mode.

Usage:
    rec = Recorder()
    rec.start("Quick Sort", values)
    metrics = rec.run_to_completion()
    rec.export()                     # serialisable snapshot

Comparison Mode:
    Two Recorders over the SAME input, then compare(rec1, rec2).
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from algorithms import (
    AlgoInfo,
    Algorithm,
    EventKind,
    SortEvent,
    SortStream,
    StreamContractError,
    get_algorithm,
)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the summary panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    size:          int   = 0
    comparisons:   int   = 0
    swaps:         int   = 0
    updates:       int   = 0
    total_events:  int   = 0          # including the COMPLETE event
    wall_time_ms:  float = 0.0        # wall-clock time to drain the stream
    sorted_ok:     bool  = False      # final snapshot is ascending
    placeholder:   bool  = False      # algorithm borrowed another stream

    @property
    def writes(self) -> int:
        return self.swaps + self.updates

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "writes": self.writes}


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_writes:      str = ""   # which algo moved data less
    winner_events:      str = ""   # which algo animates in fewer frames

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":               self.left.to_dict(),
            "right":              self.right.to_dict(),
            "winner_comparisons": self.winner_comparisons,
            "winner_writes":      self.winner_writes,
            "winner_events":      self.winner_events,
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        events  : Every SortEvent of the run, COMPLETE last.
        metrics : RunMetrics (available after run_to_completion).
        final   : Final snapshot.
    """

    def __init__(self):
        self.events:  List[SortEvent]      = []
        self.metrics: Optional[RunMetrics] = None
        self.final:   Tuple[int, ...]      = ()

        self._algo_info: Optional[AlgoInfo]   = None
        self._initial:   Tuple[int, ...]      = ()
        self._stream:    Optional[SortStream] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algorithm: Union[Algorithm, str], values: Iterable[int]) -> None:
        """Build the stream for this run."""
        info = get_algorithm(algorithm)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")

        self._algo_info = info
        self._initial   = tuple(values)
        self._stream    = info.factory(self._initial)
        self.events     = []
        self.metrics    = None
        self.final      = ()

    def run_to_completion(self) -> RunMetrics:
        """
        Exhaust the stream, record every event, compute metrics.

        Raises:
            RuntimeError        – start() was never called.
            StreamContractError – the stream stopped without COMPLETE, or
                                  an event pointed outside its snapshot.
        """
        if self._stream is None:
            raise RuntimeError("Call start() first.")

        t0 = time.monotonic()
        for event in self._stream:
            _check_indices(event)
            self.events.append(event)
        wall_ms = (time.monotonic() - t0) * 1000

        if not self.events or not self.events[-1].is_complete:
            raise StreamContractError(
                f"{self._algo_info.label} stream ended without a COMPLETE event"
            )

        self.final   = self.events[-1].snapshot
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def count(self, kind: EventKind) -> int:
        return sum(1 for e in self.events if e.kind is kind)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algorithm": self._algo_info.label if self._algo_info else "",
            "initial":   list(self._initial),
            "metrics":   self.metrics.to_dict() if self.metrics else {},
            "events":    [e.to_dict() for e in self.events],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            size=len(self._initial),
            comparisons=self.count(EventKind.COMPARISON),
            swaps=self.count(EventKind.SWAP),
            updates=self.count(EventKind.UPDATE),
            total_events=len(self.events),
            wall_time_ms=round(wall_ms, 2),
            sorted_ok=list(self.final) == sorted(self._initial),
            placeholder=info.placeholder,
        )


def _check_indices(event: SortEvent) -> None:
    n = len(event.snapshot)
    if any(not 0 <= i < n for i in event.indices):
        raise StreamContractError(
            f"{event.kind.value} event indices {event.indices} outside snapshot of length {n}"
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_writes=winner(l.writes, r.writes),
        winner_events=winner(l.total_events, r.total_events),
    )
