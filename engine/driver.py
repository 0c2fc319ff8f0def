"""
driver.py — Playback Driver
============================
The PlaybackDriver is the ONLY object the UI talks to during a sort.
It owns the array being shown, builds a SortStream when a run starts,
pulls one event per step at a paced cadence and keeps the counters the
UI displays.

State machine:
    IDLE      →  start()          →  RUNNING
    COMPLETE  →  start()          →  RUNNING   (new run on the sorted array)
    RUNNING   →  pause()          →  PAUSED
    PAUSED    →  start()          →  RUNNING   (same stream, clock continues)
    RUNNING   →  COMPLETE event   →  COMPLETE
    RUNNING   →  step error       →  IDLE      (halted, logged)
    any       →  reset()          →  IDLE      (fresh array)

Pacing:
    There is no timer thread.  The host calls tick() from its own loop
    (the browser polls /api/tick every animation frame); tick() performs
    whatever steps have come due.  The per-step delay shrinks as the
    array grows and is clamped to [MIN_STEP_DELAY_MS, MAX_STEP_DELAY_MS].

Thread safety:
    Not thread-safe.  One driver per user; main.py holds a per-user lock
    around every call.  A reset() fired from inside a step (e.g. by a
    listener) discards the event that step drew.
"""

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from algorithms import Algorithm, SortEvent, SortStream, resolve
from arrays import Distribution, generate
from arrays.generator import RandomSource
from config import (
    MAX_STEP_DELAY_MS,
    MAX_STEPS_PER_TICK,
    MIN_STEP_DELAY_MS,
    PlaybackConfig,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    PAUSED   = "paused"
    COMPLETE = "complete"


def step_delay(size: int) -> float:
    """Seconds between steps for an array of `size` elements."""
    ms = 50 - size / 10
    ms = min(MAX_STEP_DELAY_MS, max(MIN_STEP_DELAY_MS, ms))
    return ms / 1000.0


# ---------------------------------------------------------------------------
# Session — everything that lives only for the duration of one run
# ---------------------------------------------------------------------------
@dataclass
class PlaybackSession:
    """
    Attributes:
        stream      : The in-progress SortStream (None once finished / halted).
        start_time  : Clock base; elapsed = now - start_time while running.
        elapsed     : Seconds elapsed as of the last step (frozen while paused).
        comparisons : COMPARISON events consumed so far.
        events      : Total events consumed so far.
        highlighted : Indices of the last event.
        next_due    : Clock time the next step is due (None = not scheduled).
    """

    stream:      Optional[SortStream]
    start_time:  float
    elapsed:     float           = 0.0
    comparisons: int             = 0
    events:      int             = 0
    highlighted: Tuple[int, ...] = ()
    next_due:    Optional[float] = None


# ---------------------------------------------------------------------------
# Read-only view handed to the presentation layer
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DriverState:
    snapshot:        Tuple[int, ...]
    highlighted:     Tuple[int, ...]
    comparisons:     int
    elapsed_seconds: float
    run_state:       RunState
    size:            int
    algorithm:       Algorithm
    distribution:    Distribution
    events:          int = 0

    @property
    def is_sorting(self) -> bool:
        return self.run_state in (RunState.RUNNING, RunState.PAUSED)

    @property
    def is_paused(self) -> bool:
        return self.run_state is RunState.PAUSED

    @property
    def is_complete(self) -> bool:
        return self.run_state is RunState.COMPLETE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "array":           list(self.snapshot),
            "highlighted":     list(self.highlighted),
            "comparisons":     self.comparisons,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "run_state":       self.run_state.value,
            "is_sorting":      self.is_sorting,
            "is_paused":       self.is_paused,
            "is_complete":     self.is_complete,
            "size":            self.size,
            "algorithm":       self.algorithm.label,
            "distribution":    self.distribution.label,
            "events":          self.events,
        }


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------
class PlaybackDriver:
    """
    Attributes:
        config        : Current PlaybackConfig (size / algorithm / distribution).
        snapshot      : Array currently on screen.
        run_state     : Current RunState.
        session       : PlaybackSession of the current run, or None when idle.
        on_comparison : Optional callback(value, max_value) per COMPARISON —
                        the audio hook.
        on_step       : Optional callback(SortEvent) after every consumed event.
    """

    def __init__(
        self,
        config: Optional[PlaybackConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: RandomSource = None,
        on_comparison: Optional[Callable[[int, int], None]] = None,
        on_step: Optional[Callable[[SortEvent], None]] = None,
    ):
        self.config:        PlaybackConfig            = config or PlaybackConfig()
        self.run_state:     RunState                  = RunState.IDLE
        self.session:       Optional[PlaybackSession] = None
        self.on_comparison = on_comparison
        self.on_step       = on_step

        self._clock = clock
        # one Random for the driver's lifetime
        self._rng   = rng if rng is None or isinstance(rng, random.Random) else random.Random(rng)
        self.snapshot: Tuple[int, ...] = self._fresh_array()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start(self) -> bool:
        """Begin a run from IDLE or COMPLETE, or resume from PAUSED.  False while running."""
        now = self._clock()

        if self.run_state is RunState.PAUSED and self.session is not None:
            self.session.start_time = now - self.session.elapsed
            self.session.next_due   = now
            self._transition(RunState.RUNNING)
            return True

        if self.run_state in (RunState.IDLE, RunState.COMPLETE):
            stream = resolve(self.config.algorithm)(self.snapshot)
            self.session = PlaybackSession(stream=stream, start_time=now, next_due=now)
            self._transition(RunState.RUNNING)
            return True

        return False

    def pause(self) -> bool:
        """RUNNING → PAUSED, freezing the clock.  False if not running."""
        if self.run_state is not RunState.RUNNING or self.session is None:
            return False
        self.session.elapsed  = self._clock() - self.session.start_time
        self.session.next_due = None
        self._transition(RunState.PAUSED)
        return True

    def reset(self) -> None:
        """Drop any run and show a freshly generated array."""
        self.session  = None
        self.snapshot = self._fresh_array()
        self._transition(RunState.IDLE)

    def configure(self, config: PlaybackConfig) -> None:
        """
        Apply new settings.  A new size or distribution regenerates the
        array (and therefore resets); a new algorithm alone takes effect on
        the next start from IDLE.
        """
        previous, self.config = self.config, config
        if (config.size, config.distribution) != (previous.size, previous.distribution):
            self.reset()

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def step(self) -> Optional[SortEvent]:
        """Consume one event now.  Returns it, or None if nothing happened."""
        session = self.session
        if self.run_state is not RunState.RUNNING or session is None or session.stream is None:
            return None

        try:
            event = next(session.stream)
        except StopIteration:
            logger.error("%s stream ended without a COMPLETE event", self.config.algorithm.label)
            self._halt()
            return None
        except Exception:
            logger.exception("Error during %s step; halting", self.config.algorithm.label)
            self._halt()
            return None

        now = self._clock()
        if self.session is not session:
            # reset while this step was in flight; the event is stale
            return None
        self.snapshot       = event.snapshot
        session.highlighted = event.indices
        session.elapsed     = now - session.start_time
        session.events     += 1

        if event.is_comparison:
            session.comparisons += 1
            self._notify_comparison(event)
            if self.session is not session:
                return None

        if event.is_complete:
            session.highlighted = ()
            session.next_due    = None
            session.stream      = None
            self._transition(RunState.COMPLETE)
        else:
            base = now if session.next_due is None else min(session.next_due, now)
            session.next_due = base + step_delay(self.config.size)

        if self.on_step:
            self.on_step(event)
        return event

    def tick(self, max_steps: int = MAX_STEPS_PER_TICK) -> List[SortEvent]:
        """
        Call from the host loop.  Performs every step that has come due
        (at most `max_steps`) and returns the events consumed.
        """
        events: List[SortEvent] = []
        while len(events) < max_steps and self.run_state is RunState.RUNNING:
            due = self.session.next_due if self.session else None
            if due is None or self._clock() < due:
                break
            event = self.step()
            if event is None:
                break
            events.append(event)

        # too far behind to catch up: re-anchor rather than burst forever
        session = self.session
        if self.run_state is RunState.RUNNING and session and session.next_due is not None:
            now = self._clock()
            if session.next_due < now:
                session.next_due = now + step_delay(self.config.size)
        return events

    def jump_to_end(self) -> None:
        """Start if idle (or resume if paused), then drain the stream without pacing."""
        if self.run_state in (RunState.IDLE, RunState.PAUSED):
            self.start()
        while self.run_state is RunState.RUNNING:
            if self.step() is None:
                break

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def state(self) -> DriverState:
        session = self.session
        return DriverState(
            snapshot=self.snapshot,
            highlighted=session.highlighted if session else (),
            comparisons=session.comparisons if session else 0,
            elapsed_seconds=session.elapsed if session else 0.0,
            run_state=self.run_state,
            size=self.config.size,
            algorithm=self.config.algorithm,
            distribution=self.config.distribution,
            events=session.events if session else 0,
        )

    @property
    def is_sorting(self) -> bool:
        return self.run_state in (RunState.RUNNING, RunState.PAUSED)

    @property
    def comparisons(self) -> int:
        return self.session.comparisons if self.session else 0

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fresh_array(self) -> Tuple[int, ...]:
        return generate(self.config.size, self.config.distribution, self._rng)

    def _halt(self) -> None:
        if self.session is not None:
            self.session.stream   = None
            self.session.next_due = None
        self._transition(RunState.IDLE)

    def _transition(self, new_state: RunState) -> None:
        if new_state is not self.run_state:
            logger.debug("Playback %s → %s", self.run_state.value, new_state.value)
        self.run_state = new_state

    def _notify_comparison(self, event: SortEvent) -> None:
        if not self.on_comparison or not event.indices:
            return
        value = event.snapshot[event.indices[0]]
        try:
            self.on_comparison(value, self.config.size)
        except Exception:
            logger.exception("Comparison listener failed")
