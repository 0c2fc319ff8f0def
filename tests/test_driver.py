import logging

import pytest

from algorithms import Algorithm, EventKind
from arrays import Distribution
from config import PlaybackConfig
from engine import PlaybackDriver, RunState, step_delay


def make_driver(clock, size=5, algorithm=Algorithm.BUBBLE,
                distribution=Distribution.DESCENDING, **kwargs):
    config = PlaybackConfig(size=size, algorithm=algorithm, distribution=distribution)
    return PlaybackDriver(config, clock=clock, rng=7, **kwargs)


class ExplodingStream:
    def __iter__(self):
        return self

    def __next__(self):
        raise RuntimeError("boom")


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------
def test_new_driver_is_idle_with_generated_array(clock):
    driver = make_driver(clock)
    state = driver.state()
    assert state.run_state is RunState.IDLE
    assert state.snapshot == (5, 4, 3, 2, 1)
    assert state.comparisons == 0
    assert state.highlighted == ()
    assert not state.is_sorting


def test_start_pause_resume_transitions(clock):
    driver = make_driver(clock)
    assert driver.start() is True
    assert driver.run_state is RunState.RUNNING
    assert driver.start() is False

    assert driver.pause() is True
    assert driver.state().is_paused
    assert driver.state().is_sorting
    assert driver.pause() is False

    assert driver.start() is True
    assert driver.run_state is RunState.RUNNING


def test_pause_when_idle_is_a_no_op(clock):
    driver = make_driver(clock)
    assert driver.pause() is False
    assert driver.run_state is RunState.IDLE


def test_bubble_run_to_completion(clock):
    driver = make_driver(clock)
    driver.jump_to_end()

    state = driver.state()
    assert state.is_complete
    assert state.snapshot == (1, 2, 3, 4, 5)
    assert state.comparisons == 10
    assert state.highlighted == ()
    assert driver.session.stream is None
    assert state.events == 21


def test_start_after_complete_runs_again_on_sorted_array(clock):
    driver = make_driver(clock)
    driver.jump_to_end()

    assert driver.start() is True
    state = driver.state()
    assert state.run_state is RunState.RUNNING
    assert state.comparisons == 0
    assert state.events == 0
    assert state.snapshot == (1, 2, 3, 4, 5)

    driver.jump_to_end()
    assert driver.state().is_complete
    assert driver.comparisons == 10


def test_jump_to_end_leaves_finished_run_alone(clock):
    driver = make_driver(clock)
    driver.jump_to_end()
    before = driver.state()
    driver.jump_to_end()
    assert driver.state() == before


def test_step_updates_snapshot_and_highlights(clock):
    driver = make_driver(clock)
    driver.start()

    first = driver.step()
    assert first.kind is EventKind.COMPARISON
    assert driver.state().highlighted == (0, 1)
    assert driver.comparisons == 1

    second = driver.step()
    assert second.kind is EventKind.SWAP
    assert driver.snapshot == (4, 5, 3, 2, 1)


def test_step_is_ignored_unless_running(clock):
    driver = make_driver(clock)
    assert driver.step() is None
    driver.start()
    driver.pause()
    assert driver.step() is None


@pytest.mark.parametrize("prepare", ["idle", "running", "paused", "complete"])
def test_reset_from_any_state(clock, prepare):
    driver = make_driver(clock, distribution=Distribution.RANDOM, size=20)
    if prepare in ("running", "paused"):
        driver.start()
        driver.step()
    if prepare == "paused":
        driver.pause()
    if prepare == "complete":
        driver.jump_to_end()

    driver.reset()
    state = driver.state()
    assert state.run_state is RunState.IDLE
    assert state.comparisons == 0
    assert state.elapsed_seconds == 0.0
    assert sorted(state.snapshot) == list(range(1, 21))
    assert driver.session is None


def test_same_seed_same_run(clock):
    a = make_driver(clock, size=40, algorithm=Algorithm.QUICK,
                    distribution=Distribution.RANDOM)
    b = make_driver(clock, size=40, algorithm=Algorithm.QUICK,
                    distribution=Distribution.RANDOM)
    assert a.snapshot == b.snapshot
    a.jump_to_end()
    b.jump_to_end()
    assert a.comparisons == b.comparisons


# ---------------------------------------------------------------------------
# Pacing
# ---------------------------------------------------------------------------
def test_step_delay_scales_with_size_and_is_clamped():
    assert step_delay(0) == pytest.approx(0.050)
    assert step_delay(5) == pytest.approx(0.0495)
    assert step_delay(10) == pytest.approx(0.049)
    assert step_delay(200) == pytest.approx(0.030)
    assert step_delay(1000) == pytest.approx(0.010)


def test_tick_runs_only_due_steps(clock):
    driver = make_driver(clock)
    driver.start()

    assert len(driver.tick()) == 1
    assert driver.tick() == []

    clock.advance(0.05)
    assert len(driver.tick()) == 1


def test_tick_catches_up_then_reanchors(clock):
    driver = make_driver(clock)
    driver.start()
    clock.advance(1.0)

    events = driver.tick(max_steps=4)
    assert len(events) == 4
    # still behind after the burst: next step is scheduled from now
    assert driver.session.next_due == pytest.approx(clock.now + step_delay(5))
    assert driver.tick() == []


def test_tick_does_nothing_when_paused(clock):
    driver = make_driver(clock)
    driver.start()
    driver.pause()
    clock.advance(10)
    assert driver.tick() == []


def test_pause_freezes_the_clock(clock):
    driver = make_driver(clock)
    driver.start()
    clock.advance(1.0)
    driver.step()
    assert driver.state().elapsed_seconds == pytest.approx(1.0)

    driver.pause()
    clock.advance(5.0)
    assert driver.state().elapsed_seconds == pytest.approx(1.0)

    driver.start()
    driver.step()
    assert driver.state().elapsed_seconds == pytest.approx(1.0)


@pytest.mark.parametrize("algorithm", [
    Algorithm.QUICK, Algorithm.MERGE, Algorithm.HEAP, Algorithm.SHELL, Algorithm.PANCAKE,
])
def test_pausing_does_not_change_the_run(clock, algorithm):
    straight_events, paused_events = [], []
    straight = make_driver(clock, size=40, algorithm=algorithm,
                           distribution=Distribution.RANDOM, on_step=straight_events.append)
    paused = make_driver(clock, size=40, algorithm=algorithm,
                         distribution=Distribution.RANDOM, on_step=paused_events.append)
    assert paused.snapshot == straight.snapshot

    straight.jump_to_end()

    paused.start()
    while paused.run_state is RunState.RUNNING:
        for _ in range(7):
            paused.step()
        if paused.pause():
            clock.advance(3.0)
            assert paused.tick() == []
            paused.start()

    assert paused.state().is_complete
    assert paused_events == straight_events
    assert paused.snapshot == straight.snapshot == tuple(range(1, 41))
    assert paused.comparisons == straight.comparisons


# ---------------------------------------------------------------------------
# Listeners
# ---------------------------------------------------------------------------
def test_on_comparison_receives_value_and_size(clock):
    calls = []
    driver = make_driver(clock, size=10, on_comparison=lambda v, m: calls.append((v, m)))
    driver.jump_to_end()

    assert len(calls) == driver.comparisons == 45
    assert calls[0] == (10, 10)


def test_failing_listener_does_not_halt(clock, caplog):
    def listener(value, max_value):
        raise ValueError("no audio device")

    driver = make_driver(clock, on_comparison=listener)
    driver.start()
    with caplog.at_level(logging.ERROR):
        event = driver.step()

    assert event.kind is EventKind.COMPARISON
    assert driver.run_state is RunState.RUNNING
    assert "Comparison listener failed" in caplog.text


def test_reset_from_comparison_listener_keeps_fresh_array(clock):
    driver = make_driver(clock, size=10)
    driver.on_comparison = lambda value, max_value: driver.reset()
    driver.start()

    assert driver.step() is None
    assert driver.run_state is RunState.IDLE
    assert driver.snapshot == tuple(range(10, 0, -1))
    assert driver.session is None


def test_reset_while_step_in_flight_discards_stale_event(clock):
    driver = make_driver(clock, size=10)
    driver.start()
    driver.step()
    driver.step()
    assert driver.snapshot == (9, 10, 8, 7, 6, 5, 4, 3, 2, 1)

    def clock_that_resets():
        driver.reset()
        return clock()

    driver._clock = clock_that_resets
    assert driver.step() is None
    driver._clock = clock

    assert driver.run_state is RunState.IDLE
    assert driver.snapshot == tuple(range(10, 0, -1))


def test_on_step_sees_every_event(clock):
    seen = []
    driver = make_driver(clock, on_step=seen.append)
    driver.jump_to_end()
    assert seen[-1].is_complete
    assert sum(1 for e in seen if e.is_comparison) == 10


# ---------------------------------------------------------------------------
# Failures inside the stream
# ---------------------------------------------------------------------------
def test_stream_error_halts_and_keeps_counters(clock, caplog):
    driver = make_driver(clock)
    driver.start()
    driver.step()
    driver.session.stream = ExplodingStream()

    with caplog.at_level(logging.ERROR):
        assert driver.step() is None

    assert driver.run_state is RunState.IDLE
    assert driver.comparisons == 1
    assert "halting" in caplog.text
    assert driver.tick() == []


def test_stream_ending_without_complete_halts(clock, caplog):
    driver = make_driver(clock)
    driver.start()
    driver.session.stream = iter([])

    with caplog.at_level(logging.ERROR):
        assert driver.step() is None

    assert driver.run_state is RunState.IDLE
    assert "without a COMPLETE event" in caplog.text
    # a halted driver can start a fresh run
    assert driver.start() is True


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
def test_configure_algorithm_keeps_array(clock):
    driver = make_driver(clock, size=20, distribution=Distribution.RANDOM)
    before = driver.snapshot
    driver.configure(PlaybackConfig(size=20, algorithm=Algorithm.HEAP,
                                    distribution=Distribution.RANDOM))
    assert driver.snapshot == before
    driver.jump_to_end()
    assert driver.snapshot == tuple(range(1, 21))


def test_configure_size_or_distribution_regenerates(clock):
    driver = make_driver(clock)
    driver.configure(PlaybackConfig(size=12, algorithm=Algorithm.BUBBLE,
                                    distribution=Distribution.DESCENDING))
    assert len(driver.snapshot) == 12

    driver.configure(PlaybackConfig(size=12, algorithm=Algorithm.BUBBLE,
                                    distribution=Distribution.ASCENDING))
    assert driver.snapshot == tuple(range(1, 13))
    assert driver.run_state is RunState.IDLE


def test_state_to_dict(clock):
    driver = make_driver(clock)
    data = driver.state().to_dict()
    assert data["array"] == [5, 4, 3, 2, 1]
    assert data["run_state"] == "idle"
    assert data["algorithm"] == "Bubble Sort"
    assert data["distribution"] == "Descending"
    assert data["is_sorting"] is False
