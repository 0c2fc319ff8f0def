"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackDriver, Recorder, compare
"""

from engine.audio    import tone_frequency
from engine.driver   import DriverState, PlaybackDriver, PlaybackSession, RunState, step_delay
from engine.recorder import ComparisonResult, Recorder, RunMetrics, compare

__all__ = [
    "ComparisonResult",
    "DriverState",
    "PlaybackDriver",
    "PlaybackSession",
    "Recorder",
    "RunMetrics",
    "RunState",
    "compare",
    "step_delay",
    "tone_frequency",
]
