"""
config.py — Defaults, Bounds & Config Coercion
===============================================
Everything tunable lives here as module constants, plus the small
PlaybackConfig bundle the driver and the web layer pass around.

Size input is forgiving: anything non-numeric or outside
[MIN_SIZE, MAX_SIZE] falls back to the last valid value.  Algorithm and
distribution identifiers are a closed set, so an unknown one raises.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping

from algorithms import Algorithm
from arrays import Distribution

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Array size
# ---------------------------------------------------------------------------
DEFAULT_SIZE = 30
MIN_SIZE     = 10
MAX_SIZE     = 200

# ---------------------------------------------------------------------------
# Selections
# ---------------------------------------------------------------------------
DEFAULT_ALGORITHM    = Algorithm.BUBBLE
DEFAULT_DISTRIBUTION = Distribution.RANDOM

# ---------------------------------------------------------------------------
# Playback pacing (milliseconds per step)
# ---------------------------------------------------------------------------
MIN_STEP_DELAY_MS  = 10
MAX_STEP_DELAY_MS  = 50
MAX_STEPS_PER_TICK = 32     # catch-up cap for a slow-polling host

# ---------------------------------------------------------------------------
# Audio (comparison tones)
# ---------------------------------------------------------------------------
MIN_TONE_HZ = 220.0
MAX_TONE_HZ = 880.0

# ---------------------------------------------------------------------------
# Web app
# ---------------------------------------------------------------------------
SECRET_KEY_ENV = "SORT_VIS_SECRET_KEY"
MAX_SESSIONS   = 256        # live playback drivers kept in memory; least recent evicted


def coerce_size(value: Any, previous: int = DEFAULT_SIZE) -> int:
    """Parse an element count; revert to `previous` if invalid."""
    try:
        size = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric size %r; keeping %d", value, previous)
        return previous
    if not MIN_SIZE <= size <= MAX_SIZE:
        logger.warning(
            "Ignoring size %d outside [%d, %d]; keeping %d",
            size, MIN_SIZE, MAX_SIZE, previous,
        )
        return previous
    return size


@dataclass(frozen=True)
class PlaybackConfig:
    size:         int          = DEFAULT_SIZE
    algorithm:    Algorithm    = DEFAULT_ALGORITHM
    distribution: Distribution = DEFAULT_DISTRIBUTION

    def merge(self, data: Mapping[str, Any]) -> "PlaybackConfig":
        """
        New config with the fields present in `data` applied.

        Raises:
            ValueError – unknown algorithm / distribution identifier.
        """
        changes: Dict[str, Any] = {}
        if "size" in data:
            changes["size"] = coerce_size(data["size"], self.size)
        if data.get("algorithm") is not None:
            changes["algorithm"] = Algorithm.parse(data["algorithm"])
        if data.get("distribution") is not None:
            changes["distribution"] = Distribution.parse(data["distribution"])
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size":         self.size,
            "algorithm":    self.algorithm.label,
            "distribution": self.distribution.label,
        }
