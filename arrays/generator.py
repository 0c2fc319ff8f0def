"""
generator.py — Initial Array Generator
=======================================
Produces the array a sort starts from: the integers 1..N, each exactly
once, arranged according to a Distribution.

    generate(6, Distribution.SPLIT_ASCENDING)   →  (4, 5, 6, 1, 2, 3)
    generate(5, "Descending")                   →  (5, 4, 3, 2, 1)

Design decisions:
  - Output is a tuple.  Snapshots are immutable everywhere in the app, so
    the generator hands back the same kind of value the streams emit.
  - Randomness comes from an injectable `random.Random` (or an int seed),
    so tests and replays can pin the shuffle.
  - size < 1 is the caller's problem (the config layer clamps it).
"""

import random
from enum import Enum
from typing import Tuple, Union


# ---------------------------------------------------------------------------
# Distributions — values double as display labels
# ---------------------------------------------------------------------------
class Distribution(Enum):
    RANDOM           = "Random"
    ASCENDING        = "Ascending"
    DESCENDING       = "Descending"
    SPLIT_ASCENDING  = "Split Ascending"
    SPLIT_DESCENDING = "Split Descending"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["Distribution", str]) -> "Distribution":
        """Accept an enum member, its label ("Split Ascending") or its name."""
        if isinstance(value, cls):
            return value
        for dist in cls:
            if value == dist.value or str(value).upper().replace(" ", "_") == dist.name:
                return dist
        raise ValueError(f"Unknown distribution: {value!r}")


RandomSource = Union[random.Random, int, None]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def generate(
    size: int,
    distribution: Union[Distribution, str] = Distribution.RANDOM,
    rng: RandomSource = None,
) -> Tuple[int, ...]:
    """
    Build an initial Array Snapshot.

    Args:
        size         : Number of elements N (precondition: N ≥ 1).
        distribution : Arrangement policy (enum member or label).
        rng          : Random instance or seed; only used for RANDOM.

    Returns:
        Tuple of N distinct integers 1..N.
    """
    dist   = Distribution.parse(distribution)
    values = list(range(1, size + 1))
    mid    = size // 2

    if dist is Distribution.RANDOM:
        return tuple(shuffle(values, rng))
    if dist is Distribution.ASCENDING:
        return tuple(values)
    if dist is Distribution.DESCENDING:
        return tuple(reversed(values))
    if dist is Distribution.SPLIT_ASCENDING:
        return tuple(values[mid:] + values[:mid])
    # SPLIT_DESCENDING
    return tuple(values[mid:][::-1] + values[:mid][::-1])


def shuffle(values: list, rng: RandomSource = None) -> list:
    """In-place Fisher–Yates shuffle; returns `values` for chaining."""
    rand = _as_random(rng)
    for i in range(len(values) - 1, 0, -1):
        j = rand.randint(0, i)
        values[i], values[j] = values[j], values[i]
    return values


def _as_random(rng: RandomSource) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)
