"""
audio.py — Comparison Tone Mapping
===================================
The only audio contract the core owns: a compared value becomes a
frequency, linearly between MIN_TONE_HZ and MAX_TONE_HZ.  The browser
does the actual synthesis.
"""

from config import MAX_TONE_HZ, MIN_TONE_HZ


def tone_frequency(value: float, max_value: float) -> float:
    """Map value/max_value onto [MIN_TONE_HZ, MAX_TONE_HZ]."""
    if max_value <= 0:
        return MIN_TONE_HZ
    ratio = min(max(value / max_value, 0.0), 1.0)
    return MIN_TONE_HZ + ratio * (MAX_TONE_HZ - MIN_TONE_HZ)
