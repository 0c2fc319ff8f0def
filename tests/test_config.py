import logging

import pytest

from algorithms import Algorithm
from arrays import Distribution
from config import (
    DEFAULT_SIZE,
    MAX_TONE_HZ,
    MIN_TONE_HZ,
    PlaybackConfig,
    coerce_size,
)
from engine import tone_frequency


# ---------------------------------------------------------------------------
# Size coercion
# ---------------------------------------------------------------------------
def test_coerce_size_accepts_bounds_and_strings():
    assert coerce_size("10") == 10
    assert coerce_size(200) == 200
    assert coerce_size("75", previous=40) == 75


@pytest.mark.parametrize("bad", ["abc", "", None, 9, 201, "-5", "12.5"])
def test_coerce_size_reverts_on_invalid(bad, caplog):
    with caplog.at_level(logging.WARNING):
        assert coerce_size(bad, previous=42) == 42
    assert "Ignoring" in caplog.text


# ---------------------------------------------------------------------------
# PlaybackConfig
# ---------------------------------------------------------------------------
def test_defaults():
    config = PlaybackConfig()
    assert config.size == DEFAULT_SIZE
    assert config.algorithm is Algorithm.BUBBLE
    assert config.distribution is Distribution.RANDOM


def test_merge_applies_only_present_fields():
    config = PlaybackConfig().merge({"algorithm": "Heap Sort", "size": "64"})
    assert config.algorithm is Algorithm.HEAP
    assert config.size == 64
    assert config.distribution is Distribution.RANDOM

    again = config.merge({"distribution": "split_descending"})
    assert again.distribution is Distribution.SPLIT_DESCENDING
    assert again.algorithm is Algorithm.HEAP


def test_merge_keeps_previous_size_when_invalid():
    config = PlaybackConfig(size=50).merge({"size": "lots"})
    assert config.size == 50


def test_merge_rejects_unknown_identifiers():
    with pytest.raises(ValueError):
        PlaybackConfig().merge({"algorithm": "Sleep Sort"})
    with pytest.raises(ValueError):
        PlaybackConfig().merge({"distribution": "Zigzag"})


def test_to_dict_uses_labels():
    data = PlaybackConfig(size=12, algorithm=Algorithm.ODD_EVEN).to_dict()
    assert data == {"size": 12, "algorithm": "Odd-Even Sort", "distribution": "Random"}


# ---------------------------------------------------------------------------
# Tone mapping
# ---------------------------------------------------------------------------
def test_tone_frequency_is_linear_in_value():
    assert tone_frequency(0, 100) == MIN_TONE_HZ
    assert tone_frequency(100, 100) == MAX_TONE_HZ
    assert tone_frequency(50, 100) == pytest.approx(550.0)
    assert tone_frequency(1, 12) == pytest.approx(275.0)


def test_tone_frequency_clamps():
    assert tone_frequency(500, 100) == MAX_TONE_HZ
    assert tone_frequency(-3, 100) == MIN_TONE_HZ
    assert tone_frequency(5, 0) == MIN_TONE_HZ
