import random

import pytest

from arrays import Distribution, generate, shuffle


@pytest.mark.parametrize("distribution", list(Distribution))
def test_every_distribution_is_a_permutation(distribution):
    for size in range(1, 201):
        arr = generate(size, distribution, rng=size)
        assert len(arr) == size
        assert set(arr) == set(range(1, size + 1))


def test_fixed_distributions():
    assert generate(5, Distribution.ASCENDING) == (1, 2, 3, 4, 5)
    assert generate(5, Distribution.DESCENDING) == (5, 4, 3, 2, 1)
    assert generate(6, "Split Ascending") == (4, 5, 6, 1, 2, 3)
    assert generate(6, "Split Descending") == (6, 5, 4, 3, 2, 1)
    assert generate(5, "Split Ascending") == (3, 4, 5, 1, 2)
    assert generate(5, "Split Descending") == (5, 4, 3, 2, 1)
    assert generate(7, Distribution.SPLIT_DESCENDING) == (7, 6, 5, 4, 3, 2, 1)


def test_split_descending_halves_are_reversed_separately():
    # second half reversed, then first half reversed
    assert generate(4, Distribution.SPLIT_DESCENDING) == (4, 3, 2, 1)
    assert generate(1, Distribution.SPLIT_DESCENDING) == (1,)


def test_random_is_reproducible_with_seed():
    a = generate(50, Distribution.RANDOM, rng=1234)
    b = generate(50, Distribution.RANDOM, rng=random.Random(1234))
    assert a == b
    assert a != tuple(range(1, 51))


def test_generate_returns_immutable_tuple():
    assert isinstance(generate(10, "Random"), tuple)


def test_shuffle_is_fisher_yates_in_place():
    values = list(range(10))
    out = shuffle(values, rng=3)
    assert out is values
    assert sorted(values) == list(range(10))


def test_parse_accepts_labels_and_names():
    assert Distribution.parse("Split Ascending") is Distribution.SPLIT_ASCENDING
    assert Distribution.parse("split_descending") is Distribution.SPLIT_DESCENDING
    assert Distribution.parse(Distribution.RANDOM) is Distribution.RANDOM


def test_unknown_distribution_raises():
    with pytest.raises(ValueError):
        generate(5, "Zigzag")


def test_size_zero_yields_empty():
    assert generate(0, Distribution.RANDOM) == ()
