import random

import pytest

from dsakit.searching import (
    binary_search,
    binary_search_recursive,
    linear_search,
    random_values,
)

SAMPLE = [2, 3, 4, 10, 40]


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
@pytest.mark.parametrize("target", SAMPLE)
def test_binary_search_finds_present_values(search, target):
    index = search(SAMPLE, target)
    assert SAMPLE[index] == target


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
@pytest.mark.parametrize("target", [0, 5, 11, 41, -7])
def test_binary_search_missing_returns_none(search, target):
    assert search(SAMPLE, target) is None


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_binary_search_empty(search):
    assert search([], 10) is None


def test_binary_search_variants_agree_on_random_data():
    rng = random.Random(7)
    for _ in range(50):
        items = sorted(set(rng.randrange(200) for _ in range(rng.randrange(1, 40))))
        target = rng.randrange(200)
        iterative = binary_search(items, target)
        recursive = binary_search_recursive(items, target)
        assert iterative == recursive
        assert (iterative is not None) == (target in items)


def test_linear_search_returns_first_occurrence():
    items = [5, 12, 7, 12, 3]
    assert linear_search(items, 12) == 1


def test_linear_search_missing():
    assert linear_search([1, 2, 3], 12) is None


def test_random_values_range_and_length():
    values = random_values(500, random.Random(1))
    assert len(values) == 500
    assert all(0 <= v < 100 for v in values)


def test_random_values_seeded_generator_is_reproducible_and_varied():
    values = random_values(30, random.Random(42))
    assert values == random_values(30, random.Random(42))
    assert len(set(values)) > 1


def test_random_values_zero_count_is_empty():
    assert random_values(0, random.Random(5)) == []


def test_random_values_rejects_negative():
    with pytest.raises(ValueError):
        random_values(-1)