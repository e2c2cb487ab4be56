import math

import pytest

from dsakit.recursion import (
    factorial,
    factorial_recursive,
    factorial_tail,
    fibonacci_recursive,
    fibonacci_series,
    fibonacci_tail,
    gcd,
    gcd_iterative,
    gcd_recursive,
    triangular_sum,
)


@pytest.mark.parametrize("func", [factorial, factorial_recursive, factorial_tail])
@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 20])
def test_factorials_match_math(func, n):
    assert func(n) == math.factorial(n)


@pytest.mark.parametrize("func", [factorial, factorial_recursive, factorial_tail])
def test_factorials_reject_negative(func):
    with pytest.raises(ValueError):
        func(-3)


@pytest.mark.parametrize("n", [1, 2, 7, 100])
def test_triangular_sum(n):
    assert triangular_sum(n) == sum(range(1, n + 1))


def test_triangular_sum_zero_and_negative():
    assert triangular_sum(0) == 0
    with pytest.raises(ValueError):
        triangular_sum(-1)


def test_fibonacci_series_starts_and_recurs():
    series = fibonacci_series(20)
    assert len(series) == 20
    assert series[:2] == [0, 1]
    for a, b, c in zip(series, series[1:], series[2:]):
        assert c == a + b


def test_fibonacci_series_empty():
    assert fibonacci_series(0) == []


@pytest.mark.parametrize("n", range(15))
def test_fibonacci_variants_agree_with_series(n):
    expected = fibonacci_series(n + 1)[n]
    assert fibonacci_recursive(n) == expected
    assert fibonacci_tail(n) == expected


@pytest.mark.parametrize("func", [fibonacci_recursive, fibonacci_tail, fibonacci_series])
def test_fibonacci_rejects_negative(func):
    with pytest.raises(ValueError):
        func(-1)


@pytest.mark.parametrize("func", [gcd, gcd_recursive, gcd_iterative])
@pytest.mark.parametrize(
    "a,b", [(48, 18), (18, 48), (17, 5), (0, 9), (9, 0), (0, 0), (-12, 8), (100, 100)]
)
def test_gcd_matches_math(func, a, b):
    assert func(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("func", [gcd, gcd_recursive, gcd_iterative])
def test_gcd_divides_both(func):
    for a in range(1, 40):
        for b in range(1, 40):
            g = func(a, b)
            assert a % g == 0 and b % g == 0