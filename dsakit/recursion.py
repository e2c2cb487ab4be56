"""Classic recursive and iterative number functions: factorial, Fibonacci, GCD."""

from __future__ import annotations


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def factorial(n: int) -> int:
    """Return n! computed with a loop."""
    _check_non_negative(n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def factorial_recursive(n: int) -> int:
    """Return n! computed with plain (non-tail) recursion."""
    _check_non_negative(n)
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def factorial_tail(n: int) -> int:
    """Return n! computed with accumulator-passing recursion."""
    _check_non_negative(n)

    def step(k: int, acc: int) -> int:
        if k <= 1:
            return acc
        return step(k - 1, k * acc)

    return step(n, 1)


def triangular_sum(n: int) -> int:
    """Return 1 + 2 + ... + n computed with accumulator-passing recursion."""
    _check_non_negative(n)

    def step(k: int, acc: int) -> int:
        if k <= 1:
            return k + acc
        return step(k - 1, k + acc)

    return step(n, 0)


def fibonacci_series(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1."""
    _check_non_negative(n)
    series = []
    a, b = 0, 1
    for _ in range(n):
        series.append(a)
        a, b = b, a + b
    return series


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number with tree recursion."""
    _check_non_negative(n)
    if n < 2:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_tail(n: int) -> int:
    """Return the n-th Fibonacci number with accumulator-passing recursion."""
    _check_non_negative(n)

    def step(k: int, a: int, b: int) -> int:
        if k == 0:
            return a
        if k == 1:
            return b
        return step(k - 1, b, a + b)

    return step(n, 0, 1)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of |a| and |b|, ordering the pair at each step."""
    a, b = abs(a), abs(b)
    if a > b:
        return a if b == 0 else gcd(b, a % b)
    return b if a == 0 else gcd(a, b % a)


def gcd_recursive(a: int, b: int) -> int:
    """Return the greatest common divisor using recursive Euclid."""
    a, b = abs(a), abs(b)
    if b == 0:
        return a
    return gcd_recursive(b, a % b)


def gcd_iterative(a: int, b: int) -> int:
    """Return the greatest common divisor using iterative Euclid."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a