"""Searching over sequences: binary search (iterative and recursive) and linear search."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Optional


def binary_search(items: Sequence[int], target: int) -> Optional[int]:
    """Return the index of ``target`` in the ascending ``items``, or None if absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if target > value:
            left = mid + 1
        else:
            right = mid - 1
    return None


def binary_search_recursive(items: Sequence[int], target: int) -> Optional[int]:
    """Recursive binary search; same contract as :func:`binary_search`."""

    def search(left: int, right: int) -> Optional[int]:
        if left > right:
            return None
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if target > value:
            return search(mid + 1, right)
        return search(left, mid - 1)

    return search(0, len(items) - 1)


def linear_search(items: Sequence[int], target: int) -> Optional[int]:
    """Return the index of the first occurrence of ``target``, or None."""
    for index, value in enumerate(items):
        if value == target:
            return index
    return None


def random_values(count: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return ``count`` random integers in the range 0..99."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(100) for _ in range(count)]