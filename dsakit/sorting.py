"""In-place comparison sorts: bubble, selection, merge and quick sort."""

from __future__ import annotations

from collections.abc import MutableSequence


def bubble_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def selection_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place by repeatedly selecting the minimum."""
    n = len(items)
    for i in range(n - 1):
        min_idx = min(range(i, n), key=items.__getitem__)
        if items[min_idx] != items[i]:
            items[i], items[min_idx] = items[min_idx], items[i]


def _merge(items: MutableSequence, left: int, mid: int, right: int) -> None:
    merged = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if items[i] <= items[j]:
            merged.append(items[i])
            i += 1
        else:
            merged.append(items[j])
            j += 1
    merged.extend(items[i : mid + 1])
    merged.extend(items[j : right + 1])
    items[left : right + 1] = merged


def _merge_sort(items: MutableSequence, left: int, right: int) -> None:
    if left < right:
        mid = left + (right - left) // 2
        _merge_sort(items, left, mid)
        _merge_sort(items, mid + 1, right)
        _merge(items, left, mid, right)


def merge_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    _merge_sort(items, 0, len(items) - 1)


def partition(items: MutableSequence, low: int, high: int) -> int:
    """Partition ``items[low:high+1]`` around its last element; return the pivot's index."""
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _quick_sort(items: MutableSequence, low: int, high: int) -> None:
    if low < high:
        pivot_index = partition(items, low, high)
        _quick_sort(items, low, pivot_index - 1)
        _quick_sort(items, pivot_index + 1, high)


def quick_sort(items: MutableSequence) -> None:
    """Sort ``items`` in place with quick sort using the last element as pivot."""
    _quick_sort(items, 0, len(items) - 1)