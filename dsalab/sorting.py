"""Bubble sort, insertion sort and merge sort."""

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = [
    "bubble_sort_passes",
    "bubble_sort",
    "insertion_sort_steps",
    "insertion_sort",
    "merge",
    "merge_sort",
]


def bubble_sort_passes(items: Iterable[Any]) -> Iterator[tuple[int, list[Any]]]:
    """Bubble-sort a copy of ``items``, yielding (pass number, snapshot) after each pass.

    Sorting stops as soon as a pass makes no swap; that pass is not yielded.
    """
    values = list(items)
    n = len(values)
    for pass_index in range(n - 1):
        swapped = False
        for j in range(n - pass_index - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            return
        yield pass_index + 1, list(values)


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` sorted by bubble sort."""
    result = list(items)
    for _, snapshot in bubble_sort_passes(result):
        result = snapshot
    return result


def insertion_sort_steps(items: Iterable[Any]) -> Iterator[tuple[Any, list[Any]]]:
    """Insertion-sort a copy of ``items``, yielding (key, snapshot) after each insertion."""
    values = list(items)
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
        yield key, list(values)


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` sorted by insertion sort."""
    result = list(items)
    for _, snapshot in insertion_sort_steps(result):
        result = snapshot
    return result


def merge(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two sorted iterables into one sorted list, taking from ``left`` on ties."""
    left_values, right_values = list(left), list(right)
    merged: list[Any] = []
    i = j = 0
    while i < len(left_values) and j < len(right_values):
        if left_values[i] <= right_values[j]:
            merged.append(left_values[i])
            i += 1
        else:
            merged.append(right_values[j])
            j += 1
    merged.extend(left_values[i:])
    merged.extend(right_values[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with ``items`` sorted by recursive merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))