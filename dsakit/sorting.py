"""Comparison sorts returning new lists."""

from __future__ import annotations

from collections.abc import Iterable


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Return the values sorted in ascending order by merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, start: int, end: int) -> int:
    pivot = items[start]
    smaller = sum(1 for v in items[start + 1:end + 1] if v <= pivot)
    pivot_index = start + smaller
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index < j:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable) -> list:
    """Return the values sorted in ascending order by quicksort, first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = _partition(items, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))
    return items


def bubble_pass(values: Iterable) -> list:
    """Return a copy after one bubble-sort pass, which carries the largest value to the end."""
    items = list(values)
    for i in range(len(items) - 1):
        if items[i + 1] < items[i]:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items