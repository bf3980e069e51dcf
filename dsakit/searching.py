"""Searching and selection over sequences of numbers."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections.abc import Iterable, Sequence


def _require_items(values: Sequence, what: str) -> None:
    if not values:
        raise ValueError(f"{what} of an empty sequence")


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Index of ``key`` in the ascending ``values``, or None if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == key:
            return mid
        if key > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return None


def rotation_pivot(values: Sequence[int]) -> int:
    """Index where a rotated ascending sequence wraps around to its smallest value.

    For a sequence that is not rotated, the last index is returned.
    """
    _require_items(values, "pivot")
    start, end = 0, len(values) - 1
    first = values[0]
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] >= first:
            start = mid + 1
        else:
            end = mid
    return start


def _is_peak(values: Sequence[int], index: int) -> bool:
    left_ok = index == 0 or values[index - 1] <= values[index]
    right_ok = index == len(values) - 1 or values[index + 1] <= values[index]
    return left_ok and right_ok


def peak_index(values: Sequence[int]) -> int:
    """Index of a peak (not smaller than its neighbours), found by binary search."""
    _require_items(values, "peak")
    low, high = 0, len(values) - 1
    mid = low
    while low <= high:
        mid = low + (high - low) // 2
        if _is_peak(values, mid):
            return mid
        if mid > 0 and values[mid - 1] > values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return mid


def peak_index_linear(values: Sequence[int]) -> int:
    """Index of the first peak found by checking both ends, then scanning."""
    _require_items(values, "peak")
    n = len(values)
    if n == 1 or values[0] >= values[1]:
        return 0
    if values[-1] >= values[-2]:
        return n - 1
    return next(i for i in range(1, n - 1) if _is_peak(values, i))


def row_with_most_ones(matrix: Sequence[Sequence[int]]) -> int | None:
    """Index of the row holding the most 1s in a matrix of sorted 0/1 rows.

    Ties go to the earliest row; None when no row holds a 1.
    """
    best_row = None
    best_count = 0
    for index, row in enumerate(matrix):
        ones = len(row) - bisect_left(row, 1)
        if ones > best_count:
            best_count = ones
            best_row = index
    return best_row


def _check_rank(values: Sequence, k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"k={k} out of range for {len(values)} values")


def kth_largest(values: Iterable[int], k: int) -> int:
    """The k-th largest value, counting from 1."""
    ordered = sorted(values)
    _check_rank(ordered, k)
    return ordered[len(ordered) - k]


def kth_smallest(values: Iterable[int], k: int) -> int:
    """The k-th smallest value, counting from 1."""
    items = list(values)
    _check_rank(items, k)
    return heapq.nsmallest(k, items)[-1]


def min_platforms(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Fewest platforms needed so that no train waits; a train leaving at t frees nothing for one arriving at t."""
    arr = sorted(arrivals)
    dep = sorted(departures)
    if len(arr) != len(dep):
        raise ValueError("arrivals and departures differ in length")
    if not arr:
        return 0
    needed = result = 1
    i, j = 1, 0
    while i < len(arr) and j < len(dep):
        if arr[i] <= dep[j]:
            needed += 1
            i += 1
        else:
            needed -= 1
            j += 1
        result = max(result, needed)
    return result


def subarray_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """1-based (start, end) of a contiguous run of non-negative values summing to ``target``.

    Found with a sliding window; None when there is no such run.
    """
    start = 0
    current = 0
    for end, value in enumerate(values):
        current += value
        if current >= target:
            while current > target and start < end:
                current -= values[start]
                start += 1
            if current == target:
                return start + 1, end + 1
    return None


def max_path_sum(first: Sequence[int], second: Sequence[int]) -> int:
    """Largest sum of a path through two sorted sequences, switching only at common values."""
    i = j = 0
    result = sum1 = sum2 = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a < b:
            sum1 += a
            i += 1
        elif a > b:
            sum2 += b
            j += 1
        else:
            result += max(sum1, sum2) + a
            sum1 = sum2 = 0
            i += 1
            j += 1
    sum1 += sum(first[i:])
    sum2 += sum(second[j:])
    return result + max(sum1, sum2)


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    items = iter(values)
    try:
        best = current = next(items)
    except StopIteration:
        raise ValueError("max_subarray_sum of an empty sequence") from None
    for value in items:
        current = max(value, current + value)
        best = max(best, current)
    return best