"""Routines over sequences of integers and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import count, pairwise
from operator import xor


def left_rotate(values: Sequence, k: int) -> list:
    """Return ``values`` rotated left by ``k`` places, 0 <= k <= len(values)."""
    if not 0 <= k <= len(values):
        raise ValueError(f"rotation {k} out of range for length {len(values)}")
    items = list(values)
    return items[k:] + items[:k]


def rotate_right_by_one(values: Sequence) -> list:
    """Return ``values`` with the last element moved to the front."""
    items = list(values)
    return items[-1:] + items[:-1]


def reversed_copy(values: Iterable) -> list:
    """Return a reversed copy of ``values``."""
    return list(values)[::-1]


def is_sorted(values: Iterable) -> bool:
    """Tell whether ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def _skip_equal(seq: Sequence, index: int, value) -> int:
    while index < len(seq) and seq[index] == value:
        index += 1
    return index


def common_elements(a: Sequence, b: Sequence, c: Sequence) -> list:
    """Distinct elements common to three sorted sequences, in ascending order."""
    i = j = k = 0
    common = []
    while i < len(a) and j < len(b) and k < len(c):
        x, y, z = a[i], b[j], c[k]
        if x == y == z:
            common.append(x)
            i = _skip_equal(a, i, x)
            j = _skip_equal(b, j, y)
            k = _skip_equal(c, k, z)
        elif x < y:
            i += 1
        elif y < z:
            j += 1
        else:
            k += 1
    return common


def alternate_by_sign(values: Iterable[int]) -> list[int]:
    """Interleave non-negative and negative values, non-negative first.

    Relative order within each sign is kept; leftovers go at the end.
    """
    items = list(values)
    positives = [v for v in items if v >= 0]
    negatives = [v for v in items if v < 0]
    result = []
    for pos, neg in zip(positives, negatives):
        result.extend((pos, neg))
    result.extend(positives[len(negatives):])
    result.extend(negatives[len(positives):])
    return result


def first_non_repeating(values: Iterable[int]) -> int | None:
    """First value that occurs exactly once, or None if there is none."""
    items = list(values)
    counts = Counter(items)
    return next((v for v in items if counts[v] == 1), None)


def find_unique(values: Iterable[int]) -> int:
    """The single unpaired value when every other value appears twice."""
    return reduce(xor, values, 0)


def longest_names(names: Iterable[str]) -> list[str]:
    """All names of the greatest length, in their original order."""
    items = list(names)
    if not items:
        return []
    longest = max(len(name) for name in items)
    return [name for name in items if len(name) == longest]


def majority_element(values: Iterable[int]) -> int | None:
    """Value occurring more than half the time, or None if there is none."""
    items = list(values)
    counts: Counter = Counter()
    for value in items:
        counts[value] += 1
        if counts[value] > len(items) // 2:
            return value
    return None


def minimum(values: Iterable[int]) -> int:
    """Smallest value; raises ValueError when empty."""
    return min(values)


def maximum(values: Iterable[int]) -> int:
    """Largest value; raises ValueError when empty."""
    return max(values)


def missing_and_repeating(values: Sequence[int]) -> tuple[int, int]:
    """For a list of 1..n with one value missing and one doubled, return (missing, repeating)."""
    n = len(values)
    diff = n * (n + 1) // 2 - sum(values)
    square_diff = n * (n + 1) * (2 * n + 1) // 6 - sum(v * v for v in values)
    if diff == 0 or square_diff % diff:
        raise ValueError("values are not 1..n with one missing and one repeated")
    missing = (diff + square_diff // diff) // 2
    return missing, missing - diff


def missing_number(values: Sequence[int]) -> int:
    """The number missing from values holding 1..n+1 with exactly one absent."""
    expected = reduce(xor, range(1, len(values) + 2), 0)
    return expected ^ reduce(xor, values, 0)


def sort_by_sign(values: Iterable[int]) -> list[int]:
    """Move negatives before non-negatives by sorting."""
    return sorted(values)


def count_occurrences(values: Iterable, target) -> int:
    """How many times ``target`` occurs in ``values``."""
    return sum(1 for v in values if v == target)


def segregate_zeros_ones(values: Iterable[int]) -> list[int]:
    """All zeros first, then a one for every other element."""
    items = list(values)
    zeros = sum(1 for v in items if v == 0)
    return [0] * zeros + [1] * (len(items) - zeros)


def sort_012(values: Iterable[int]) -> list[int]:
    """Counting sort of 0s, 1s and 2s; anything else counts as a 2."""
    counts = Counter(v if v in (0, 1) else 2 for v in values)
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def smallest_missing_positive(values: Iterable[int]) -> int:
    """Smallest positive integer not present in ``values``."""
    present = set(values)
    return next(i for i in count(1) if i not in present)


def wave_array(values: Iterable[int]) -> list[int]:
    """Sort, then swap adjacent pairs so that a[0] >= a[1] <= a[2] >= ..."""
    ordered = sorted(values)
    end = len(ordered) - len(ordered) % 2
    evens, odds = ordered[0:end:2], ordered[1:end:2]
    ordered[0:end:2], ordered[1:end:2] = odds, evens
    return ordered


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Length of the longest set of consecutive integers among ``values``."""
    present = set(values)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end in present:
            end += 1
        best = max(best, end - start)
    return best


def longest_alternating_subsequence(values: Iterable[int]) -> int:
    """Length of the longest zig-zag subsequence; 0 for empty input."""
    items = list(values)
    if not items:
        return 0
    rising = falling = 1
    for prev, cur in pairwise(items):
        if cur > prev:
            rising = falling + 1
        elif prev > cur:
            falling = rising + 1
    return max(rising, falling)