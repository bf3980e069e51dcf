"""Dynamic-programming routines: knapsack, subset sums, LCS, coin change, word break."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items fitting in ``capacity``, each item used at most once."""
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def can_partition(values: Iterable[int]) -> bool:
    """Tell whether the values split into two groups of equal sum."""
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("values must be non-negative")
    total = sum(items)
    if total % 2:
        return False
    half = total // 2
    reachable = {0}
    for value in items:
        reachable |= {s + value for s in reachable if s + value <= half}
        if half in reachable:
            return True
    return half in reachable


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest subsequence shared by ``first`` and ``second``."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def count_coin_change(coins: Iterable[int], total: int) -> int:
    """Number of coin combinations, with unlimited supply of each coin, that make ``total``."""
    denominations = list(coins)
    if any(c <= 0 for c in denominations):
        raise ValueError("coin values must be positive")
    if total < 0:
        return 0
    ways = [1] + [0] * total
    for coin in denominations:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def word_break(text: str, dictionary: Iterable[str]) -> bool:
    """Tell whether ``text`` splits into a sequence of words from ``dictionary``."""
    words = set(dictionary)
    reachable = [True] + [False] * len(text)
    for end in range(1, len(text) + 1):
        reachable[end] = any(
            reachable[start] and text[start:end] in words for start in range(end)
        )
    return reachable[-1]