"""Small numeric routines: digit manipulation, series and simple aggregates."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable

_DIGIT_WORDS = {
    "0": "Zero",
    "1": "One",
    "2": "Two",
    "3": "Three",
    "4": "Four",
    "5": "Five",
    "6": "Six",
    "7": "Seven",
    "8": "Eight",
    "9": "Nine",
}


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def binary_digits(n: int) -> int:
    """Return the binary form of ``n`` written with decimal digits (e.g. 5 -> 101)."""
    _require_non_negative(n, "n")
    result = 0
    place = 1
    while n:
        result += (n & 1) * place
        place *= 10
        n >>= 1
    return result


def sum_square_difference(n: int) -> int:
    """Absolute difference between the square of the sum and the sum of squares of 1..n."""
    numbers = range(1, n + 1)
    sum_of_squares = sum(i * i for i in numbers)
    square_of_sum = sum(numbers) ** 2
    return abs(sum_of_squares - square_of_sum)


def digits_to_words(digits: str) -> str:
    """Spell out each digit of ``digits`` as an English word, space separated."""
    try:
        return " ".join(_DIGIT_WORDS[ch] for ch in digits)
    except KeyError as exc:
        raise ValueError(f"not a decimal digit: {exc.args[0]!r}") from None


def is_perfect_square(n: int) -> bool:
    """Tell whether ``n`` is the square of an integer; negatives are not."""
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def reverse_digits(num: int) -> int:
    """Reverse the decimal digits of a positive number; non-positive input gives 0."""
    result = 0
    while num > 0:
        num, digit = divmod(num, 10)
        result = result * 10 + digit
    return result


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n``, carrying the sign of ``n``."""
    total = sum(int(ch) for ch in str(abs(n)))
    return -total if n < 0 else total


def multiplication_table(n: int) -> list[str]:
    """Lines ``n*i=product`` for i from 1 to 10."""
    return [f"{n}*{i}={n * i}" for i in range(1, 11)]


def binary_to_gray(n: int) -> int:
    """Gray code of a binary number written with decimal digits.

    Any non-zero digit counts as a set bit.
    """
    _require_non_negative(n, "n")
    result = 0
    place = 1
    while n:
        last = n % 10
        before = (n // 10) % 10
        if bool(last) != bool(before):
            result += place
        place *= 10
        n //= 10
    return result


def product(x: int, y: int) -> int:
    """Multiply two non-negative integers by repeated addition."""
    _require_non_negative(x, "x")
    _require_non_negative(y, "y")
    larger, smaller = max(x, y), min(x, y)
    return sum(itertools.repeat(larger, smaller))


def natural_sum(n: int) -> int:
    """Sum of 1..n; values of ``n`` up to 1 are returned unchanged."""
    if n <= 1:
        return n
    return n * (n + 1) // 2


def geometric_sum(n: int) -> float:
    """Sum of the series 1 + 1/3 + 1/9 + ... + 1/3**n."""
    _require_non_negative(n, "n")
    total = 0.0
    for power in range(n + 1):
        total += 1 / 3**power
    return total


def reverse_fibonacci(n: int) -> list[int]:
    """The first ``n`` Fibonacci numbers, starting 0, 1, in reverse order."""
    sequence = []
    a, b = 0, 1
    for _ in range(max(n, 0)):
        sequence.append(a)
        a, b = b, a + b
    sequence.reverse()
    return sequence


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean computed incrementally; raises ValueError when empty."""
    items = iter(values)
    try:
        average = float(next(items))
    except StopIteration:
        raise ValueError("mean of an empty sequence") from None
    for count, value in enumerate(items, start=2):
        average = (average * (count - 1) + value) / count
    return average


def array_sum(values: Iterable[int]) -> int:
    """Sum of all values; an empty input sums to 0."""
    return sum(values)