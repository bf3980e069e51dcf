"""String routines: parsing, numerals, anagrams, subsequences and word searches."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import zip_longest
from string import ascii_lowercase

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN_VALUES = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_VOWELS = frozenset("AEIOU")


def atoi(text: str) -> int:
    """Parse a leading 32-bit signed integer, clamping on overflow.

    Leading spaces are skipped, one optional sign is read, then digits up to
    the first non-digit. Input with no digits gives 0.
    """
    rest = text.lstrip(" ")
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if result > INT_MAX // 10 or (result == INT_MAX // 10 and digit > 7):
            return INT_MAX if sign == 1 else INT_MIN
        result = result * 10 + digit
    return result * sign


def to_roman(num: int) -> str:
    """Roman numeral for ``num``; values below 1 give an empty string."""
    parts = []
    for value, symbol in _ROMAN_VALUES:
        count, num = divmod(num, value) if num >= value else (0, num)
        parts.append(symbol * count)
    return "".join(parts)


def count_distinct_subsequences(text: str) -> int:
    """Number of distinct non-empty subsequences of ``text``."""
    total = 0
    last_level: dict[str, int] = {}
    for ch in text:
        level = total + 1
        total += level - last_level.get(ch, 0)
        last_level[ch] = level
    return total


def excel_column(n: int) -> str:
    """Spreadsheet column name for the 1-based column number ``n`` (1 -> A, 27 -> AA)."""
    if n < 1:
        raise ValueError(f"column number must be positive, got {n}")
    letters = []
    while n > 0:
        n, rem = divmod(n, 26)
        if rem == 0:
            letters.append("Z")
            n -= 1
        else:
            letters.append(chr(ord("A") + rem - 1))
    return "".join(reversed(letters))


def are_k_anagrams(first: str, second: str, k: int) -> bool:
    """Tell whether two equal-length strings become anagrams by changing at most ``k`` characters."""
    if len(first) != len(second):
        return False
    surplus = Counter(first) - Counter(second)
    return sum(surplus.values()) <= k


def _is_subsequence(word: str, text: str) -> bool:
    chars = iter(text)
    return all(ch in chars for ch in word)


def longest_subsequence_word(words: Iterable[str], text: str) -> str | None:
    """Longest word obtainable by deleting characters of ``text``; the first on ties.

    None when no word qualifies.
    """
    best: str | None = None
    for word in words:
        if len(word) > (len(best) if best is not None else 0) and _is_subsequence(word, text):
            best = word
    return best


def longest_common_prefix(words: Iterable[str]) -> str:
    """Longest prefix shared by all ``words``; empty when there are none."""
    ordered = sorted(words)
    if not ordered:
        return ""
    first, last = ordered[0], ordered[-1]
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def min_word_distance(words: Sequence[str], first: str, second: str) -> int | None:
    """Smallest index distance between occurrences of ``first`` and ``second``.

    None when either word is absent.
    """
    pos1 = pos2 = None
    best: int | None = None
    for index, word in enumerate(words):
        if word == first:
            pos1 = index
        if word == second:
            pos2 = index
        if pos1 is not None and pos2 is not None:
            distance = abs(pos1 - pos2)
            best = distance if best is None else min(best, distance)
    return best


def is_pangram(text: str) -> bool:
    """Tell whether ``text`` holds every letter a-z, ignoring case."""
    return set(ascii_lowercase) <= set(text.lower())


def is_rotated_by_two(first: str, second: str) -> bool:
    """Tell whether ``second`` is ``first`` rotated two places in either direction."""
    if len(first) != len(second):
        return False
    if not first:
        return True
    shift = 2 % len(first)
    left = first[shift:] + first[:shift]
    right = first[len(first) - shift:] + first[:len(first) - shift]
    return second in (left, right)


def count_equal_012_substrings(text: str) -> int:
    """Number of substrings holding equally many '0', '1' and '2' characters."""
    counts = {"0": 0, "1": 0, "2": 0}
    seen = Counter({(0, 0): 1})
    total = 0
    for ch in text:
        if ch in counts:
            counts[ch] += 1
        key = (counts["0"] - counts["1"], counts["1"] - counts["2"])
        total += seen[key]
        seen[key] += 1
    return total


def _check_digits(number: str) -> None:
    if not all("0" <= ch <= "9" for ch in number):
        raise ValueError(f"not a string of decimal digits: {number!r}")


def add_large_numbers(first: str, second: str) -> str:
    """Add two non-negative integers given as digit strings, digit by digit.

    The result is as long as the longer operand, plus one for a final carry.
    """
    _check_digits(first)
    _check_digits(second)
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def count_vowels(text: str) -> int:
    """Number of vowels (a, e, i, o, u in either case) in ``text``."""
    return sum(1 for ch in text if ch.upper() in _VOWELS)


def contains_word(sentence: str, word: str) -> bool:
    """Tell whether ``word`` is one of the whitespace-separated words of ``sentence``."""
    return word in sentence.split()


def text_length(buffer: str | bytes) -> int:
    """Length of ``buffer`` up to its first NUL character, or all of it if there is none."""
    terminator = b"\0" if isinstance(buffer, (bytes, bytearray)) else "\0"
    head, _, _ = buffer.partition(terminator)
    return len(head)


def reverse_in_place(chars: MutableSequence) -> None:
    """Reverse a mutable sequence in place by swapping from both ends."""
    start, end = 0, len(chars) - 1
    while start < end:
        chars[start], chars[end] = chars[end], chars[start]
        start += 1
        end -= 1