"""Recursive generation and string routines."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import groupby, product


def _is_palindrome_piece(piece: str) -> bool:
    return piece == piece[::-1]


def palindromic_partitions(text: str) -> list[list[str]]:
    """Every way to cut ``text`` into palindromes, finest partition first."""
    if not text:
        return []
    partitions = []
    for cuts in product((True, False), repeat=len(text) - 1):
        pieces = []
        current = text[0]
        for cut, ch in zip(cuts, text[1:]):
            if cut:
                pieces.append(current)
                current = ch
            else:
                current += ch
        pieces.append(current)
        if all(_is_palindrome_piece(p) for p in pieces):
            partitions.append(pieces)
    return partitions


def _braces(n: int, opened: int, closed: int, prefix: str) -> Iterator[str]:
    if opened == n and closed == n:
        yield prefix
        return
    if opened < n:
        yield from _braces(n, opened + 1, closed, prefix + "{")
    if closed < opened:
        yield from _braces(n, opened, closed + 1, prefix + "}")


def balanced_braces(n: int) -> list[str]:
    """All balanced strings of ``n`` pairs of curly braces; empty for n <= 0."""
    if n <= 0:
        return []
    return list(_braces(n, 0, 0, ""))


def _subsets(values: Sequence, start: int, chosen: list) -> Iterator[list]:
    yield list(chosen)
    for index in range(start, len(values)):
        chosen.append(values[index])
        yield from _subsets(values, index + 1, chosen)
        chosen.pop()


def subsets(values: Sequence) -> list[list]:
    """All subsets of ``values`` in depth-first order, starting with the empty one."""
    return list(_subsets(list(values), 0, []))


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly drop every run of two or more equal adjacent characters."""
    while True:
        kept = "".join(
            run[0] for run in (list(g) for _, g in groupby(text)) if len(run) == 1
        )
        if kept == text:
            return kept
        text = kept


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))


def reverse_text(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    if not text:
        return ""
    return reverse_text(text[1:]) + text[0] if len(text) < 500 else text[::-1]