"""Two-dimensional matrix helpers."""

from __future__ import annotations

from collections.abc import Sequence


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a rectangular matrix in clockwise spiral order from the top left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    order: list[int] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][left:right + 1])
        top += 1
        order.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return order


def parse_matrix(text: str) -> list[list[int]]:
    """Read a matrix given as whitespace-separated integers: rows, columns, then the elements row by row."""
    tokens = text.split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"not an integer: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("missing row and column counts")
    rows, cols, *cells = numbers
    if rows < 0 or cols < 0:
        raise ValueError("row and column counts must be non-negative")
    if len(cells) < rows * cols:
        raise ValueError(f"expected {rows * cols} elements, got {len(cells)}")
    return [cells[r * cols:(r + 1) * cols] for r in range(rows)]


def contains(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs anywhere in the matrix."""
    return any(target in row for row in matrix)


def row_sums(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Sum of each row, in row order."""
    return [sum(row) for row in matrix]


def largest_row_sum_index(matrix: Sequence[Sequence[int]]) -> int:
    """Index of the row with the greatest sum; the first one on ties."""
    sums = row_sums(matrix)
    if not sums:
        raise ValueError("largest_row_sum_index of an empty matrix")
    return max(range(len(sums)), key=sums.__getitem__)