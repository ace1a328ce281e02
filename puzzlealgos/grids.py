"""Counting squares and rectangles of ones in binary matrices."""

from __future__ import annotations


def count_squares(matrix: list[list[int]]) -> int:
    """Number of square submatrices consisting only of ones."""
    if not matrix:
        return 0
    total = 0
    previous: list[int] = []
    for i, row in enumerate(matrix):
        current: list[int] = []
        for j, cell in enumerate(row):
            if i == 0 or j == 0:
                size = cell
            elif cell == 1:
                size = 1 + min(previous[j], current[j - 1], previous[j - 1])
            else:
                size = 0
            current.append(size)
            total += size
        previous = current
    return total


def _row_rectangles(columns: list[int]) -> int:
    run = total = 0
    for bit in columns:
        run = run + 1 if bit else 0
        total += run
    return total


def num_submat(mat: list[list[int]]) -> int:
    """Number of rectangular submatrices consisting only of ones."""
    if not mat:
        return 0
    total = 0
    for top in range(len(mat)):
        columns = [1] * len(mat[0])
        for row in mat[top:]:
            columns = [c & x for c, x in zip(columns, row)]
            total += _row_rectangles(columns)
    return total