"""Grid puzzles: spiral order, sudoku checks, magic squares and diagonals."""

from __future__ import annotations

from typing import Sequence

_MAGIC_SQUARES = (
    (8, 1, 6, 3, 5, 7, 4, 9, 2),
    (6, 1, 8, 7, 5, 3, 2, 9, 4),
    (4, 9, 2, 3, 5, 7, 8, 1, 6),
    (2, 9, 4, 7, 5, 3, 6, 1, 8),
    (8, 3, 4, 1, 5, 9, 6, 7, 2),
    (4, 3, 8, 9, 5, 1, 2, 7, 6),
    (6, 7, 2, 1, 5, 9, 8, 3, 4),
    (2, 7, 6, 9, 5, 1, 4, 3, 8),
)


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Say whether the filled cells of a 9x9 board break no sudoku rule; '.' is empty."""
    seen: set[tuple[str, int, str]] = set()
    for i, row in enumerate(board[:9]):
        for j, cell in enumerate(row[:9]):
            if cell == ".":
                continue
            keys = (("row", i, cell), ("col", j, cell), ("box", (i // 3) * 3 + j // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def forming_magic_square(s: Sequence[Sequence[int]]) -> int:
    """Return the least total change that turns a 3x3 grid into a magic square."""
    cells = [value for row in s[:3] for value in row[:3]]
    if len(cells) != 9:
        raise ValueError("a 3x3 grid is required")
    return min(
        81,
        *(sum(abs(a - b) for a, b in zip(cells, magic)) for magic in _MAGIC_SQUARES),
    )


def diagonal_difference(matrix: Sequence[Sequence[int]]) -> int:
    """Return the absolute difference between the two diagonal sums of a square matrix."""
    n = len(matrix)
    primary = sum(matrix[i][i] for i in range(n))
    secondary = sum(matrix[i][n - 1 - i] for i in range(n))
    return abs(primary - secondary)


def staircase(n: int) -> str:
    """Return a right-aligned staircase of '#' of height ``n``, one line per step."""
    return "".join(" " * (n - i) + "#" * i + "\n" for i in range(1, n + 1))