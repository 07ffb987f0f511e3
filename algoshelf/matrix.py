"""Grid puzzles: spirals, islands and Pascal's triangle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _spiral_positions(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Coordinates of a rows x cols grid in clockwise spiral order from the top left."""
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        for row in range(top + 1, bottom + 1):
            yield row, right
        if top < bottom and left < right:
            for col in range(right - 1, left - 1, -1):
                yield bottom, col
            for row in range(bottom - 1, top, -1):
                yield row, left
        top, bottom, left, right = top + 1, bottom - 1, left + 1, right - 1


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a rectangular matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("every row must have the same length")
    return [matrix[r][c] for r, c in _spiral_positions(len(matrix), cols)]


def generate_matrix(n: int) -> list[list[int]]:
    """An n x n matrix filled with 1 to n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    result = [[0] * n for _ in range(n)]
    for number, (row, col) in enumerate(_spiral_positions(n, n), start=1):
        result[row][col] = number
    return result


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of groups of '1' cells joined horizontally or vertically."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "1"
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for neighbour in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if neighbour in land:
                    land.remove(neighbour)
                    stack.append(neighbour)
    return islands


def generate_pascal(num_rows: int) -> list[list[int]]:
    """The first num_rows rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError(f"row count must not be negative, got {num_rows}")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
            continue
        prev = rows[-1]
        rows.append([1, *(a + b for a, b in zip(prev, prev[1:])), 1])
    return rows


def get_pascal_row(row_index: int) -> list[int]:
    """Row row_index of Pascal's triangle, counting from 0."""
    if row_index < 0:
        raise ValueError(f"row index must not be negative, got {row_index}")
    return generate_pascal(row_index + 1)[row_index]