"""How much rain a height profile or a height map can hold."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import accumulate


def trap(height: Sequence[int]) -> int:
    """Water held between bars of width one with the given heights."""
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - bar for left, right, bar in zip(left_max, right_max, height)
    )


def trap_rain_water(height_map: Sequence[Sequence[int]]) -> int:
    """Water held by a rectangular map of cell heights; border cells hold none."""
    if not height_map or not height_map[0]:
        raise ValueError("the height map must have at least one cell")
    rows, cols = len(height_map), len(height_map[0])
    if any(len(row) != cols for row in height_map):
        raise ValueError("every row must have the same length")
    if rows <= 2 or cols <= 2:
        return 0

    visited = [[False] * cols for _ in range(rows)]
    heap: list[tuple[int, int, int]] = []
    for r, row in enumerate(height_map):
        for c, value in enumerate(row):
            if r in (0, rows - 1) or c in (0, cols - 1):
                heap.append((value, r, c))
                visited[r][c] = True
    heapq.heapify(heap)

    water = 0
    while heap:
        level, r, c = heapq.heappop(heap)
        for nr, nc in ((r - 1, c), (r, c + 1), (r + 1, c), (r, c - 1)):
            if 0 <= nr < rows and 0 <= nc < cols and not visited[nr][nc]:
                cell = height_map[nr][nc]
                water += max(0, level - cell)
                visited[nr][nc] = True
                heapq.heappush(heap, (max(cell, level), nr, nc))
    return water