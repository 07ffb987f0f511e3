"""Dynamic-programming puzzles and a tiered charge calculator."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1 and climbing 1 or 2 steps."""
    if not cost:
        raise ValueError("there must be at least one step")
    before, last = 0, 0
    for index in range(2, len(cost) + 1):
        before, last = last, min(last + cost[index - 1], before + cost[index - 2])
    return last


def can_partition(nums: Sequence[int]) -> bool:
    """True when nums splits into two groups of equal sum; one number never does."""
    if any(value < 0 for value in nums):
        raise ValueError("numbers must not be negative")
    if len(nums) == 1:
        return False
    total = sum(nums)
    if total % 2:
        return False
    reachable = 1  # bit i is set when some subset sums to i
    for value in nums:
        reachable |= reachable << value
    return bool(reachable >> (total // 2) & 1)


def num_trees(n: int) -> int:
    """Number of structurally different search trees on the values 1 to n."""
    if n < 3:
        return n
    counts = [1, 1, 2]
    for size in range(3, n + 1):
        counts.append(
            sum(counts[root - 1] * counts[size - root] for root in range(1, size + 1))
        )
    return counts[n]


def unique_paths(m: int, n: int) -> int:
    """Paths from the top left to the bottom right of an m x n grid moving right or down."""
    if m < 1 or n < 1:
        raise ValueError(f"grid must be at least 1 x 1, got {m} x {n}")
    return math.comb(m + n - 2, m - 1)


def unique_paths_with_obstacles(obstacle_grid: Sequence[Sequence[int]]) -> int:
    """Paths moving right or down that avoid every cell marked 1."""
    if not obstacle_grid or not obstacle_grid[0]:
        raise ValueError("the grid must have at least one cell")
    if obstacle_grid[0][0] == 1 or obstacle_grid[-1][-1] == 1:
        return 0
    ways = [0] * len(obstacle_grid[0])
    ways[0] = 1
    for row in obstacle_grid:
        for col, cell in enumerate(row):
            if cell == 1:
                ways[col] = 0
            elif col > 0:
                ways[col] += ways[col - 1]
    return ways[-1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """True when s is a concatenation of words from word_dict, reused freely."""
    words = set(word_dict)
    fits = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        fits[end] = any(fits[start] and s[start:end] in words for start in range(end))
    return fits[-1]


# Upper bound of each tier and the price of every unit within it.
_TIERS = (
    (5, 30),
    (20, 15),
    (50, 10),
    (100, 8),
    (500, 7),
    (1000, 6),
    (2000, 5),
    (3000, 4),
    (4000, 3),
    (5000, 2),
    (6000, 1),
)
_PRICE_BEYOND = 1


def stairs_charge(num: int) -> float:
    """Total charge for num units priced by tiers that get cheaper as usage grows."""
    if num < 0:
        raise ValueError(f"usage must not be negative, got {num}")
    total = 0.0
    lower = 0
    for upper, price in _TIERS:
        if num <= upper:
            return total + (num - lower) * price
        total += (upper - lower) * price
        lower = upper
    return total + (num - lower) * _PRICE_BEYOND