"""Searching puzzles on arrays of integers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import reduce
from operator import xor


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of target in a rotated ascending array of distinct values, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[0] <= nums[mid]:
            # The left half is in order.
            if nums[0] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] <= target <= nums[-1]:
            # The right half is in order and holds the target.
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of target in a sorted array, or the index where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] > target:
            high = mid - 1
        elif nums[mid] < target:
            low = mid + 1
        else:
            return mid
    return low


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value of a sorted array in which every other value appears twice."""
    if not nums:
        raise ValueError("the array must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] == nums[mid ^ 1]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def single_number(nums: Sequence[int]) -> int:
    """The one value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two different elements adding up to target, or None."""
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        other = last_index.get(target - value)
        if other is not None and other != index:
            return index, other
    return None


def my_sqrt(x: int) -> int:
    """Integer square root of a non-negative integer, rounded down."""
    if x < 0:
        raise ValueError(f"cannot take the square root of {x}")
    return math.isqrt(x)