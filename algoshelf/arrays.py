"""In-place and sliding-window work on integer arrays."""

from __future__ import annotations

import heapq
import random
from collections.abc import MutableSequence, Sequence


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n values of nums2 into the first m values of nums1, in place."""
    if m < 0 or n < 0 or n > len(nums2) or m + n > len(nums1):
        raise ValueError("nums1 must have room for m + n values and nums2 at least n")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of a sorted array to its front; return their count."""
    unique = list(dict.fromkeys(nums))
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every value other than val to the front, in order; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of a sorted array, in ascending order."""
    result: list[int] = []
    left, right = 0, len(nums) - 1
    while left <= right:
        low, high = nums[left] * nums[left], nums[right] * nums[right]
        if high > low:
            result.append(high)
            right -= 1
        else:
            result.append(low)
            left += 1
    result.reverse()
    return result


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as its decimal digits, most significant first."""
    if not digits:
        raise ValueError("there must be at least one digit")
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def _partition(nums: MutableSequence[int], left: int, right: int) -> int:
    """Place a random pivot at its final index between left and right; return it."""
    chosen = random.randint(left, right)
    nums[left], nums[chosen] = nums[chosen], nums[left]
    while left < right:
        while nums[left] < nums[right] and left < right:
            right -= 1
        if left < right:
            nums[left], nums[right] = nums[right], nums[left]
            left += 1
        while nums[left] < nums[right] and left < right:
            left += 1
        if left < right:
            nums[left], nums[right] = nums[right], nums[left]
            right -= 1
    return left


def sort_array(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort nums in place with a randomised quicksort and return it."""
    pending = [(0, len(nums) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        mid = _partition(nums, left, right)
        pending.append((left, mid - 1))
        pending.append((mid + 1, right))
    return nums


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run summing to at least target, or 0."""
    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while left < right and total - nums[left] >= target:
            total -= nums[left]
            left += 1
        if total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
    return best or 0