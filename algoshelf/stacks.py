"""Stack and queue puzzles: a min stack, monotonic queues and bracket matching."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


class MinStack:
    """A stack that also reports its smallest value in constant time."""

    def __init__(self) -> None:
        # Each entry holds a value and the minimum of the stack up to it.
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put val on top of the stack."""
        smallest = val if not self._items else min(val, self._items[-1][1])
        self._items.append((val, smallest))

    def pop(self) -> int:
        """Remove the top value and return it."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """The value on top of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def minimum(self) -> int:
        """The smallest value currently on the stack."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


class MonotonicQueue:
    """A queue kept in non-increasing order, so its front is the largest value."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Add val, dropping every smaller value from the back first."""
        while self._items and val > self._items[-1]:
            self._items.pop()
        self._items.append(val)

    def pop(self, val: int) -> None:
        """Drop the front if it equals val, the value leaving the window."""
        if self._items and self._items[0] == val:
            self._items.popleft()

    def front(self) -> int:
        """The largest value in the queue."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Largest value of each window of k consecutive elements."""
    nums = list(nums)
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size must be between 1 and {len(nums)}, got {k}")
    queue = MonotonicQueue()
    result: list[int] = []
    for index, value in enumerate(nums):
        if index >= k:
            queue.pop(nums[index - k])
        queue.push(value)
        if index >= k - 1:
            result.append(queue.front())
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a temperature at least as high, or 0 if none comes."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for day, temperature in enumerate(temperatures):
        while stack and temperatures[stack[-1]] <= temperature:
            earlier = stack.pop()
            result[earlier] = day - earlier
        stack.append(day)
    return result


_OPENING = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """True when every bracket in s is closed by its match in the right order.

    Characters other than brackets are ignored, but count towards the length,
    and a string of odd length is never valid.
    """
    if len(s) % 2:
        return False
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
        elif char in _OPENING:
            if not stack or stack.pop() != _OPENING[char]:
                return False
    return not stack


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for char in s:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The k most frequent values, most frequent first."""
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}, got {k}")
    return [value for value, _ in counts.most_common(k)]