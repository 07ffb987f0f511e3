"""Backtracking puzzles: queens, partitions, permutations, subsets and splits."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import permutations

_DIGITS = "0123456789"


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of n queens on an n x n board with no two attacking.

    Each board is a list of rows in which 'Q' marks a queen and '.' an empty
    square. Boards are listed with the queens' columns in ascending order.
    """
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    if n == 0:
        return []

    def place(
        cols: tuple[int, ...], diagonals: frozenset[int], anti: frozenset[int]
    ) -> Iterator[tuple[int, ...]]:
        row = len(cols)
        if row == n:
            yield cols
            return
        for col in range(n):
            if col in cols or row - col in diagonals or row + col in anti:
                continue
            yield from place(
                (*cols, col), diagonals | {row - col}, anti | {row + col}
            )

    return [
        ["." * col + "Q" + "." * (n - col - 1) for col in cols]
        for cols in place((), frozenset(), frozenset())
    ]


def partition_palindromes(s: str) -> list[list[str]]:
    """Every way to cut s into pieces that are all palindromes."""

    def split(start: int) -> Iterator[list[str]]:
        if start == len(s):
            yield []
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                for rest in split(end):
                    yield [piece, *rest]

    return list(split(0))


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Every ordering of nums, in the order of their positions."""
    return [list(p) for p in permutations(list(nums))]


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Every distinct ordering of nums, in ascending lexicographic order."""
    values = sorted(nums)
    counts = Counter(values)
    keys = sorted(counts)
    size = len(values)

    def build(path: list[int]) -> Iterator[list[int]]:
        if len(path) == size:
            yield list(path)
            return
        for value in keys:
            if counts[value]:
                counts[value] -= 1
                path.append(value)
                yield from build(path)
                path.pop()
                counts[value] += 1

    return list(build([]))


def _is_octet(piece: str) -> bool:
    """True for a decimal number from 0 to 255 written without leading zeros."""
    if len(piece) > 1 and piece[0] == "0":
        return False
    return all(ch in _DIGITS for ch in piece) and int(piece) <= 255


def restore_ip_addresses(s: str) -> list[str]:
    """Every dotted IPv4 address that can be made by inserting three dots into s."""

    def segments(start: int, parts: list[str]) -> Iterator[str]:
        if len(parts) == 4:
            if start == len(s):
                yield ".".join(parts)
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if not _is_octet(piece):
                break
            yield from segments(end, [*parts, piece])

    return list(segments(0, []))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of nums, listed by the bit pattern of the positions taken."""
    values = list(nums)
    return [
        [value for bit, value in enumerate(values) if mask >> bit & 1]
        for mask in range(1 << len(values))
    ]


def word_break_sentences(s: str, word_dict: Iterable[str]) -> list[str]:
    """Every way to write s as words from word_dict joined by single spaces."""
    words = set(word_dict)

    def sentences(start: int, path: list[str]) -> Iterator[str]:
        if start == len(s):
            yield " ".join(path)
            return
        for end in range(start + 1, len(s) + 1):
            word = s[start:end]
            if word in words:
                yield from sentences(end, [*path, word])

    return list(sentences(0, []))