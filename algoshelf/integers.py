"""Puzzles on the digits and bits of integers."""

from __future__ import annotations

_UINT32_LIMIT = 1 << 32
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _check_uint32(num: int) -> None:
    if not 0 <= num < _UINT32_LIMIT:
        raise ValueError(f"{num} is not an unsigned 32-bit integer")


def hamming_weight(num: int) -> int:
    """Number of set bits in an unsigned 32-bit integer."""
    _check_uint32(num)
    return bin(num).count("1")


def is_palindrome_number(x: int) -> bool:
    """True when the decimal digits of x read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def reverse_bits(num: int) -> int:
    """Reverse the order of the 32 bits of an unsigned 32-bit integer."""
    _check_uint32(num)
    return int(f"{num:032b}"[::-1], 2)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign; 0 if the result leaves int32."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result