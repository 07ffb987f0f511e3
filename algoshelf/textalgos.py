"""Puzzles on strings: windows, digit arithmetic, patterns and simple parsing."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence
from itertools import zip_longest
from typing import Any

_DIGITS = "0123456789"
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_DNA_LENGTH = 10

_ROMAN_SYMBOLS = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_PAIRS = {"IV": 4, "IX": 9, "XL": 40, "XC": 90, "CD": 400, "CM": 900}


def min_window(s: str, t: str) -> str:
    """Shortest substring of s holding every character of t as often as t does.

    The first such substring wins a tie; "" when there is none or t is empty.
    """
    if not t:
        return ""
    counts = Counter(t)
    missing = len(counts)
    best: tuple[int, int] | None = None
    left = 0
    for right, char in enumerate(s):
        counts[char] -= 1
        if counts[char] == 0:
            missing -= 1
        while missing == 0:
            if best is None or right - left < best[1] - best[0]:
                best = (left, right)
            leaving = s[left]
            if counts[leaving] == 0:
                missing += 1
            counts[leaving] += 1
            left += 1
    if best is None:
        return ""
    return s[best[0] : best[1] + 1]


def _check_digits(num: str) -> None:
    if not all(ch in _DIGITS for ch in num):
        raise ValueError(f"{num!r} is not a string of decimal digits")


def _digit(ch: str) -> int:
    return ord(ch) - ord("0")


def add_strings(num1: str, num2: str) -> str:
    """Sum of two non-negative numbers written as decimal digit strings."""
    _check_digits(num1)
    _check_digits(num2)
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(_digit(a) + _digit(b) + carry, 10)
        digits.append(_DIGITS[digit])
    if carry:
        digits.append(_DIGITS[carry])
    return "".join(reversed(digits))


def _multiply_digit(num: str, digit: str, shift: int) -> str:
    """num times a single digit, followed by shift zeros."""
    if digit == "0":
        return "0"
    factor = _digit(digit)
    digits: list[str] = []
    carry = 0
    for ch in reversed(num):
        carry, value = divmod(_digit(ch) * factor + carry, 10)
        digits.append(_DIGITS[value])
    while carry:
        carry, value = divmod(carry, 10)
        digits.append(_DIGITS[value])
    return "".join(reversed(digits)) + "0" * shift


def multiply(num1: str, num2: str) -> str:
    """Product of two non-negative numbers written as decimal digit strings."""
    if not num1 or not num2:
        raise ValueError("both numbers need at least one digit")
    _check_digits(num1)
    _check_digits(num2)
    if num1 == "0" or num2 == "0":
        return "0"
    result = ""
    for shift, digit in enumerate(reversed(num1)):
        result = add_strings(result, _multiply_digit(num2, digit, shift))
    return result


def find_repeated_dna_sequences(s: str) -> list[str]:
    """Every 10-letter substring that occurs more than once, in order of its second occurrence."""
    counts: Counter[str] = Counter()
    result: list[str] = []
    for start in range(len(s) - _DNA_LENGTH + 1):
        window = s[start : start + _DNA_LENGTH]
        counts[window] += 1
        if counts[window] == 2:
            result.append(window)
    return result


def repeated_substring_pattern(s: str) -> bool:
    """True when s is a shorter substring repeated two or more times."""
    if not s:
        raise ValueError("the string must not be empty")
    prefix = [0] * len(s)
    matched = 0
    for index in range(1, len(s)):
        while matched and s[index] != s[matched]:
            matched = prefix[matched - 1]
        if s[index] == s[matched]:
            matched += 1
        prefix[index] = matched
    longest = prefix[-1]
    return longest != 0 and len(s) % (len(s) - longest) == 0


def reverse_str(s: str, k: int) -> str:
    """Reverse the first k characters of every block of 2k characters."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    return "".join(
        s[start : start + k][::-1] + s[start + k : start + 2 * k]
        for start in range(0, len(s), 2 * k)
    )


def reverse_string(chars: MutableSequence[Any]) -> None:
    """Reverse a mutable sequence of characters in place."""
    chars.reverse()


def reverse_words(s: str) -> str:
    """The space-separated words of s in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def roman_to_int(s: str) -> int:
    """Value of a number written in Roman numerals."""
    total = 0
    index = 0
    while index < len(s):
        pair = s[index : index + 2]
        if pair in _ROMAN_PAIRS:
            total += _ROMAN_PAIRS[pair]
            index += 2
            continue
        try:
            total += _ROMAN_SYMBOLS[s[index]]
        except KeyError:
            raise ValueError(f"{s[index]!r} is not a Roman numeral") from None
        index += 1
    return total


def my_atoi(s: str) -> int:
    """Read the first run of digits in s as an integer clamped to 32 bits.

    A run preceded by '-' is negative; a run preceded directly by a space
    reads as 0. A string with no digits is an error.
    """
    start = next((i for i, ch in enumerate(s) if ch in _DIGITS), None)
    if start is None:
        raise ValueError(f"no digits in {s!r}")
    negative = False
    if start > 0:
        before = s[start - 1]
        if before == "-":
            negative = True
        elif before == " ":
            return 0
    end = start
    while end < len(s) and s[end] in _DIGITS:
        end += 1
    value = int(s[start:end])
    if negative:
        value = -value
    return max(_INT32_MIN, min(_INT32_MAX, value))


def is_anagram(s: str, t: str) -> bool:
    """True when t uses exactly the same characters as s, as often."""
    return Counter(s) == Counter(t)


def is_palindrome(s: str) -> bool:
    """True when the ASCII letters and digits of s, ignoring case, read the same both ways."""
    kept = [
        ch.lower()
        for ch in s
        if ch in _DIGITS or "a" <= ch <= "z" or "A" <= ch <= "Z"
    ]
    return kept == kept[::-1]