from collections import Counter

import pytest

from algoshelf.textalgos import (
    add_strings,
    find_repeated_dna_sequences,
    is_anagram,
    is_palindrome,
    min_window,
    multiply,
    my_atoi,
    repeated_substring_pattern,
    reverse_str,
    reverse_string,
    reverse_words,
    roman_to_int,
)


def test_min_window_example():
    result = min_window("ADOBECODEBANC", "ABC")
    assert result == "BANC"
    assert result in "ADOBECODEBANC"
    assert not Counter("ABC") - Counter(result)


def test_min_window_whole_string_and_missing():
    assert min_window("a", "a") == "a"
    assert min_window("a", "aa") == ""
    assert min_window("abc", "") == ""


def test_min_window_covers_repeats():
    s, t = "aaflslflsldkalskaaa", "aaa"
    result = min_window(s, t)
    assert result in s
    assert not Counter(t) - Counter(result)


PAIRS = [
    ("1", "456"),
    ("123", "456"),
    ("0", "789"),
    ("999", "999"),
    ("12345678901234567890", "98765432109876543210"),
]


@pytest.mark.parametrize("a, b", PAIRS)
def test_multiply_matches_integer_product(a, b):
    assert multiply(a, b) == str(int(a) * int(b))
    assert multiply(a, b) == multiply(b, a)


@pytest.mark.parametrize("a, b", PAIRS)
def test_add_strings_matches_integer_sum(a, b):
    assert add_strings(a, b) == str(int(a) + int(b))


def test_multiply_rejects_non_digits():
    with pytest.raises(ValueError):
        multiply("12a", "3")
    with pytest.raises(ValueError):
        multiply("", "3")
    with pytest.raises(ValueError):
        add_strings("1-2", "3")


def test_dna_sequences():
    s = "AAAAACCCCCAAAAACCCCCCAAAAAGGGTTT"
    result = find_repeated_dna_sequences(s)
    assert result
    assert len(set(result)) == len(result)
    for seq in result:
        assert len(seq) == 10
        starts = [i for i in range(len(s) - 9) if s[i : i + 10] == seq]
        assert len(starts) >= 2


def test_dna_sequences_overlapping_and_short():
    s = "AAAAAAAAAAAAA"
    assert find_repeated_dna_sequences(s) == [s[:10]]
    assert find_repeated_dna_sequences(s[:10]) == []


@pytest.mark.parametrize("s", ["bb", "abab", "abcabcabcabc"])
def test_repeated_pattern_true(s):
    assert repeated_substring_pattern(s)


@pytest.mark.parametrize("s", ["aba", "a", "abcab"])
def test_repeated_pattern_false(s):
    assert not repeated_substring_pattern(s)


@pytest.mark.parametrize("unit", ["x", "ab", "abc", "aab"])
def test_repeated_pattern_of_repeats(unit):
    assert repeated_substring_pattern(unit * 3)


def test_repeated_pattern_empty():
    with pytest.raises(ValueError):
        repeated_substring_pattern("")


def test_reverse_str_example():
    assert reverse_str("abcdefg", 2) == "bacdfeg"


@pytest.mark.parametrize("s, k", [("abcdefg", 2), ("abcd", 2), ("abcdefghij", 3)])
def test_reverse_str_is_involution(s, k):
    once = reverse_str(s, k)
    assert sorted(once) == sorted(s)
    assert reverse_str(once, k) == s


def test_reverse_str_edges():
    assert reverse_str("abcd", 1) == "abcd"
    assert reverse_str("abcd", 10) == "abcd"[::-1]
    with pytest.raises(ValueError):
        reverse_str("abcd", 0)


@pytest.mark.parametrize("word", ["hello", "Hannah"])
def test_reverse_string_in_place(word):
    chars = list(word)
    assert reverse_string(chars) is None
    assert chars == list(word[::-1])
    raw = bytearray(word, "ascii")
    reverse_string(raw)
    assert raw.decode("ascii") == word[::-1]


@pytest.mark.parametrize("s", ["the sky is blue", "  hello world  ", "a good   example"])
def test_reverse_words_invariants(s):
    result = reverse_words(s)
    assert "  " not in result
    assert result == result.strip()
    assert reverse_words(result) == " ".join(s.split())


def test_reverse_words_blank():
    assert reverse_words("   ") == ""


def test_roman_single_symbols_and_pairs():
    assert roman_to_int("M") == 1000
    assert roman_to_int("IV") == 4
    assert roman_to_int("CM") == 900


def test_roman_compound_is_sum_of_parts():
    assert roman_to_int("MCMXCIV") == sum(
        roman_to_int(part) for part in ("M", "CM", "XC", "IV")
    )
    assert roman_to_int("III") == 3 * roman_to_int("I")
    assert roman_to_int("LVIII") == roman_to_int("L") + roman_to_int("V") + roman_to_int("III")


def test_roman_invalid():
    with pytest.raises(ValueError):
        roman_to_int("MZ")


def test_atoi_basic():
    assert my_atoi("42") == 42
    assert my_atoi("   -42") == -42
    assert my_atoi("4193 with words") == 4193
    assert my_atoi("words and 987") == 0


def test_atoi_clamps_to_int32():
    assert my_atoi("99999999999") == 2147483647
    assert my_atoi("-99999999999") == -2147483648


def test_atoi_no_digits():
    with pytest.raises(ValueError):
        my_atoi("words")
    with pytest.raises(ValueError):
        my_atoi("")


def test_anagram():
    assert is_anagram("anagram", "nagaram")
    assert not is_anagram("rat", "car")
    assert not is_anagram("ab", "abb")


def test_palindrome():
    assert is_palindrome("A man, a plan, a canal: Panama")
    assert not is_palindrome("race a car")
    assert is_palindrome(" ")
    assert not is_palindrome("0P")