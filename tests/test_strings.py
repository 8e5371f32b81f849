import pytest

from dsabasics.strings import (
    is_anagram,
    is_palindrome,
    kmp_search,
    leftmost_non_repeating,
    leftmost_repeating,
    longest_prefix_suffix,
    reverse_words,
)


def test_lps_repeated_character():
    assert longest_prefix_suffix("aaaa") == [0, 1, 2, 3]


@pytest.mark.parametrize("pattern", ["abacabad", "aabaaac", "abcd", "ababab", ""])
def test_lps_invariant(pattern):
    lps = longest_prefix_suffix(pattern)
    assert len(lps) == len(pattern)
    for i, length in enumerate(lps):
        assert 0 <= length <= i
        assert pattern[:length] == pattern[i - length + 1 : i + 1]
        longer = length + 1
        if longer <= i:
            assert pattern[:longer] != pattern[i - longer + 1 : i + 1]


def test_kmp_overlapping():
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


@pytest.mark.parametrize(
    "text, pattern",
    [("ababcababaad", "ababa"), ("abcabcabc", "abc"), ("xyz", "q"), ("aaabaaab", "aab")],
)
def test_kmp_matches_every_occurrence(text, pattern):
    found = kmp_search(text, pattern)
    assert found == [i for i in range(len(text)) if text.startswith(pattern, i)]


def test_kmp_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


def test_anagram():
    assert is_anagram("listen", "silent") is True
    assert is_anagram("abc", "abd") is False
    assert is_anagram("abc", "abcc") is False


def test_leftmost_non_repeating():
    assert leftmost_non_repeating("geeksforgeeks") == "f"
    assert leftmost_non_repeating("aabb") is None


def test_leftmost_repeating():
    assert leftmost_repeating("abccba") == "a"
    assert leftmost_repeating("abc") is None


def test_palindrome():
    assert is_palindrome("racecar") is True
    assert is_palindrome("ab") is False
    assert is_palindrome("") is True


def test_reverse_words_order():
    text = "welcome to gfg"
    assert reverse_words(text).split(" ") == text.split(" ")[::-1]


@pytest.mark.parametrize("text", ["one", "a b c d", "hello  world", ""])
def test_reverse_words_round_trip(text):
    assert reverse_words(reverse_words(text)) == text
    assert len(reverse_words(text)) == len(text)