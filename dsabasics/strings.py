"""String routines: KMP search, anagrams, repeats, palindromes and word reversal."""

from __future__ import annotations

from collections import Counter
from typing import List, Optional


def longest_prefix_suffix(pattern: str) -> List[int]:
    """Return, for each prefix of ``pattern``, the length of its longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> List[int]:
    """Return every index at which ``pattern`` starts in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = longest_prefix_suffix(pattern)
    matches: List[int] = []
    j = 0
    for i, char in enumerate(text):
        while j and char != pattern[j]:
            j = lps[j - 1]
        if char == pattern[j]:
            j += 1
        if j == len(pattern):
            matches.append(i - j + 1)
            j = lps[j - 1]
    return matches


def is_anagram(first: str, second: str) -> bool:
    """Return True if the two strings hold the same characters the same number of times."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def leftmost_non_repeating(text: str) -> Optional[str]:
    """Return the first character that occurs exactly once, or None."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def leftmost_repeating(text: str) -> Optional[str]:
    """Return the first character that occurs more than once, or None."""
    counts = Counter(text)
    return next((char for char in text if counts[char] > 1), None)


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def reverse_words(text: str) -> str:
    """Return ``text`` with its space-separated words in reverse order."""
    return " ".join(reversed(text.split(" ")))