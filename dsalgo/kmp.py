"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from typing import Sequence


def longest_proper_prefix(pattern: Sequence) -> list[int]:
    """Return the longest-proper-prefix-which-is-also-suffix table of *pattern*."""
    lps = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = lps[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Return every index in *text* at which *pattern* starts, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = longest_proper_prefix(pattern)
    size = len(pattern)
    matches: list[int] = []
    matched = 0
    for index, item in enumerate(text):
        while matched and item != pattern[matched]:
            matched = lps[matched - 1]
        if item == pattern[matched]:
            matched += 1
        if matched == size:
            matches.append(index - size + 1)
            matched = lps[matched - 1]
    return matches