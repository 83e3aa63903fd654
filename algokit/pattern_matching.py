"""Searching for every occurrence of a pattern in a text."""

from __future__ import annotations

__all__ = [
    "naive_search",
    "prefix_table",
    "kmp_search",
    "boyer_moore_search",
    "rabin_karp_search",
]

_PRIME = 101


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def naive_search(text: str, pattern: str) -> list[int]:
    """Return start indices of ``pattern`` in ``text`` by checking every shift."""
    _require_pattern(pattern)
    size = len(pattern)
    return [i for i in range(len(text) - size + 1) if text[i : i + size] == pattern]


def prefix_table(pattern: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper border."""
    table = [0] * len(pattern)
    i, j = 1, 0
    while i < len(pattern):
        if pattern[i] == pattern[j]:
            j += 1
            table[i] = j
            i += 1
        elif j:
            j = table[j - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return start indices of ``pattern`` using the Knuth-Morris-Pratt method."""
    _require_pattern(pattern)
    table = prefix_table(pattern)
    size = len(pattern)
    matches: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j and char != pattern[j]:
            j = table[j - 1]
        if char == pattern[j]:
            j += 1
        if j == size:
            matches.append(i - size + 1)
            j = table[j - 1]
    return matches


def boyer_moore_search(text: str, pattern: str) -> list[int]:
    """Return start indices of ``pattern`` using the bad-character rule."""
    _require_pattern(pattern)
    last = {char: index for index, char in enumerate(pattern)}
    n, m = len(text), len(pattern)
    matches: list[int] = []
    shift = 0
    while shift <= n - m:
        j = m - 1
        while j >= 0 and text[shift + j] == pattern[j]:
            j -= 1
        if j < 0:
            matches.append(shift)
            shift += m - last.get(text[shift + m], -1) if shift + m < n else 1
        else:
            shift += max(1, j - last.get(text[shift + j], -1))
    return matches


def rabin_karp_search(text: str, pattern: str) -> list[int]:
    """Return start indices of ``pattern`` using a rolling hash."""
    _require_pattern(pattern)
    n, m = len(text), len(pattern)
    if m > n:
        return []

    def window_hash(chunk: str) -> int:
        return sum(ord(char) * _PRIME**power for power, char in enumerate(chunk))

    high = _PRIME ** (m - 1)
    pattern_hash = window_hash(pattern)
    text_hash = window_hash(text[:m])
    matches: list[int] = []
    for i in range(n - m + 1):
        if i:
            text_hash = (text_hash - ord(text[i - 1])) // _PRIME + ord(text[i + m - 1]) * high
        if text_hash == pattern_hash and text[i : i + m] == pattern:
            matches.append(i)
    return matches