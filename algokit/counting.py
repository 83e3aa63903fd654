"""Counting and checking problems solved by dynamic programming."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = [
    "num_decodings",
    "unique_paths_with_obstacles",
    "total_unique_paths",
    "power",
    "is_valid_sudoku",
    "word_break",
]


def num_decodings(s: str) -> int:
    """Count the ways to read a digit string as letters numbered 1 to 26."""
    if not s:
        return 0
    after_next, after = 0, 1
    for i in range(len(s) - 1, -1, -1):
        if s[i] == "0":
            current = 0
        else:
            current = after
            if i < len(s) - 1 and (s[i] == "1" or (s[i] == "2" and s[i + 1] < "7")):
                current += after_next
        after_next, after = after, current
    return after


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths from top-left to bottom-right avoiding cells set to 1."""
    if not grid or not grid[0] or grid[0][0]:
        return 0
    ways = [0] * len(grid[0])
    ways[0] = 1
    for row in grid:
        for j, cell in enumerate(row):
            if cell:
                ways[j] = 0
            elif j:
                ways[j] += ways[j - 1]
    return ways[-1]


def total_unique_paths(rows: int, cols: int) -> int:
    """Count right/down paths across an open ``rows`` by ``cols`` grid."""
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be at least 1")
    return math.comb(rows + cols - 2, rows - 1)


def _positive_power(x: float, n: int) -> float:
    if n == 0:
        return 1.0
    if n == 1:
        return x
    half = _positive_power(x, n // 2)
    return x * half * half if n & 1 else half * half


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    x = float(x)
    if x == 1:
        return x
    if x == -1:
        return -1.0 if n & 1 else 1.0
    if n < 0:
        return 1 / _positive_power(x, -n)
    return _positive_power(x, n)


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Report whether no digit repeats in a row, column or box; '.' marks a blank."""
    rows = [list(row) for row in board]
    if len(rows) != 9 or any(len(row) != 9 for row in rows):
        raise ValueError("board must be 9 by 9")
    columns = [list(column) for column in zip(*rows)]
    boxes = [
        [rows[r][c] for r in range(top, top + 3) for c in range(left, left + 3)]
        for top in range(0, 9, 3)
        for left in range(0, 9, 3)
    ]
    for unit in rows + columns + boxes:
        digits = [cell for cell in unit if cell != "."]
        if len(digits) != len(set(digits)):
            return False
    return True


def word_break(s: str, word_dict: Iterable[str]) -> list[str]:
    """Return every way to split ``s`` into dictionary words, joined by spaces."""
    words = set(word_dict)
    sentences: list[list[str]] = [[] for _ in range(len(s) + 1)]
    sentences[0].append("")
    for end in range(1, len(s) + 1):
        for start in range(end):
            suffix = s[start:end]
            if sentences[start] and suffix in words:
                sentences[end].extend(
                    f"{prefix} {suffix}" if prefix else suffix for prefix in sentences[start]
                )
    return sentences[len(s)]