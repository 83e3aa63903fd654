"""Search problems solved by recursive backtracking."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from typing import Any, Optional

__all__ = [
    "solve_sudoku",
    "knight_tour",
    "n_queens",
    "rat_in_maze",
    "word_exists",
    "unique_paths_iii",
    "permutations",
    "power_set",
    "binary_strings",
    "generate_parentheses",
    "letter_combinations",
    "decode_string",
]

_SUDOKU_SIZE = 9
_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))
_MAZE_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))
_WORD_MOVES = ((1, 0), (0, 1), (-1, 0), (0, -1))
_GRID_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))
_DIALPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}
_LETTERS = " ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _require_digits(digits: str) -> None:
    if not all(char in _DIALPAD for char in digits):
        raise ValueError("digits must contain only the characters 0-9")


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """Return a filled copy of ``grid`` (0 marks a blank), or None if none exists."""
    board = [list(row) for row in grid]
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("grid must be 9 by 9")
    blanks = [
        (r, c)
        for r in range(_SUDOKU_SIZE)
        for c in range(_SUDOKU_SIZE)
        if board[r][c] == 0
    ]

    def fits(r: int, c: int, num: int) -> bool:
        if num in board[r]:
            return False
        if any(board[i][c] == num for i in range(_SUDOKU_SIZE)):
            return False
        top, left = r - r % 3, c - c % 3
        return all(
            board[i][j] != num
            for i in range(top, top + 3)
            for j in range(left, left + 3)
        )

    def fill(k: int) -> bool:
        if k == len(blanks):
            return True
        r, c = blanks[k]
        for num in range(1, _SUDOKU_SIZE + 1):
            if fits(r, c, num):
                board[r][c] = num
                if fill(k + 1):
                    return True
                board[r][c] = 0
        return False

    return board if fill(0) else None


def knight_tour(board_size: int = 8) -> Optional[list[list[int]]]:
    """Return a board numbering a knight's tour from the top-left corner, or None."""
    if board_size < 1:
        raise ValueError("board_size must be at least 1")
    n = board_size
    board = [[0] * n for _ in range(n)]
    board[0][0] = 1

    def step(r: int, c: int, count: int) -> bool:
        if count > n * n:
            return True
        for dr, dc in _KNIGHT_MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n and board[nr][nc] == 0:
                board[nr][nc] = count
                if step(nr, nc, count + 1):
                    return True
                board[nr][nc] = 0
        return False

    return board if step(0, 0, 2) else None


def n_queens(n: int) -> Optional[list[list[bool]]]:
    """Return a board of ``n`` non-attacking queens (True marks a queen), or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    row_of_col: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> bool:
        if col == n:
            return True
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            row_of_col.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(col + 1):
                return True
            row_of_col.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    return [[row_of_col[c] == r for c in range(n)] for r in range(n)]


def rat_in_maze(maze: Sequence[Sequence[Any]]) -> Optional[list[list[bool]]]:
    """Return the cells of a path from top-left to bottom-right through open cells, or None."""
    grid = [list(row) for row in maze]
    if not grid:
        return None
    rows, cols = len(grid), len(grid[0])
    visited = [[False] * cols for _ in range(rows)]

    def walk(r: int, c: int) -> bool:
        if r == rows - 1 and c == cols - 1 and grid[r][c]:
            visited[r][c] = True
            return True
        if not (0 <= r < rows and 0 <= c < cols) or not grid[r][c] or visited[r][c]:
            return False
        visited[r][c] = True
        if any(walk(r + dr, c + dc) for dr, dc in _MAZE_MOVES):
            return True
        visited[r][c] = False
        return False

    return visited if walk(0, 0) else None


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Report whether ``word`` can be traced through adjacent cells, each used once."""
    if not word:
        return True
    grid = [list(row) for row in board]
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    visited = [[False] * cols for _ in range(rows)]

    def search(r: int, c: int, idx: int) -> bool:
        if idx == len(word):
            return True
        visited[r][c] = True
        for dr, dc in _WORD_MOVES:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and not visited[nr][nc]
                and grid[nr][nc] == word[idx]
                and search(nr, nc, idx + 1)
            ):
                return True
        visited[r][c] = False
        return False

    return any(
        grid[r][c] == word[0] and search(r, c, 1)
        for r in range(rows)
        for c in range(cols)
    )


def unique_paths_iii(grid: Sequence[Sequence[int]]) -> int:
    """Count walks from 1 to 2 that cover every 0 cell once, never entering -1."""
    cells = [list(row) for row in grid]
    to_visit = 1
    start: Optional[tuple[int, int]] = None
    for r, row in enumerate(cells):
        for c, value in enumerate(row):
            if value == 0:
                to_visit += 1
            elif value == 1:
                start = (r, c)
    if start is None:
        return 0
    rows = len(cells)
    cols = len(cells[0])

    def walk(r: int, c: int, remaining: int) -> int:
        if not (0 <= r < rows and 0 <= c < cols) or cells[r][c] == -1:
            return 0
        if cells[r][c] == 2:
            return int(remaining == 0)
        cells[r][c] = -1
        paths = sum(walk(r + dr, c + dc, remaining - 1) for dr, dc in _GRID_MOVES)
        cells[r][c] = 0
        return paths

    return walk(start[0], start[1], to_visit)


def permutations(nums: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of ``nums``, generated by swapping into place."""
    items = list(nums)
    result: list[list[Any]] = []

    def permute(start: int) -> None:
        if start >= len(items):
            result.append(list(items))
            return
        for i in range(start, len(items)):
            items[start], items[i] = items[i], items[start]
            permute(start + 1)
            items[start], items[i] = items[i], items[start]

    permute(0)
    return result


def power_set(values: Iterable[Any]) -> list[list[Any]]:
    """Return every subset of ``values``, subsets taking each element listed first."""
    items = list(values)
    if not items:
        return []
    result: list[list[Any]] = []
    chosen: list[Any] = []

    def collect(index: int) -> None:
        if index >= len(items):
            result.append(list(chosen))
            return
        chosen.append(items[index])
        collect(index + 1)
        chosen.pop()
        collect(index + 1)

    collect(0)
    return result


def binary_strings(n: int) -> list[str]:
    """Return all ``n``-bit strings in ascending order."""
    if n < 0:
        raise ValueError("n must not be negative")
    return ["".join(bits) for bits in itertools.product("01", repeat=n)]


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    result: list[str] = []

    def build(prefix: str, open_left: int, close_left: int) -> None:
        if open_left < 0 or close_left < 0:
            return
        if open_left == 0 and close_left == 0:
            result.append(prefix)
        elif open_left <= close_left:
            build(prefix + "(", open_left - 1, close_left)
            build(prefix + ")", open_left, close_left - 1)

    build("", n, n)
    return result


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad could type for ``digits``."""
    _require_digits(digits)
    if not digits:
        return []
    return [
        "".join(letters)
        for letters in itertools.product(*(_DIALPAD[digit] for digit in digits))
    ]


def decode_string(digits: str) -> list[str]:
    """Return every reading of ``digits`` with 1 as A through 26 as Z."""
    _require_digits(digits)
    result: list[str] = []

    def decode(index: int, so_far: str) -> None:
        if index >= len(digits):
            result.append(so_far)
            return
        first = int(digits[index])
        if first == 0:
            return
        decode(index + 1, so_far + _LETTERS[first])
        if index + 1 >= len(digits):
            return
        pair = 10 * first + int(digits[index + 1])
        if pair <= 26:
            decode(index + 2, so_far + _LETTERS[pair])

    if digits:
        decode(0, "")
    return result