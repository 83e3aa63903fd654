"""Reading two chess players and their starting squares from standard input."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

__all__ = ["Player", "is_position_correct", "main"]

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass
class Player:
    """A player's name and the one-character code of their colour."""

    username: str = ""
    color_code: str = ""


def is_position_correct(pos: str) -> bool:
    """Report whether ``pos`` names a square such as ``e4``."""
    return len(pos) == 2 and pos[0] in _FILES and pos[1] in _RANKS


class _Scanner:
    """Whitespace-separated reading from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        while not self._buffer.strip():
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line
        self._buffer = self._buffer.lstrip()

    def token(self) -> str:
        self._fill()
        first, *rest = self._buffer.split(maxsplit=1)
        self._buffer = rest[0] if rest else ""
        return first

    def char(self) -> str:
        self._fill()
        first, self._buffer = self._buffer[0], self._buffer[1:]
        return first


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chess", description="Read two players and their starting squares."
    )
    parser.parse_args(argv)
    scanner = _Scanner(sys.stdin)
    out = sys.stdout

    def prompt(text: str) -> None:
        out.write(text)
        out.flush()

    try:
        players = []
        for number in (1, 2):
            prompt(f"enter details of user{number}: ")
            prompt("enter username: ")
            username = scanner.token()
            prompt("enter colorcode: ")
            players.append(Player(username, scanner.char()))
        for number in (1, 2):
            prompt(f"enter the position of user{number}: ")
            position = scanner.token()
            while not is_position_correct(position):
                prompt("position is not correct\n")
                prompt(f"enter the position of user{number}: ")
                position = scanner.token()
    except EOFError:
        print("\nunexpected end of input", file=sys.stderr)
        return 1
    return 0