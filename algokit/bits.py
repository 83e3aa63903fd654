"""Bit counting on 32-bit integers."""

from __future__ import annotations

__all__ = ["count_set_bits"]

_WORD_MASK = 0xFFFFFFFF


def count_set_bits(num: int) -> int:
    """Count the one bits of ``num`` taken as a 32-bit two's-complement word."""
    return bin(num & _WORD_MASK).count("1")