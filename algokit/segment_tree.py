"""Segment tree over integer values answering range-sum queries."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["SegmentTree"]


class SegmentTree:
    """Sum segment tree stored in an array of four times the input length."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("values must not be empty")
        self._tree = [0] * (4 * len(self._values))
        self._build(0, 0, len(self._values) - 1)

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = self._values[start]
            return
        mid = start + (end - start) // 2
        left, right = 2 * node + 1, 2 * node + 2
        self._build(left, start, mid)
        self._build(right, mid + 1, end)
        self._tree[node] = self._tree[left] + self._tree[right]

    @property
    def values(self) -> list[int]:
        return list(self._values)

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        if not 0 <= index < len(self._values):
            raise IndexError("index out of range")
        self._values[index] += delta
        node, start, end = 0, 0, len(self._values) - 1
        while True:
            self._tree[node] += delta
            if start == end:
                return
            mid = start + (end - start) // 2
            if index <= mid:
                node, end = 2 * node + 1, mid
            else:
                node, start = 2 * node + 2, mid + 1

    def sum(self, q_start: int, q_end: int) -> int:
        """Return the sum of values from ``q_start`` to ``q_end`` inclusive."""
        return self._sum(0, 0, len(self._values) - 1, q_start, q_end)

    def _sum(self, node: int, start: int, end: int, q_start: int, q_end: int) -> int:
        if q_start > end or start > q_end:
            return 0
        if q_start <= start and end <= q_end:
            return self._tree[node]
        mid = start + (end - start) // 2
        return self._sum(2 * node + 1, start, mid, q_start, q_end) + self._sum(
            2 * node + 2, mid + 1, end, q_start, q_end
        )

    def nodes(self) -> list[int]:
        """Return a copy of the underlying tree array."""
        return list(self._tree)

    def __repr__(self) -> str:
        return f"SegmentTree({self._values!r})"