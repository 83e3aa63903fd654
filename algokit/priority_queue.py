"""Bounded binary min-heaps kept in an array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

__all__ = ["QueueOverflow", "QueueUnderflow", "PriorityQueue", "MinHeap"]

DEFAULT_CAPACITY = 10


class QueueOverflow(Exception):
    """Raised when pushing onto a full priority queue."""


class QueueUnderflow(IndexError):
    """Raised when reading or removing from an empty priority queue."""


def _parent(index: int) -> int:
    return (index - 1) // 2


class _BoundedHeap:
    """Array-backed min-heap with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def _is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index and items[index] < items[_parent(index)]:
            parent = _parent(index)
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def _add(self, item: Any) -> None:
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def _remove_root(self) -> Any:
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return root


class PriorityQueue(_BoundedHeap):
    """Min-priority queue that raises on overflow and underflow."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)

    def push(self, item: Any) -> None:
        if self._is_full():
            raise QueueOverflow("PriorityQueue overflow!!")
        self._add(item)

    def pop(self) -> Any:
        """Remove and return the smallest item."""
        if not self._items:
            raise QueueUnderflow("PriorityQueue underflow!!")
        return self._remove_root()

    def top(self) -> Any:
        """Return the smallest item without removing it."""
        if not self._items:
            raise QueueUnderflow("PriorityQueue underflow!!")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield items in heap-array order."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"PriorityQueue(capacity={self._capacity}, items={self._items!r})"


class MinHeap(_BoundedHeap):
    """Lenient min-heap: full inserts and empty deletes are ignored."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False, leaving the heap unchanged, when full."""
        if self._is_full():
            return False
        self._add(key)
        return True

    def get_min(self) -> Optional[Any]:
        """Return the smallest key, or None when the heap is empty."""
        return self._items[0] if self._items else None

    def delete_min(self) -> Optional[Any]:
        """Remove and return the smallest key, or None when empty."""
        if not self._items:
            return None
        return self._remove_root()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield keys in heap-array order."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MinHeap(capacity={self._capacity}, items={self._items!r})"