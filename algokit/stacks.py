"""Bounded array-backed and unbounded node-backed LIFO stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

__all__ = ["StackOverflow", "StackUnderflow", "ArrayStack", "LinkedStack"]


class StackOverflow(Exception):
    """Raised when pushing onto a full bounded stack."""


class StackUnderflow(IndexError):
    """Raised when reading or removing from an empty stack."""


class ArrayStack(Generic[T]):
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def push(self, data: T) -> None:
        """Place ``data`` on top; raise StackOverflow when full."""
        if self.is_full():
            raise StackOverflow("stack overflow")
        self._items.append(data)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflow("stack underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self._capacity}, items={self._items!r})"


@dataclass(slots=True)
class _StackNode:
    data: Any
    next: Optional["_StackNode"] = None


class LinkedStack(Generic[T]):
    """A stack built from singly linked nodes, with no size limit."""

    def __init__(self) -> None:
        self._head: Optional[_StackNode] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def push(self, data: T) -> None:
        self._head = _StackNode(data, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._head is None:
            raise StackUnderflow("stack underflow")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        """Return the top item without removing it."""
        if self._head is None:
            raise StackUnderflow("stack underflow")
        return self._head.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield items from top to bottom."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"