"""Circular singly linked list whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algokit.singly_linked_list import EmptyListError

__all__ = ["CircularLinkedList"]

_EMPTY_MESSAGE = "Circular linked list empty"


@dataclass(slots=True, eq=False, repr=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class CircularLinkedList:
    """A ring of nodes; the tail is kept so both ends are reachable at once."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _link_after_tail(self, data: Any) -> _Node:
        node = _Node(data)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def push_front(self, data: Any) -> None:
        self._link_after_tail(data)

    def push_back(self, data: Any) -> None:
        self._tail = self._link_after_tail(data)

    def insert(self, data: Any, position: int) -> None:
        """Insert so ``data`` lands at 1-based ``position``; past the end appends."""
        if position < 1:
            raise ValueError("position must be at least 1")
        if self._tail is None or position == 1:
            self.push_front(data)
            return
        if position > self._size:
            self.push_back(data)
            return
        prev = self._tail.next
        for _ in range(position - 2):
            prev = prev.next
        prev.next = _Node(data, prev.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._tail is None:
            raise EmptyListError(_EMPTY_MESSAGE)
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.data

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise EmptyListError(_EMPTY_MESSAGE)
        tail = self._tail
        if tail.next is tail:
            self._tail = None
        else:
            prev = tail.next
            while prev.next is not tail:
                prev = prev.next
            prev.next = tail.next
            self._tail = prev
        self._size -= 1
        return tail.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield each element once, starting from the head."""
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.data
            if node is self._tail:
                return
            node = node.next

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"