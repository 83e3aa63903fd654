"""Doubly linked list with 1-based positional operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from algokit.singly_linked_list import EmptyListError

__all__ = ["DoublyLinkedList"]

_EMPTY_MESSAGE = "Doubly linked list empty!!"


@dataclass(slots=True, eq=False, repr=False)
class _Node:
    data: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A chain of nodes linked both ways, addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _check_position(self, position: int) -> None:
        if self._head is None:
            raise EmptyListError(_EMPTY_MESSAGE)
        if position < 1 or position > self._size:
            raise IndexError("Given position does not exist!!")

    def _node_at(self, position: int) -> _Node:
        """Walk from whichever end is nearer to the node at ``position``."""
        if position <= (self._size + 1) // 2:
            node = self._head
            for _ in range(position - 1):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - position):
                node = node.prev
        return node

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def push_front(self, data: Any) -> None:
        node = _Node(data, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        node = _Node(data, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, data: Any, position: int) -> None:
        """Insert so ``data`` lands at ``position``; past the end appends."""
        if position < 1:
            raise ValueError("position must be at least 1")
        if self._head is None or position == 1:
            self.push_front(data)
            return
        if position > self._size:
            self.push_back(data)
            return
        following = self._node_at(position)
        node = _Node(data, following.prev, following)
        following.prev.next = node
        following.prev = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError(_EMPTY_MESSAGE)
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._tail is None:
            raise EmptyListError(_EMPTY_MESSAGE)
        return self._unlink(self._tail)

    def get(self, position: int) -> Any:
        """Return the element at 1-based ``position``."""
        self._check_position(position)
        return self._node_at(position).data

    def remove(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        self._check_position(position)
        return self._unlink(self._node_at(position))

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"