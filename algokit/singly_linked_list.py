"""Singly linked list with 1-based positional operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["EmptyListError", "SinglyLinkedList"]


class EmptyListError(IndexError):
    """Raised when an operation needs an element but the list is empty."""


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A chain of nodes addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
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
            raise EmptyListError("Singly linked list empty!!")
        if position < 1 or position > self._size:
            raise IndexError("Given position does not exist!!")

    def push_front(self, data: Any) -> None:
        self._head = _Node(data, self._head)
        self._size += 1

    def push_back(self, data: Any) -> None:
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            *_, last = self._nodes()
            last.next = node
        self._size += 1

    def insert(self, data: Any, position: int) -> None:
        """Insert so ``data`` lands at ``position``; past the end appends."""
        if position < 1:
            raise ValueError("position must be at least 1")
        if self._head is None or position == 1:
            self.push_front(data)
            return
        prev = self._head
        for _ in range(position - 2):
            if prev.next is None:
                break
            prev = prev.next
        prev.next = _Node(data, prev.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError("Singly linked list empty!!")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise EmptyListError("Singly linked list empty!!")
        if self._head.next is None:
            return self.pop_front()
        prev = self._head
        while prev.next.next is not None:
            prev = prev.next
        node = prev.next
        prev.next = None
        self._size -= 1
        return node.data

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def get(self, position: int) -> Any:
        """Return the element at 1-based ``position``."""
        self._check_position(position)
        return self._node_at(position).data

    def remove(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        self._check_position(position)
        if position == 1:
            return self.pop_front()
        prev = self._node_at(position - 1)
        node = prev.next
        prev.next = node.next
        self._size -= 1
        return node.data

    def remove_key(self, key: Any) -> bool:
        """Remove the first element equal to ``key``; report whether one was found."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.data == key:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                self._size -= 1
                return True
            prev = node
        return False

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each run of ``k`` nodes in place; a shorter tail run is reversed too."""
        if k < 1:
            raise ValueError("group size must be at least 1")
        new_head: Optional[_Node] = None
        tail: Optional[_Node] = None
        current = self._head
        while current is not None:
            group_first = current
            prev: Optional[_Node] = None
            count = 0
            while current is not None and count < k:
                following = current.next
                current.next = prev
                prev = current
                current = following
                count += 1
            if tail is None:
                new_head = prev
            else:
                tail.next = prev
            tail = group_first
        self._head = new_head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"