"""Unbalanced binary search tree; equal keys go to the right."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BinarySearchTree"]


@dataclass(slots=True, eq=False, repr=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A binary search tree with insertion, removal and the usual traversals."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> None:
        """Add ``data``; a key equal to an existing one goes to its right."""
        node = _Node(data)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if current.data > data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def remove(self, data: Any) -> bool:
        """Remove one occurrence of ``data``; report whether it was present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.data != data:
            parent = node
            node = node.left if node.data > data else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            # Replace with the largest key of the left subtree, then unlink that node.
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.data = pred.data
            if pred_parent is node:
                pred_parent.left = pred.left
            else:
                pred_parent.right = pred.left
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def min(self) -> Any:
        """Return the smallest key."""
        if self._root is None:
            raise ValueError("Can't find min value. BST empty!!")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def max(self) -> Any:
        """Return the largest key."""
        if self._root is None:
            raise ValueError("Can't find max value. BST empty!!")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.data

    def inorder(self) -> list[Any]:
        """Return keys in left-node-right order (sorted)."""
        result: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def preorder(self) -> list[Any]:
        """Return keys in node-left-right order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[Any]:
        """Return keys in left-right-node order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> list[Any]:
        """Return keys level by level, left to right."""
        result: list[Any] = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"