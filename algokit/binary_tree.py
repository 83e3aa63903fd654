"""Binary tree filled level by level, left to right."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BinaryTree"]


@dataclass(slots=True, eq=False, repr=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinaryTree:
    """A complete binary tree: each insert takes the first free child slot."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._nodes: list[_Node] = []
        for value in values:
            self.insert(value)

    @property
    def _root(self) -> Optional[_Node]:
        return self._nodes[0] if self._nodes else None

    def insert(self, data: Any) -> None:
        """Attach ``data`` at the first empty position in level order."""
        node = _Node(data)
        index = len(self._nodes)
        if index:
            parent = self._nodes[(index - 1) // 2]
            if index % 2:
                parent.left = node
            else:
                parent.right = node
        self._nodes.append(node)

    def inorder(self) -> list[Any]:
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

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"BinaryTree({[node.data for node in self._nodes]!r})"