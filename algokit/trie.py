"""Prefix tree of strings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["Trie"]


@dataclass(slots=True, eq=False, repr=False)
class _TrieNode:
    is_word: bool = False
    children: dict[str, "_TrieNode"] = field(default_factory=dict)


class Trie:
    """A set of strings stored character by character."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Report whether ``word`` was inserted (prefixes alone do not count)."""
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_word

    def remove(self, word: str) -> bool:
        """Remove ``word`` and prune nodes left unused; report whether it was present."""
        path: list[tuple[_TrieNode, str]] = []
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            path.append((node, char))
            node = child
        if not node.is_word:
            return False
        node.is_word = False
        for parent, char in reversed(path):
            child = parent.children[char]
            if child.children or child.is_word:
                break
            del parent.children[char]
        return True

    def words(self) -> list[str]:
        """Return all stored words in character-code order."""
        result: list[str] = []
        stack = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                result.append(prefix)
            for char in sorted(node.children, reverse=True):
                stack.append((node.children[char], prefix + char))
        return result

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __repr__(self) -> str:
        return f"Trie({self.words()!r})"