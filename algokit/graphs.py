"""Directed and undirected graphs over vertices numbered from zero."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

__all__ = ["GraphError", "CyclicGraphError", "DirectedGraph", "UndirectedGraph"]


class GraphError(Exception):
    """Raised for edges between missing vertices or edges that do not exist."""


class CyclicGraphError(GraphError):
    """Raised when an operation needs an acyclic graph."""


class _Graph:
    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._adj):
                raise GraphError("No such nodes exist!!")


class DirectedGraph(_Graph):
    """A directed graph stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        super().__init__(vertex_count)

    def add_edge(self, u: int, v: int) -> None:
        self._check(u, v)
        self._adj[u].append(v)

    def add_edges(self, edges: Iterable[tuple[int, int]]) -> None:
        for u, v in edges:
            self.add_edge(u, v)

    def remove_edge(self, u: int, v: int) -> None:
        """Remove one edge from ``u`` to ``v``."""
        self._check(u, v)
        try:
            self._adj[u].remove(v)
        except ValueError:
            raise GraphError("No edge exists between given nodes!!") from None

    def _preorder(self, source: int, visited: list[bool]) -> Iterator[int]:
        visited[source] = True
        yield source
        stack = [iter(self._adj[source])]
        while stack:
            for nxt in stack[-1]:
                if not visited[nxt]:
                    visited[nxt] = True
                    yield nxt
                    stack.append(iter(self._adj[nxt]))
                    break
            else:
                stack.pop()

    def _postorder(self, source: int, visited: list[bool]) -> Iterator[int]:
        visited[source] = True
        stack = [(source, iter(self._adj[source]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(self._adj[nxt])))
                    break
            else:
                stack.pop()
                yield node

    def depth_first(self) -> list[int]:
        """Return every vertex in depth-first order, restarting at each unvisited one."""
        visited = [False] * len(self._adj)
        order: list[int] = []
        for start in range(len(self._adj)):
            if not visited[start]:
                order.extend(self._preorder(start, visited))
        return order

    def breadth_first(self) -> list[int]:
        """Return every vertex in breadth-first order, restarting at each unvisited one."""
        visited = [False] * len(self._adj)
        order: list[int] = []
        for start in range(len(self._adj)):
            if visited[start]:
                continue
            visited[start] = True
            queue = deque([start])
            while queue:
                node = queue.popleft()
                order.append(node)
                for nxt in self._adj[node]:
                    if not visited[nxt]:
                        visited[nxt] = True
                        queue.append(nxt)
        return order

    def is_cyclic(self) -> bool:
        """Report whether some path leads from a vertex back to itself."""
        unseen, active, done = 0, 1, 2
        state = [unseen] * len(self._adj)
        for start in range(len(self._adj)):
            if state[start] != unseen:
                continue
            state[start] = active
            stack = [(start, iter(self._adj[start]))]
            while stack:
                node, neighbours = stack[-1]
                for nxt in neighbours:
                    if state[nxt] == active:
                        return True
                    if state[nxt] == unseen:
                        state[nxt] = active
                        stack.append((nxt, iter(self._adj[nxt])))
                        break
                else:
                    state[node] = done
                    stack.pop()
        return False

    def topological_sort(self) -> list[int]:
        """Return the vertices so that every edge points forwards."""
        if self.is_cyclic():
            raise CyclicGraphError("Graph is cyclic!!")
        visited = [False] * len(self._adj)
        finished: list[int] = []
        for start in range(len(self._adj)):
            if not visited[start]:
                finished.extend(self._postorder(start, visited))
        return finished[::-1]

    def __repr__(self) -> str:
        return f"DirectedGraph(vertex_count={len(self._adj)})"


class UndirectedGraph(_Graph):
    """An undirected graph stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        super().__init__(vertex_count)

    def add_edge(self, source: int, destination: int) -> None:
        self._check(source, destination)
        self._adj[source].append(destination)
        self._adj[destination].append(source)

    def remove_edge(self, source: int, destination: int) -> None:
        """Remove one edge between ``source`` and ``destination``."""
        self._check(source, destination)
        if destination not in self._adj[source]:
            raise GraphError("No edge exists between given nodes!!")
        self._adj[source].remove(destination)
        self._adj[destination].remove(source)

    def is_cyclic(self) -> bool:
        """Report whether the graph holds a cycle."""
        visited = [False] * len(self._adj)
        for start in range(len(self._adj)):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, -1, iter(self._adj[start]))]
            while stack:
                node, parent, neighbours = stack[-1]
                for nxt in neighbours:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, node, iter(self._adj[nxt])))
                        break
                    if nxt != parent:
                        return True
                else:
                    stack.pop()
        return False

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertex_count={len(self._adj)})"