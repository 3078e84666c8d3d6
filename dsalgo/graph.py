"""An undirected graph stored as adjacency lists, with DFS, BFS and shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

MAX_VERTICES = 100


class Graph:
    """An undirected graph on vertices ``0 .. num_vertices - 1``.

    Each adjacency list keeps its most recently added neighbour first.
    """

    def __init__(self, num_vertices: int) -> None:
        if not 0 <= num_vertices <= MAX_VERTICES:
            raise ValueError(
                f"num_vertices must be between 0 and {MAX_VERTICES}, got {num_vertices}"
            )
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect *src* and *dest* in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].insert(0, dest)
        self._adjacency[dest].insert(0, src)

    def neighbors(self, vertex: int) -> list[int]:
        """The neighbours of *vertex*, newest edge first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def dfs_recursive(self, start: int) -> list[int]:
        """Vertices in the order a recursive depth-first search visits them."""
        self._check(start)
        visited: set[int] = set()
        order: list[int] = []

        def visit(vertex: int) -> None:
            visited.add(vertex)
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visit(neighbour)

        visit(start)
        return order

    def dfs_iterative(self, start: int) -> list[int]:
        """Vertices in the order a stack-based depth-first search visits them."""
        self._check(start)
        visited: set[int] = set()
        order: list[int] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            stack.extend(n for n in self._adjacency[vertex] if n not in visited)
        return order

    def _bfs_tree(self, start: int) -> Iterator[tuple[int, Optional[int]]]:
        visited = {start}
        queue: deque[int] = deque([start])
        yield start, None
        while queue:
            vertex = queue.popleft()
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
                    yield neighbour, vertex

    def bfs(self, start: int) -> list[int]:
        """Vertices in breadth-first order from *start*."""
        self._check(start)
        visited = {start}
        queue: deque[int] = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def shortest_path(self, start: int, end: int) -> Optional[list[int]]:
        """The fewest-edge path from *start* to *end*, or None if unreachable.

        The distance is ``len(path) - 1``.
        """
        self._check(start)
        self._check(end)
        parents: dict[int, Optional[int]] = {}
        for vertex, parent in self._bfs_tree(start):
            parents[vertex] = parent
            if vertex == end:
                break
        if end not in parents:
            return None
        path: list[int] = []
        current: Optional[int] = end
        while current is not None:
            path.append(current)
            current = parents[current]
        path.reverse()
        return path

    def __str__(self) -> str:
        lines = []
        for vertex, neighbours in enumerate(self._adjacency):
            chain = "".join(f"{n} -> " for n in neighbours)
            lines.append(f"頂点 {vertex}: {chain}NULL")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices})"