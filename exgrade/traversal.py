"""An undirected graph over numbered vertices with BFS and DFS."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph with vertices 0 to n - 1."""

    def __init__(self, n: int) -> None:
        self.adj: list[list[int]] = [[] for _ in range(n)]

    def add_edge(self, src: int, dest: int) -> None:
        """Connect two vertices in both directions."""
        self.adj[src].append(dest)
        self.adj[dest].append(src)

    def bfs(self, start: int) -> list[int]:
        """Return vertices reachable from start in breadth-first order."""
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self.adj[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices reachable from start in depth-first preorder."""
        visited: set[int] = set()
        order = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            stack.extend(n for n in reversed(self.adj[vertex]) if n not in visited)
        return order