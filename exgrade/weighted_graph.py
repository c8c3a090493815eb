"""An undirected graph with weighted edges between named nodes."""

from __future__ import annotations


class NodeNotInGraph(KeyError):
    """Raised when a node that is not in the graph is accessed."""

    def __init__(self, message: str = "accessing a node that is not in the graph") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UndirectedGraph:
    """An undirected graph stored as an adjacency table of weighted neighbours."""

    def __init__(self) -> None:
        self.adjacency_table: dict[str, list[tuple[str, int]]] = {}

    def add_node(self, node: str) -> bool:
        """Add a node; return False if it was already present."""
        if node in self.adjacency_table:
            return False
        self.adjacency_table[node] = []
        return True

    def add_edge(self, edge: tuple[str, str, int]) -> None:
        """Add a weighted edge, creating its end nodes as needed."""
        source, dest, weight = edge
        self.add_node(source)
        self.add_node(dest)
        self.adjacency_table[source].append((dest, weight))
        self.adjacency_table[dest].append((source, weight))

    def contains(self, node: str) -> bool:
        """Tell whether the node is in the graph."""
        return node in self.adjacency_table

    def nodes(self) -> set[str]:
        """Return the set of nodes."""
        return set(self.adjacency_table)

    def edges(self) -> list[tuple[str, str, int]]:
        """Return every directed (from, to, weight) entry of the table."""
        return [
            (source, dest, weight)
            for source, neighbours in self.adjacency_table.items()
            for dest, weight in neighbours
        ]

    def __contains__(self, node: str) -> bool:
        return self.contains(node)