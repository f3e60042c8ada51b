"""Adjacency-map graph storage.

Implements the Graph protocol from costar.core.types with two nested
dicts, one for outgoing and one for incoming edges. Dict insertion
order makes vertex and neighbor iteration stable for a given build order.
"""

from typing import Generic

from costar.core.types import E, V


class AdjacencyMapGraph(Generic[V, E]):
    """Directed graph with at most one label per ordered vertex pair."""

    def __init__(self) -> None:
        self._out: dict[V, dict[V, E]] = {}
        self._in: dict[V, dict[V, E]] = {}

    def insert_vertex(self, v: V) -> None:
        """Add a vertex. Inserting an existing vertex is a no-op."""
        if v not in self._out:
            self._out[v] = {}
            self._in[v] = {}

    def insert_directed(self, u: V, v: V, label: E) -> None:
        """Add or relabel the edge u -> v, inserting missing endpoints."""
        self.insert_vertex(u)
        self.insert_vertex(v)
        self._out[u][v] = label
        self._in[v][u] = label

    def insert_undirected(self, u: V, v: V, label: E) -> None:
        """Add or relabel u -> v and v -> u with the same label."""
        self.insert_directed(u, v, label)
        self.insert_directed(v, u, label)

    def has_vertex(self, v: V) -> bool:
        return v in self._out

    def vertices(self) -> list[V]:
        return list(self._out)

    def out_neighbors(self, v: V) -> list[V]:
        return list(self._out.get(v, ()))

    def in_neighbors(self, v: V) -> list[V]:
        return list(self._in.get(v, ()))

    def get_label(self, u: V, v: V) -> E | None:
        """Return the label of u -> v, or None when there is no such edge."""
        return self._out.get(u, {}).get(v)

    def out_degree(self, v: V) -> int:
        return len(self._out.get(v, ()))

    def in_degree(self, v: V) -> int:
        return len(self._in.get(v, ()))

    def num_vertices(self) -> int:
        return len(self._out)

    def num_edges(self) -> int:
        """Count directed edges; an undirected edge counts twice."""
        return sum(len(targets) for targets in self._out.values())

    def __len__(self) -> int:
        return len(self._out)

    def __contains__(self, v: object) -> bool:
        return v in self._out

    def __repr__(self) -> str:
        return f"AdjacencyMapGraph(vertices={self.num_vertices()}, edges={self.num_edges()})"
