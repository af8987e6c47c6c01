"""
Adjacency-matrix graph backed by numpy arrays.

Suited to dense networks: weight and capacity of any ordered pair are read in
O(1). The number of vertices is fixed when the graph is created.
"""

from __future__ import annotations

import logging
from typing import Hashable

import numpy as np

from routegraph.exceptions import CapacityExceededError, VertexNotFoundError
from routegraph.graph.base import Graph, unwrap
from routegraph.graph.model import Edge, Vertex

logger = logging.getLogger(__name__)


class AdjacencyMatrixGraph(Graph):
    """
    Directed graph stored as V x V weight and capacity matrices.

    Rows and columns follow vertex insertion order. A separate boolean matrix
    marks which pairs hold an edge, so a zero-weight route is still a route.
    Only one edge is kept per ordered pair; adding a second one overwrites it.

    Attributes:
        max_vertices: Number of vertices the matrices were sized for
    """

    def __init__(self, max_vertices: int) -> None:
        """
        Initialize an empty matrix graph.

        Args:
            max_vertices: Fixed vertex capacity of the matrices
        """
        if max_vertices < 0:
            raise ValueError(f"max_vertices must be non-negative, got {max_vertices}")
        self.max_vertices = max_vertices
        self._vertices: list[Vertex] = []
        self._weights = np.zeros((max_vertices, max_vertices), dtype=np.int64)
        self._capacities = np.zeros((max_vertices, max_vertices), dtype=np.int64)
        self._present = np.zeros((max_vertices, max_vertices), dtype=bool)

    def _index_of(self, value: Hashable) -> int:
        """Position of a vertex in the matrices (linear scan)."""
        try:
            return self._vertices.index(Vertex(unwrap(value)))
        except ValueError:
            raise VertexNotFoundError(unwrap(value)) from None

    def add_vertex(self, value: Hashable) -> Vertex:
        vertex = Vertex(unwrap(value))
        if vertex in self._vertices:
            return vertex
        if len(self._vertices) >= self.max_vertices:
            raise CapacityExceededError(
                f"Matrix graph is full ({self.max_vertices} vertices); cannot add {vertex}",
                {"max_vertices": self.max_vertices},
            )
        self._vertices.append(vertex)
        return vertex

    def add_edge(
        self,
        origin: Hashable,
        destination: Hashable,
        weight: int = 1,
        capacity: int = 0,
    ) -> Edge:
        i = self._index_of(origin)
        j = self._index_of(destination)
        edge = Edge(self._vertices[i], self._vertices[j], weight, capacity)

        if self._present[i, j]:
            logger.warning(f"Overwriting existing edge {edge} in adjacency matrix")

        self._weights[i, j] = weight
        self._capacities[i, j] = capacity
        self._present[i, j] = True
        return edge

    def _edge_at(self, i: int, j: int) -> Edge:
        return Edge(
            self._vertices[i],
            self._vertices[j],
            int(self._weights[i, j]),
            int(self._capacities[i, j]),
        )

    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    def edges(self) -> list[Edge]:
        n = len(self._vertices)
        rows, cols = np.nonzero(self._present[:n, :n])
        return [self._edge_at(int(i), int(j)) for i, j in zip(rows, cols)]

    def _row(self, vertex: Hashable) -> tuple[int, np.ndarray]:
        i = self._index_of(vertex)
        n = len(self._vertices)
        return i, np.flatnonzero(self._present[i, :n])

    def outgoing_edges(self, vertex: Hashable) -> list[Edge]:
        i, columns = self._row(vertex)
        return [self._edge_at(i, int(j)) for j in columns]

    def neighbors(self, vertex: Hashable) -> list[Vertex]:
        _, columns = self._row(vertex)
        return [self._vertices[int(j)] for j in columns]

    def get_weight(self, origin: Hashable, destination: Hashable) -> int | None:
        i = self._index_of(origin)
        j = self._index_of(destination)
        if not self._present[i, j]:
            return None
        return int(self._weights[i, j])

    def get_capacity(self, origin: Hashable, destination: Hashable) -> int | None:
        i = self._index_of(origin)
        j = self._index_of(destination)
        if not self._present[i, j]:
            return None
        return int(self._capacities[i, j])

    def degrees(self) -> list[tuple[Vertex, int]]:
        n = len(self._vertices)
        out_degrees = self._present[:n, :n].sum(axis=1)
        return [(vertex, int(out_degrees[i])) for i, vertex in enumerate(self._vertices)]

    def find_vertex(self, value: Hashable) -> Vertex:
        return self._vertices[self._index_of(value)]

    def has_vertex(self, value: Hashable) -> bool:
        return Vertex(unwrap(value)) in self._vertices

    def render(self) -> str:
        lines = []
        for vertex in self._vertices:
            routes = "".join(
                f" -> {edge.destination} (Weight: {edge.weight} | Capacity: {edge.capacity})"
                for edge in self.outgoing_edges(vertex)
            )
            lines.append(f"Vertex {vertex}:{routes}")
        return "\n".join(lines) + "\n"
