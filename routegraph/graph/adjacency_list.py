"""
Adjacency-list graph: each vertex maps to the list of edges leaving it.

Suited to sparse networks. Parallel edges are kept as separate entries.
"""

from __future__ import annotations

from typing import Hashable

from routegraph.exceptions import VertexNotFoundError
from routegraph.graph.base import Graph, unwrap
from routegraph.graph.model import Edge, Vertex


class AdjacencyListGraph(Graph):
    """
    Directed graph stored as `dict[Vertex, list[Edge]]`.

    Vertex and edge insertion are O(1); listing every edge is O(E).
    """

    def __init__(self) -> None:
        self._adjacency: dict[Vertex, list[Edge]] = {}

    def add_vertex(self, value: Hashable) -> Vertex:
        vertex = Vertex(unwrap(value))
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []
        return vertex

    def add_edge(
        self,
        origin: Hashable,
        destination: Hashable,
        weight: int = 1,
        capacity: int = 0,
    ) -> Edge:
        edge = Edge(
            self.find_vertex(origin),
            self.find_vertex(destination),
            weight,
            capacity,
        )
        self._adjacency[edge.origin].append(edge)
        return edge

    def remove_edge(self, edge: Edge) -> int:
        """
        Remove one occurrence of `edge` and return its position.

        Only used on private working copies; analyses never remove edges
        from a loaded network.

        Raises:
            ValueError: If the edge is not in the graph
        """
        edges = self._adjacency[self.find_vertex(edge.origin)]
        position = edges.index(edge)
        del edges[position]
        return position

    def restore_edge(self, edge: Edge, position: int) -> None:
        """Put back an edge removed with remove_edge at its old position."""
        self._adjacency[self.find_vertex(edge.origin)].insert(position, edge)

    def vertices(self) -> list[Vertex]:
        return list(self._adjacency)

    def edges(self) -> list[Edge]:
        all_edges = []
        for edges in self._adjacency.values():
            all_edges.extend(edges)
        return all_edges

    def outgoing_edges(self, vertex: Hashable) -> list[Edge]:
        return list(self._adjacency[self.find_vertex(vertex)])

    def neighbors(self, vertex: Hashable) -> list[Vertex]:
        return [edge.destination for edge in self._adjacency[self.find_vertex(vertex)]]

    def _first_edge(self, origin: Hashable, destination: Hashable) -> Edge | None:
        target = self.find_vertex(destination)
        for edge in self._adjacency[self.find_vertex(origin)]:
            if edge.destination == target:
                return edge
        return None

    def get_weight(self, origin: Hashable, destination: Hashable) -> int | None:
        edge = self._first_edge(origin, destination)
        return edge.weight if edge else None

    def get_capacity(self, origin: Hashable, destination: Hashable) -> int | None:
        edge = self._first_edge(origin, destination)
        return edge.capacity if edge else None

    def degrees(self) -> list[tuple[Vertex, int]]:
        return [(vertex, len(edges)) for vertex, edges in self._adjacency.items()]

    def find_vertex(self, value: Hashable) -> Vertex:
        vertex = Vertex(unwrap(value))
        if vertex not in self._adjacency:
            raise VertexNotFoundError(vertex.value)
        return vertex

    def has_vertex(self, value: Hashable) -> bool:
        return Vertex(unwrap(value)) in self._adjacency

    def render(self) -> str:
        lines = []
        for vertex, edges in self._adjacency.items():
            routes = "".join(
                f" -> {edge.destination} (Weight: {edge.weight} | Capacity: {edge.capacity})"
                for edge in edges
            )
            lines.append(f"Vertex {vertex}:{routes}")
        return "\n".join(lines) + "\n"
