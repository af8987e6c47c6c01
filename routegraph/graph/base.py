"""
Graph base class defining the capabilities every representation offers.

Analyses only talk to this contract, so they run unchanged on an adjacency
list or an adjacency matrix.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable

from routegraph.graph.model import Edge, Vertex


class Graph(ABC):
    """
    Abstract base class for directed, weighted, capacitated graphs.

    Methods taking a vertex accept either a `Vertex` or the raw value it wraps.
    """

    @abstractmethod
    def add_vertex(self, value: Hashable) -> Vertex:
        """
        Add a vertex, or return the existing one holding an equal value.

        Args:
            value: Identifier of the hub

        Returns:
            The vertex stored in the graph
        """
        ...

    @abstractmethod
    def add_edge(
        self,
        origin: Hashable,
        destination: Hashable,
        weight: int = 1,
        capacity: int = 0,
    ) -> Edge:
        """
        Add a directed edge between two existing vertices.

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph
        """
        ...

    @abstractmethod
    def vertices(self) -> list[Vertex]:
        """All vertices, in insertion order."""
        ...

    @abstractmethod
    def edges(self) -> list[Edge]:
        """All edges."""
        ...

    @abstractmethod
    def outgoing_edges(self, vertex: Hashable) -> list[Edge]:
        """Edges leaving `vertex`."""
        ...

    @abstractmethod
    def neighbors(self, vertex: Hashable) -> list[Vertex]:
        """Destinations of the edges leaving `vertex`, one entry per edge."""
        ...

    @abstractmethod
    def get_weight(self, origin: Hashable, destination: Hashable) -> int | None:
        """Weight of the edge origin -> destination, or None if there is none."""
        ...

    @abstractmethod
    def get_capacity(self, origin: Hashable, destination: Hashable) -> int | None:
        """Capacity of the edge origin -> destination, or None if there is none."""
        ...

    @abstractmethod
    def degrees(self) -> list[tuple[Vertex, int]]:
        """(vertex, out-degree) pairs for every vertex."""
        ...

    @abstractmethod
    def find_vertex(self, value: Hashable) -> Vertex:
        """
        Look up the stored vertex for a value.

        Raises:
            VertexNotFoundError: If no vertex holds the value
        """
        ...

    @abstractmethod
    def has_vertex(self, value: Hashable) -> bool:
        ...

    @abstractmethod
    def render(self) -> str:
        """Text listing of every vertex followed by its outgoing routes."""
        ...

    @property
    def vertex_count(self) -> int:
        return len(self.vertices())

    @property
    def edge_count(self) -> int:
        return len(self.edges())

    def __contains__(self, value: Hashable) -> bool:
        return self.has_vertex(value)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(vertices={self.vertex_count}, edges={self.edge_count})"
        )


def unwrap(value: Hashable) -> Hashable:
    """Return the raw value of a vertex, or the value itself."""
    if isinstance(value, Vertex):
        return value.value
    return value
