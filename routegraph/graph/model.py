"""
Vertex and edge value types shared by every graph representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable


@dataclass(frozen=True)
class Vertex:
    """
    A hub in the logistics network.

    Equality and hashing come from the wrapped value, so two vertices built
    from the same id are interchangeable as dict keys.

    Attributes:
        value: Identifier of the hub (usually an int id from the graph file)
    """

    value: Hashable

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Edge:
    """
    A directed route between two hubs.

    Attributes:
        origin: Vertex the route leaves from
        destination: Vertex the route arrives at
        weight: Cost of using the route
        capacity: Maximum amount that can flow along the route
    """

    origin: Vertex
    destination: Vertex
    weight: int = 1
    capacity: int = 0

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError(f"Edge {self} has negative capacity {self.capacity}")

    @property
    def endpoints(self) -> tuple[Vertex, Vertex]:
        return (self.origin, self.destination)

    def shares_endpoint(self, other: Edge) -> bool:
        """Whether the two routes touch a common hub."""
        return bool(set(self.endpoints) & set(other.endpoints))

    def __str__(self) -> str:
        return f"{self.origin} -> {self.destination}"
