"""
Cheapest route between two hubs using Dijkstra's algorithm.

The next vertex to settle is chosen by a linear scan over the unvisited set
rather than a heap, which keeps the implementation simple for the network
sizes this tool handles (O(V^2 + E)).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable

from routegraph.analysis.base import Analysis
from routegraph.exceptions import NegativeWeightError
from routegraph.graph.base import Graph
from routegraph.graph.model import Vertex

logger = logging.getLogger(__name__)


@dataclass
class ShortestPathResult:
    """
    Outcome of a shortest path query.

    Attributes:
        origin: Start hub
        destination: Target hub
        distance: Total weight of the cheapest path, None if unreachable
        path: Hubs from origin to destination (empty if unreachable)
    """

    origin: Vertex
    destination: Vertex
    distance: int | None
    path: list[Vertex] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.distance is not None

    def to_report(self) -> str:
        if not self.found:
            return f"No path was found from {self.origin} to {self.destination}.\n"

        return (
            f"Shortest path from {self.origin} to {self.destination}:\n"
            f"Total distance: {self.distance}\n"
            f"Path: {' - '.join(str(v) for v in self.path)}.\n"
        )


class DijkstraAnalysis(Analysis):
    """
    Single-pair shortest path over non-negative edge weights.

    Negative weights are rejected up front: Dijkstra settles each vertex
    once, so a negative edge would make the result undefined.
    """

    def __init__(self, graph: Graph, origin: Hashable, destination: Hashable) -> None:
        """
        Initialize the analysis.

        Args:
            graph: Network to search
            origin: Start hub (vertex or raw id)
            destination: Target hub (vertex or raw id)

        Raises:
            VertexNotFoundError: If either hub is not in the graph
        """
        super().__init__(graph)
        self._origin = graph.find_vertex(origin)
        self._destination = graph.find_vertex(destination)

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Cheapest route between two hubs (Dijkstra)"

    def _check_weights(self) -> None:
        negative = [edge for edge in self._graph.edges() if edge.weight < 0]
        if negative:
            raise NegativeWeightError(
                f"Dijkstra requires non-negative weights; edge {negative[0]} "
                f"has weight {negative[0].weight}",
                {"edges": [str(edge) for edge in negative]},
            )

    @staticmethod
    def _closest(unvisited: list[Vertex], distance: dict[Vertex, int | None]) -> Vertex | None:
        """Unvisited vertex with the smallest known distance, None if none is reached."""
        closest = None
        for vertex in unvisited:
            if distance[vertex] is None:
                continue
            if closest is None or distance[vertex] < distance[closest]:
                closest = vertex
        return closest

    def _search(self) -> tuple[dict[Vertex, int | None], dict[Vertex, Vertex | None]]:
        vertices = self._graph.vertices()
        distance: dict[Vertex, int | None] = {v: None for v in vertices}
        predecessor: dict[Vertex, Vertex | None] = {v: None for v in vertices}
        distance[self._origin] = 0

        unvisited = list(vertices)

        while unvisited:
            current = self._closest(unvisited, distance)
            if current is None:
                # Remaining vertices are unreachable
                break

            unvisited.remove(current)

            for edge in self._graph.outgoing_edges(current):
                neighbor = edge.destination
                if neighbor not in unvisited:
                    continue

                candidate = distance[current] + edge.weight
                if distance[neighbor] is None or candidate < distance[neighbor]:
                    distance[neighbor] = candidate
                    predecessor[neighbor] = current

        return distance, predecessor

    def run(self) -> ShortestPathResult:
        self._check_weights()
        logger.info(f"Dijkstra: {self._origin} -> {self._destination}")

        distance, predecessor = self._search()
        total = distance[self._destination]

        if total is None:
            logger.info(f"Dijkstra: {self._destination} unreachable from {self._origin}")
            return ShortestPathResult(self._origin, self._destination, None)

        path = []
        current = self._destination
        while current is not None:
            path.append(current)
            current = predecessor[current]
        path.reverse()

        logger.info(f"Dijkstra: distance {total} via {' -> '.join(str(v) for v in path)}")
        return ShortestPathResult(self._origin, self._destination, total, path)
