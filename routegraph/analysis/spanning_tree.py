"""
Minimum spanning tree of the network using Prim or Kruskal.

Which algorithm runs by default depends on the representation: Prim for
adjacency lists, Kruskal for adjacency matrices. Both can be forced.

Prim grows the tree from the first vertex along outgoing edges and fails on
a network it cannot span. Kruskal treats edges as undirected and returns a
spanning forest when the network is disconnected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from routegraph.analysis.base import Analysis
from routegraph.exceptions import AnalysisError, DisconnectedGraphError
from routegraph.graph.adjacency_list import AdjacencyListGraph
from routegraph.graph.base import Graph
from routegraph.graph.model import Edge, Vertex
from routegraph.graph.utils import vertices_only_subgraph

logger = logging.getLogger(__name__)

ALGORITHMS = ("prim", "kruskal")


@dataclass
class SpanningTreeResult:
    """
    Outcome of a spanning tree computation.

    Attributes:
        algorithm: "prim" or "kruskal"
        edges: Accepted edges, in acceptance order
        vertex_count: Number of vertices in the network
        tree: Vertices-only copy of the network holding the accepted edges
    """

    algorithm: str
    edges: list[Edge] = field(default_factory=list)
    vertex_count: int = 0
    tree: Graph | None = None

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    @property
    def is_spanning(self) -> bool:
        """Whether the edges connect every vertex (a tree rather than a forest)."""
        return len(self.edges) == max(self.vertex_count - 1, 0)

    def to_report(self) -> str:
        lines = [
            f"Running {self.algorithm.capitalize()}'s algorithm...",
            "",
            "--- Minimum Spanning Tree ---",
        ]
        for edge in self.edges:
            lines.append(
                f"Origin: {edge.origin} -> Destination: {edge.destination} "
                f"| Weight: {edge.weight} | Capacity: {edge.capacity}"
            )
        lines.append(f"Total weight: {self.total_weight}")
        if not self.is_spanning:
            lines.append(
                f"Network is disconnected: spanning forest with {len(self.edges)} edges "
                f"for {self.vertex_count} vertices."
            )
        lines.append("-------------------------------------")
        return "\n".join(lines) + "\n"


class SpanningTreeAnalysis(Analysis):
    """
    Cheapest set of routes connecting every hub.
    """

    def __init__(self, graph: Graph, algorithm: str | None = None) -> None:
        """
        Initialize the analysis.

        Args:
            graph: Network to span
            algorithm: "prim", "kruskal", or None to choose from the representation

        Raises:
            AnalysisError: If the algorithm name is unknown
        """
        super().__init__(graph)
        if algorithm is None:
            algorithm = "prim" if isinstance(graph, AdjacencyListGraph) else "kruskal"
        if algorithm not in ALGORITHMS:
            raise AnalysisError(
                f"Unknown spanning tree algorithm '{algorithm}'. "
                f"Available: {', '.join(ALGORITHMS)}"
            )
        self._algorithm = algorithm

    @property
    def name(self) -> str:
        return "spanning-tree"

    @property
    def description(self) -> str:
        return "Cheapest set of routes connecting every hub (Prim / Kruskal)"

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def prim(self) -> SpanningTreeResult:
        """
        Grow the tree from the first vertex, always taking the lightest crossing edge.

        Raises:
            DisconnectedGraphError: If some vertex cannot be reached
        """
        vertices = self._graph.vertices()
        tree = vertices_only_subgraph(self._graph)
        accepted: list[Edge] = []

        if not vertices:
            return SpanningTreeResult("prim", accepted, 0, tree)

        included = {vertices[0]}

        while len(included) < len(vertices):
            lightest = None

            for vertex in vertices:
                if vertex not in included:
                    continue
                for edge in self._graph.outgoing_edges(vertex):
                    if edge.destination in included:
                        continue
                    if lightest is None or edge.weight < lightest.weight:
                        lightest = edge

            if lightest is None:
                missing = [str(v) for v in vertices if v not in included]
                raise DisconnectedGraphError(
                    "Graph is not connected; Prim cannot reach every vertex.",
                    {"unreached": missing},
                )

            included.add(lightest.destination)
            accepted.append(lightest)
            tree.add_edge(
                lightest.origin, lightest.destination, lightest.weight, lightest.capacity
            )
            logger.debug(f"Prim: accepted {lightest} (weight {lightest.weight})")

        return SpanningTreeResult("prim", accepted, len(vertices), tree)

    def kruskal(self) -> SpanningTreeResult:
        """Accept edges by ascending weight whenever they join two components."""
        vertices = self._graph.vertices()
        edges = sorted(self._graph.edges(), key=lambda edge: edge.weight)
        tree = vertices_only_subgraph(self._graph)
        component: dict[Vertex, Vertex] = {v: v for v in vertices}
        accepted: list[Edge] = []

        for edge in edges:
            if len(accepted) >= len(vertices) - 1:
                break

            origin_root = component[edge.origin]
            destination_root = component[edge.destination]
            if origin_root == destination_root:
                continue

            accepted.append(edge)
            tree.add_edge(edge.origin, edge.destination, edge.weight, edge.capacity)
            logger.debug(f"Kruskal: accepted {edge} (weight {edge.weight})")

            for vertex, root in component.items():
                if root == destination_root:
                    component[vertex] = origin_root

        return SpanningTreeResult("kruskal", accepted, len(vertices), tree)

    def run(self) -> SpanningTreeResult:
        logger.info(f"Spanning tree: running {self._algorithm}")
        if self._algorithm == "prim":
            result = self.prim()
        else:
            result = self.kruskal()
        logger.info(
            f"Spanning tree: {len(result.edges)} edges, total weight {result.total_weight}"
        )
        return result
