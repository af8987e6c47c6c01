"""
Maximum throughput between two hubs using Edmonds-Karp.

Edmonds-Karp is Ford-Fulkerson with breadth-first augmenting paths: each
round takes the augmenting path with the fewest edges, which bounds the
number of rounds by O(V * E).

The residual map holds one entry per ordered vertex pair. Parallel edges on
the same pair contribute the sum of their capacities to that entry, and
flow pushed through the pair is split across them in insertion order.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Hashable

from routegraph.analysis.base import Analysis
from routegraph.exceptions import AnalysisError
from routegraph.graph.adjacency_list import AdjacencyListGraph
from routegraph.graph.base import Graph, unwrap
from routegraph.graph.model import Edge, Vertex
from routegraph.graph.traversal import find_path

logger = logging.getLogger(__name__)

Pair = tuple[Vertex, Vertex]


@dataclass
class MaxFlowResult:
    """
    Outcome of a maximum flow computation.

    Attributes:
        source: Hub the flow leaves from
        sink: Hub the flow arrives at
        max_flow: Total flow value
        edge_flows: (edge, flow) for every original edge carrying positive flow
        augmentations: Number of augmenting paths used
    """

    source: Vertex
    sink: Vertex
    max_flow: int
    edge_flows: list[tuple[Edge, int]] = field(default_factory=list)
    augmentations: int = 0

    def flow_on(self, origin: Hashable, destination: Hashable) -> int:
        """Total flow carried by the edges origin -> destination."""
        origin = Vertex(unwrap(origin))
        destination = Vertex(unwrap(destination))
        return sum(
            flow
            for edge, flow in self.edge_flows
            if edge.origin == origin and edge.destination == destination
        )

    def to_report(self) -> str:
        lines = [
            "--- Maximum Flow Analysis (Edmonds-Karp) ---",
            f"Source: {self.source}, Sink: {self.sink}",
            f"Maximum total flow: {self.max_flow}",
            "",
            "Flow per original edge:",
        ]
        for edge, flow in self.edge_flows:
            lines.append(f"Edge ({edge.origin} -> {edge.destination}): Flow = {flow}")
        lines.append("")
        return "\n".join(lines) + "\n"


class EdmondsKarpAnalysis(Analysis):
    """
    Maximum flow from a source hub to a sink hub, bounded by route capacities.
    """

    def __init__(self, graph: Graph, source: Hashable, sink: Hashable) -> None:
        """
        Initialize the analysis.

        Args:
            graph: Network whose edge capacities bound the flow
            source: Hub the flow leaves from
            sink: Hub the flow must reach

        Raises:
            VertexNotFoundError: If either hub is not in the graph
            AnalysisError: If source and sink are the same hub
        """
        super().__init__(graph)
        self._source = graph.find_vertex(source)
        self._sink = graph.find_vertex(sink)

        if self._source == self._sink:
            raise AnalysisError(f"Source and sink must differ (both are {self._source})")

        self._edges: list[Edge] = graph.edges()
        self._flows: list[int] = []
        self._residual: dict[Pair, int] = {}
        self._edges_by_pair: dict[Pair, list[int]] = defaultdict(list)
        self._network: AdjacencyListGraph | None = None

    @property
    def name(self) -> str:
        return "max-flow"

    @property
    def description(self) -> str:
        return "Maximum throughput between two hubs (Edmonds-Karp)"

    def _build_residual_network(self) -> None:
        """Seed residual capacities and the private graph the BFS runs over."""
        self._flows = [0] * len(self._edges)
        self._residual = {}
        self._edges_by_pair = defaultdict(list)
        self._network = AdjacencyListGraph()

        for vertex in self._graph.vertices():
            self._network.add_vertex(vertex.value)

        for index, edge in enumerate(self._edges):
            if edge.origin == edge.destination:
                continue

            forward = (edge.origin, edge.destination)
            backward = (edge.destination, edge.origin)
            self._edges_by_pair[forward].append(index)

            for pair in (forward, backward):
                if pair not in self._residual:
                    self._residual[pair] = 0
                    self._network.add_edge(pair[0], pair[1], 1, 0)

            self._residual[forward] += edge.capacity

    def _has_residual(self, origin: Vertex, destination: Vertex) -> bool:
        return self._residual.get((origin, destination), 0) > 0

    def _bottleneck(self, path: list[Edge]) -> int:
        return min(self._residual[(edge.origin, edge.destination)] for edge in path)

    def _push(self, origin: Vertex, destination: Vertex, amount: int) -> None:
        """Update residual capacities and original-edge flows for one pair."""
        self._residual[(origin, destination)] -= amount
        self._residual[(destination, origin)] += amount

        remaining = amount

        # Forward edges first, up to each edge's capacity
        for index in self._edges_by_pair.get((origin, destination), []):
            if remaining == 0:
                break
            room = self._edges[index].capacity - self._flows[index]
            taken = min(room, remaining)
            self._flows[index] += taken
            remaining -= taken

        # Whatever is left cancels flow on the opposite edges
        for index in reversed(self._edges_by_pair.get((destination, origin), [])):
            if remaining == 0:
                break
            taken = min(self._flows[index], remaining)
            self._flows[index] -= taken
            remaining -= taken

    def run(self) -> MaxFlowResult:
        logger.info(f"Edmonds-Karp: {self._source} -> {self._sink}")
        self._build_residual_network()

        total = 0
        augmentations = 0

        while True:
            path = find_path(self._network, self._source, self._sink, self._has_residual)
            if not path:
                break

            delta = self._bottleneck(path)
            total += delta
            augmentations += 1

            pairs = [(edge.origin, edge.destination) for edge in path]
            for origin, destination in pairs:
                self._push(origin, destination, delta)

            logger.debug(
                f"Augmenting path {augmentations}: "
                f"{' -> '.join(str(p[0]) for p in pairs)} -> {self._sink} (+{delta})"
            )

        edge_flows = [
            (edge, flow) for edge, flow in zip(self._edges, self._flows) if flow > 0
        ]
        logger.info(f"Edmonds-Karp: max flow {total} after {augmentations} augmentations")
        return MaxFlowResult(self._source, self._sink, total, edge_flows, augmentations)
