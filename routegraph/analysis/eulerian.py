"""
Eulerian path / circuit analysis for directed networks.

The analysis runs in three steps:

1. Degree conditions: a circuit needs in-degree == out-degree everywhere; a
   path needs exactly one vertex with out - in = 1 (the start) and exactly
   one with in - out = 1 (the end), every other vertex balanced.
2. Connectivity: ignoring direction, every vertex touching an edge must lie
   in one component (BFS over an undirected mirror of the edges).
3. Construction of the trail, either with Hierholzer's stack walk (O(E)) or
   with Fleury's bridge-avoiding walk (O(E^2) because of the repeated BFS).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from routegraph.analysis.base import Analysis
from routegraph.exceptions import AnalysisError
from routegraph.graph.base import Graph
from routegraph.graph.model import Vertex
from routegraph.graph.traversal import reachable_vertices
from routegraph.graph.utils import copy_graph, undirected_mirror

logger = logging.getLogger(__name__)

METHODS = ("hierholzer", "fleury")


class EulerianKind(Enum):
    CIRCUIT = "circuit"
    PATH = "path"
    NONE = "none"


@dataclass
class EulerianResult:
    """
    Outcome of an Eulerian analysis.

    Attributes:
        kind: Whether a circuit, a path, or neither exists
        trail: Vertices visited, |E| + 1 of them when a trail exists
        start: First vertex of the trail
        end: Last vertex of the trail
        reason: Why no trail exists (empty when one does)
        method: Construction method used
    """

    kind: EulerianKind
    trail: list[Vertex] = field(default_factory=list)
    start: Vertex | None = None
    end: Vertex | None = None
    reason: str = ""
    method: str = "hierholzer"

    @property
    def exists(self) -> bool:
        return self.kind is not EulerianKind.NONE

    def to_report(self) -> str:
        lines = ["=== Eulerian Path / Circuit ===", ""]
        if not self.exists:
            lines.append(self.reason)
            return "\n".join(lines) + "\n"

        if self.kind is EulerianKind.CIRCUIT:
            lines.append("An Eulerian CIRCUIT exists.")
        else:
            lines.append("An Eulerian PATH exists.")
        if self.reason:
            lines.append(self.reason)
        lines.append(f"Eulerian trail ({self.method}):")
        lines.append("  " + " -> ".join(str(v) for v in self.trail))
        lines.append("")
        return "\n".join(lines) + "\n"


class EulerianAnalysis(Analysis):
    """
    Can every route be inspected exactly once in a single trip?
    """

    def __init__(self, graph: Graph, method: str = "hierholzer") -> None:
        """
        Initialize the analysis.

        Args:
            graph: Network to inspect
            method: "hierholzer" or "fleury"

        Raises:
            AnalysisError: If the method name is unknown
        """
        super().__init__(graph)
        if method not in METHODS:
            raise AnalysisError(
                f"Unknown Eulerian method '{method}'. Available: {', '.join(METHODS)}"
            )
        self._method = method

    @property
    def name(self) -> str:
        return "eulerian"

    @property
    def description(self) -> str:
        return "Single trip using every route exactly once (Eulerian path / circuit)"

    def degrees(self) -> tuple[dict[Vertex, int], dict[Vertex, int]]:
        """In-degree and out-degree of every vertex, counted from the edge list."""
        in_degree = {v: 0 for v in self._graph.vertices()}
        out_degree = {v: 0 for v in self._graph.vertices()}
        for edge in self._graph.edges():
            out_degree[edge.origin] += 1
            in_degree[edge.destination] += 1
        return in_degree, out_degree

    def is_connected_ignoring_direction(self) -> bool:
        """Whether every vertex with an edge lies in one undirected component."""
        in_degree, out_degree = self.degrees()
        active = [v for v in self._graph.vertices() if in_degree[v] + out_degree[v] > 0]
        if not active:
            return True

        reached = reachable_vertices(undirected_mirror(self._graph), active[0])
        return all(v in reached for v in active)

    def run(self) -> EulerianResult:
        vertices = self._graph.vertices()
        if not vertices:
            return EulerianResult(
                EulerianKind.NONE, reason="Empty graph. No Eulerian path or circuit."
            )

        in_degree, out_degree = self.degrees()

        starts, ends, unbalanced = [], [], []
        for vertex in vertices:
            difference = out_degree[vertex] - in_degree[vertex]
            if difference == 1:
                starts.append(vertex)
            elif difference == -1:
                ends.append(vertex)
            elif difference != 0:
                unbalanced.append(vertex)

        non_isolated = [v for v in vertices if in_degree[v] + out_degree[v] > 0]
        if not non_isolated:
            return EulerianResult(
                EulerianKind.CIRCUIT,
                trail=[vertices[0]],
                start=vertices[0],
                end=vertices[0],
                reason="Graph has no edges: trivial Eulerian circuit.",
                method=self._method,
            )

        if not self.is_connected_ignoring_direction():
            return EulerianResult(
                EulerianKind.NONE,
                reason="Edges are not connected. No Eulerian path or circuit exists.",
            )

        if not unbalanced and not starts and not ends:
            kind = EulerianKind.CIRCUIT
            start = non_isolated[0]
        elif not unbalanced and len(starts) == 1 and len(ends) == 1:
            kind = EulerianKind.PATH
            start = starts[0]
        else:
            return EulerianResult(
                EulerianKind.NONE,
                reason=(
                    "Degree conditions fail "
                    f"({len(starts)} start candidates, {len(ends)} end candidates, "
                    f"{len(unbalanced)} other unbalanced vertices). "
                    "No Eulerian path or circuit exists."
                ),
            )

        logger.info(f"Eulerian {kind.value} from {start} using {self._method}")
        if self._method == "fleury":
            trail = self.fleury(start)
        else:
            trail = self.hierholzer(start)

        return EulerianResult(kind, trail, trail[0], trail[-1], method=self._method)

    def hierholzer(self, start: Vertex) -> list[Vertex]:
        """
        Build the trail with an explicit stack.

        Follows unused edges while possible; a vertex with no unused edge left
        is popped onto the trail, which is reversed at the end.
        """
        pending: dict[Vertex, list[Vertex]] = {}
        for vertex in self._graph.vertices():
            # Reversed so that pop() yields edges in their stored order
            pending[vertex] = list(reversed(self._graph.neighbors(vertex)))

        stack: list[Vertex] = []
        trail: list[Vertex] = []
        current = start

        while True:
            if pending[current]:
                stack.append(current)
                current = pending[current].pop()
            else:
                trail.append(current)
                if not stack:
                    break
                current = stack.pop()

        trail.reverse()
        return trail

    def fleury(self, start: Vertex) -> list[Vertex]:
        """
        Build the trail edge by edge, avoiding bridges whenever possible.

        An edge u -> v is a bridge when, after removing it, fewer vertices are
        reachable from v than were reachable from u before. A bridge is only
        taken when it is the last edge leaving u.
        """
        remaining = copy_graph(self._graph)
        trail = [start]
        current = start

        while True:
            options = remaining.outgoing_edges(current)
            if not options:
                break

            chosen = options[0]
            if len(options) > 1:
                before = len(reachable_vertices(remaining, current))
                for edge in options:
                    position = remaining.remove_edge(edge)
                    after = len(reachable_vertices(remaining, edge.destination))
                    remaining.restore_edge(edge, position)
                    if after >= before:
                        chosen = edge
                        break

            remaining.remove_edge(chosen)
            current = chosen.destination
            trail.append(current)

        return trail
