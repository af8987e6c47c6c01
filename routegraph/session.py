"""
Analysis session: runs the logistics operations on one loaded network.

A session ties a graph to its menu index and, optionally, to a recorder so
every report is echoed and appended to the graph's log file.

Usage:
    from routegraph.data import ReportRecorder, graph_path, load_graph
    from routegraph.session import AnalysisSession

    session = AnalysisSession(load_graph(graph_path(1)), 1, ReportRecorder())
    session.shortest_path(1, 5)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable

from routegraph.analysis import (
    DijkstraAnalysis,
    EdmondsKarpAnalysis,
    EulerianAnalysis,
    HamiltonianAnalysis,
    SpanningTreeAnalysis,
    WelshPowellAnalysis,
)
from routegraph.exceptions import AnalysisError
from routegraph.graph.utils import conflict_graph

if TYPE_CHECKING:
    from routegraph.data.recorder import ReportRecorder
    from routegraph.graph.base import Graph

logger = logging.getLogger(__name__)

OPERATIONS = (
    "show",
    "shortest-path",
    "max-flow",
    "spanning-tree",
    "schedule",
    "inspection",
)


class AnalysisSession:
    """
    Runs operations against a single network and records their reports.

    Attributes:
        graph: The loaded network
        graph_index: 1-based index used to name the log file (None disables logging)
        recorder: Where reports go; None keeps them in memory only
        reports: Every report produced in this session, in order
    """

    def __init__(
        self,
        graph: Graph,
        graph_index: int | None = None,
        recorder: ReportRecorder | None = None,
    ) -> None:
        self.graph = graph
        self.graph_index = graph_index
        self.recorder = recorder
        self.reports: list[str] = []

    def _emit(self, text: str) -> str:
        self.reports.append(text)
        if self.recorder is not None and self.graph_index is not None:
            self.recorder.record(self.graph_index, text)
        return text

    def show_graph(self) -> str:
        """Listing of every hub and its outgoing routes."""
        return self._emit(self.graph.render())

    def shortest_path(self, origin: Hashable, destination: Hashable) -> str:
        return self._emit(DijkstraAnalysis(self.graph, origin, destination).execute())

    def max_flow(self, source: Hashable, sink: Hashable) -> str:
        return self._emit(EdmondsKarpAnalysis(self.graph, source, sink).execute())

    def spanning_tree(self, algorithm: str | None = None) -> str:
        return self._emit(SpanningTreeAnalysis(self.graph, algorithm).execute())

    def maintenance_schedule(self) -> str:
        """Welsh-Powell rounds over the conflict graph of the network."""
        conflicts = conflict_graph(self.graph)
        report = WelshPowellAnalysis(conflicts).execute()
        return self._emit(
            f" -> Conflicts mapped: {conflicts.vertex_count} task nodes.\n{report}"
        )

    def inspection_routes(self, euler_method: str = "hierholzer") -> str:
        """
        Route-based (Eulerian) and hub-based (Hamiltonian) inspection trips.

        Both reports are recorded separately; the combined text is returned.
        """
        routes = self._emit(
            f"\nRoute inspection\n{EulerianAnalysis(self.graph, euler_method).execute()}"
        )
        hubs = self._emit(f"\nHub inspection\n{HamiltonianAnalysis(self.graph).execute()}")
        return routes + hubs

    def run(self, operation: str, **kwargs) -> str:
        """
        Run an operation by name.

        Args:
            operation: One of OPERATIONS
            **kwargs: Operation arguments (origin/destination, algorithm, euler_method)

        Raises:
            AnalysisError: If the operation is unknown or lacks required arguments
        """
        logger.info(f"Running '{operation}' on {self.graph!r}")

        if operation == "show":
            return self.show_graph()
        if operation in ("shortest-path", "max-flow"):
            origin = kwargs.get("origin")
            destination = kwargs.get("destination")
            if origin is None or destination is None:
                raise AnalysisError(f"Operation '{operation}' needs an origin and a destination")
            if operation == "shortest-path":
                return self.shortest_path(origin, destination)
            return self.max_flow(origin, destination)
        if operation == "spanning-tree":
            return self.spanning_tree(kwargs.get("algorithm"))
        if operation == "schedule":
            return self.maintenance_schedule()
        if operation == "inspection":
            return self.inspection_routes(kwargs.get("euler_method") or "hierholzer")

        raise AnalysisError(
            f"Unknown operation '{operation}'. Available: {', '.join(OPERATIONS)}"
        )
