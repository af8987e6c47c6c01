"""
Analysis module.

Provides the network analyses:
- DijkstraAnalysis: cheapest route between two hubs
- EdmondsKarpAnalysis: maximum flow between two hubs
- SpanningTreeAnalysis: minimum spanning tree (Prim / Kruskal)
- WelshPowellAnalysis: maintenance rounds over the conflict graph
- EulerianAnalysis: trip using every route once (Hierholzer / Fleury)
- HamiltonianAnalysis: trip visiting every hub once
"""

from routegraph.analysis.base import Analysis
from routegraph.analysis.coloring import ColoringResult, WelshPowellAnalysis, schedule_graph
from routegraph.analysis.eulerian import EulerianAnalysis, EulerianKind, EulerianResult
from routegraph.analysis.hamiltonian import (
    HamiltonianAnalysis,
    HamiltonianKind,
    HamiltonianResult,
)
from routegraph.analysis.max_flow import EdmondsKarpAnalysis, MaxFlowResult
from routegraph.analysis.shortest_path import DijkstraAnalysis, ShortestPathResult
from routegraph.analysis.spanning_tree import SpanningTreeAnalysis, SpanningTreeResult
from routegraph.exceptions import AnalysisError
from routegraph.graph.base import Graph

__all__ = [
    "Analysis",
    "DijkstraAnalysis",
    "ShortestPathResult",
    "EdmondsKarpAnalysis",
    "MaxFlowResult",
    "SpanningTreeAnalysis",
    "SpanningTreeResult",
    "WelshPowellAnalysis",
    "ColoringResult",
    "schedule_graph",
    "EulerianAnalysis",
    "EulerianKind",
    "EulerianResult",
    "HamiltonianAnalysis",
    "HamiltonianKind",
    "HamiltonianResult",
    "get_analysis",
]


def get_analysis(name: str, graph: Graph, **kwargs) -> Analysis:
    """
    Get an analysis by name.

    Args:
        name: Analysis identifier (dijkstra, max-flow, spanning-tree, schedule,
            eulerian, hamiltonian)
        graph: Network to analyze
        **kwargs: Additional arguments passed to the analysis constructor
            (e.g., origin/destination, source/sink, algorithm, method)

    Returns:
        Instantiated analysis

    Raises:
        AnalysisError: If analysis name is unknown
    """
    analyses = {
        "dijkstra": DijkstraAnalysis,
        "max-flow": EdmondsKarpAnalysis,
        "spanning-tree": SpanningTreeAnalysis,
        "eulerian": EulerianAnalysis,
        "hamiltonian": HamiltonianAnalysis,
    }

    # Scheduling runs on the conflict graph, not on the network itself
    if name == "schedule":
        return schedule_graph(graph)

    if name not in analyses:
        available = ", ".join([*analyses.keys(), "schedule"])
        raise AnalysisError(f"Unknown analysis '{name}'. Available: {available}")

    return analyses[name](graph, **kwargs)
