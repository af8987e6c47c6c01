"""
Data module.

Reads network files and records analysis reports.

Usage:
    from routegraph.data import load_graph, graph_path, ReportRecorder

    graph = load_graph(graph_path(1))
    ReportRecorder().record(1, graph.render())
"""

from routegraph.data.loader import graph_path, load_graph, parse_graph
from routegraph.data.recorder import ReportRecorder

__all__ = ["graph_path", "load_graph", "parse_graph", "ReportRecorder"]
