"""
Graph representation module.

Provides the network model and traversal helpers:
- Vertex, Edge: value types for hubs and routes
- Graph: capability contract shared by both representations
- AdjacencyListGraph: sparse storage
- AdjacencyMatrixGraph: dense storage (numpy)
- create_graph: density-based choice between the two
"""

from routegraph.graph.adjacency_list import AdjacencyListGraph
from routegraph.graph.adjacency_matrix import AdjacencyMatrixGraph
from routegraph.graph.base import Graph
from routegraph.graph.factory import create_graph, graph_density
from routegraph.graph.model import Edge, Vertex
from routegraph.graph.traversal import find_path, reachable_vertices
from routegraph.graph.utils import (
    conflict_graph,
    copy_graph,
    undirected_mirror,
    vertices_only_subgraph,
)

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "create_graph",
    "graph_density",
    "find_path",
    "reachable_vertices",
    "conflict_graph",
    "copy_graph",
    "undirected_mirror",
    "vertices_only_subgraph",
]
