"""
Pick a storage representation for a network from its edge density.
"""

from __future__ import annotations

import logging

from routegraph.config import DENSITY_THRESHOLD
from routegraph.graph.adjacency_list import AdjacencyListGraph
from routegraph.graph.adjacency_matrix import AdjacencyMatrixGraph
from routegraph.graph.base import Graph

logger = logging.getLogger(__name__)


def graph_density(vertex_count: int, edge_count: int) -> float:
    """
    Ratio of edges to the maximum number of directed edges, |E| / (|V|(|V|-1)).

    Returns 0.0 for graphs with fewer than two vertices.
    """
    if vertex_count < 2:
        return 0.0
    return edge_count / (vertex_count * (vertex_count - 1))


def create_graph(
    vertex_count: int,
    edge_count: int,
    threshold: float = DENSITY_THRESHOLD,
) -> Graph:
    """
    Create an empty graph suited to the expected size.

    Args:
        vertex_count: Number of vertices that will be added
        edge_count: Number of edges that will be added
        threshold: Density at or above which a matrix is used

    Returns:
        AdjacencyListGraph for sparse networks, AdjacencyMatrixGraph for dense ones
    """
    density = graph_density(vertex_count, edge_count)

    if density < threshold:
        logger.debug(f"Density {density:.3f} < {threshold}: using adjacency list")
        return AdjacencyListGraph()

    logger.debug(f"Density {density:.3f} >= {threshold}: using adjacency matrix")
    return AdjacencyMatrixGraph(vertex_count)
