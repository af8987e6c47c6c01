"""
Builders for graphs derived from a loaded network.

None of these mutate the source graph; each returns a new structure that
an analysis is free to populate or modify.
"""

from __future__ import annotations

from routegraph.exceptions import UnknownRepresentationError
from routegraph.graph.adjacency_list import AdjacencyListGraph
from routegraph.graph.adjacency_matrix import AdjacencyMatrixGraph
from routegraph.graph.base import Graph


def vertices_only_subgraph(graph: Graph) -> Graph:
    """
    Copy the vertices of a graph, without any edge, into the same representation.

    Raises:
        UnknownRepresentationError: If the graph is not a list or matrix graph
    """
    if isinstance(graph, AdjacencyListGraph):
        subgraph = AdjacencyListGraph()
    elif isinstance(graph, AdjacencyMatrixGraph):
        subgraph = AdjacencyMatrixGraph(graph.vertex_count)
    else:
        raise UnknownRepresentationError(
            f"Unknown graph representation: {type(graph).__name__}"
        )

    for vertex in graph.vertices():
        subgraph.add_vertex(vertex.value)

    return subgraph


def copy_graph(graph: Graph) -> AdjacencyListGraph:
    """Mutable adjacency-list copy holding every vertex and edge of `graph`."""
    copy = AdjacencyListGraph()
    for vertex in graph.vertices():
        copy.add_vertex(vertex.value)
    for edge in graph.edges():
        copy.add_edge(edge.origin, edge.destination, edge.weight, edge.capacity)
    return copy


def undirected_mirror(graph: Graph) -> AdjacencyListGraph:
    """Adjacency list holding every edge of `graph` in both directions."""
    mirror = AdjacencyListGraph()
    for vertex in graph.vertices():
        mirror.add_vertex(vertex.value)
    for edge in graph.edges():
        mirror.add_edge(edge.origin, edge.destination, edge.weight, edge.capacity)
        mirror.add_edge(edge.destination, edge.origin, edge.weight, edge.capacity)
    return mirror


def route_labels(graph: Graph) -> list[str]:
    """
    One label per edge, "origin-destination".

    Parallel edges get a running suffix ("1-2", "1-2#2", ...) so that every
    edge keeps its own label.
    """
    labels = []
    seen: dict[str, int] = {}
    for edge in graph.edges():
        label = f"{edge.origin}-{edge.destination}"
        seen[label] = seen.get(label, 0) + 1
        if seen[label] > 1:
            label = f"{label}#{seen[label]}"
        labels.append(label)
    return labels


def conflict_graph(graph: Graph) -> AdjacencyMatrixGraph:
    """
    Build the conflict (line) graph of a network.

    Every route of the network becomes a vertex; two vertices are linked in
    both directions when their routes share at least one hub, meaning the
    two routes cannot be closed for maintenance at the same time.

    Args:
        graph: The logistics network

    Returns:
        Matrix graph whose vertices are route labels (see route_labels)
    """
    edges = graph.edges()
    labels = route_labels(graph)
    conflicts = AdjacencyMatrixGraph(len(edges))

    for label in labels:
        conflicts.add_vertex(label)

    for i in range(len(edges)):
        for j in range(i + 1, len(edges)):
            if edges[i].shares_endpoint(edges[j]):
                conflicts.add_edge(labels[i], labels[j])
                conflicts.add_edge(labels[j], labels[i])

    return conflicts
