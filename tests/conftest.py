"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from routegraph.graph import AdjacencyListGraph, AdjacencyMatrixGraph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the bundled graph directory."""
    return project_root / "data" / "graphs"


def build_graph(representation: str, vertices, edges):
    """
    Build a graph of the given representation.

    Edges are (origin, destination) or (origin, destination, weight, capacity).
    """
    if representation == "list":
        graph = AdjacencyListGraph()
    else:
        graph = AdjacencyMatrixGraph(len(vertices))

    for value in vertices:
        graph.add_vertex(value)
    for edge in edges:
        graph.add_edge(*edge)
    return graph


@pytest.fixture(params=["list", "matrix"])
def make_graph(request):
    """Graph builder, run once per representation."""

    def factory(vertices, edges=()):
        return build_graph(request.param, vertices, edges)

    factory.representation = request.param
    return factory


@pytest.fixture
def triangle(make_graph):
    """Three hubs: 1->2 (w5), 1->3 (w10), 2->3 (w3)."""
    return make_graph([1, 2, 3], [(1, 2, 5, 0), (1, 3, 10, 0), (2, 3, 3, 0)])


@pytest.fixture
def four_cycle(make_graph):
    """Directed cycle 1->2->3->4->1, all weights 1."""
    return make_graph([1, 2, 3, 4], [(1, 2), (2, 3), (3, 4), (4, 1)])


@pytest.fixture
def flow_triangle(make_graph):
    """Source 1, sink 3: 1->2 (cap 10), 2->3 (cap 4), 1->3 (cap 5)."""
    return make_graph([1, 2, 3], [(1, 2, 1, 10), (2, 3, 1, 4), (1, 3, 1, 5)])


@pytest.fixture
def star(make_graph):
    """Hub 1 with routes to 2, 3 and 4."""
    return make_graph([1, 2, 3, 4], [(1, 2, 5, 10), (1, 3, 3, 8), (1, 4, 4, 6)])


@pytest.fixture
def sample_graph_text() -> str:
    """Small network file in the bundled format."""
    return "4 5\n1 2 3 10\n1 3 1 5\n3 2 1 4\n2 4 2 8\n3 4 6 3\n"
