"""
Cross-check analyses against networkx on seeded random networks.

Skipped when networkx is not installed (pip install -e ".[test]").
"""

import random

import pytest

from routegraph.analysis import DijkstraAnalysis, EdmondsKarpAnalysis, SpanningTreeAnalysis
from routegraph.graph import AdjacencyListGraph, create_graph

nx = pytest.importorskip("networkx")

SEEDS = [3, 11, 42, 97, 1234]


def random_network(seed, vertex_count=8, edge_count=20, symmetric=False):
    """Simple directed network (no parallel edges, no loops) plus its networkx twin."""
    rng = random.Random(seed)
    pairs = [(a, b) for a in range(1, vertex_count + 1) for b in range(1, vertex_count + 1) if a != b]
    chosen = rng.sample(pairs, edge_count)
    if symmetric:
        chosen = [p for p in chosen if p[0] < p[1]]

    graph = create_graph(vertex_count, len(chosen) * (2 if symmetric else 1))
    reference = nx.Graph() if symmetric else nx.DiGraph()
    for value in range(1, vertex_count + 1):
        graph.add_vertex(value)
        reference.add_node(value)

    for a, b in chosen:
        weight = rng.randint(1, 20)
        capacity = rng.randint(0, 15)
        graph.add_edge(a, b, weight, capacity)
        if symmetric:
            graph.add_edge(b, a, weight, capacity)
        reference.add_edge(a, b, weight=weight, capacity=capacity)

    return graph, reference


@pytest.mark.parametrize("seed", SEEDS)
class TestAgainstNetworkx:
    """Results match networkx."""

    def test_shortest_path_distance(self, seed):
        """Dijkstra distances match for every reachable destination."""
        graph, reference = random_network(seed)
        lengths = nx.single_source_dijkstra_path_length(reference, 1, weight="weight")

        for destination in range(2, 9):
            result = DijkstraAnalysis(graph, 1, destination).run()
            if destination in lengths:
                assert result.distance == lengths[destination]
            else:
                assert not result.found

    def test_max_flow_value(self, seed):
        """Edmonds-Karp reaches the networkx maximum flow value."""
        graph, reference = random_network(seed)
        expected = nx.maximum_flow_value(reference, 1, 8, capacity="capacity")
        assert EdmondsKarpAnalysis(graph, 1, 8).run().max_flow == expected

    def test_spanning_forest_weight(self, seed):
        """Kruskal matches the minimum spanning forest weight."""
        graph, reference = random_network(seed, edge_count=40, symmetric=True)
        expected = sum(
            data["weight"] for _, _, data in nx.minimum_spanning_edges(reference, data=True)
        )
        result = SpanningTreeAnalysis(graph, "kruskal").run()
        assert result.total_weight == expected

    def test_prim_matches_when_connected(self, seed):
        """Prim agrees with networkx on connected symmetric networks."""
        graph, reference = random_network(seed, edge_count=40, symmetric=True)
        if not nx.is_connected(reference):
            pytest.skip("network is disconnected")

        expected = nx.minimum_spanning_tree(reference).size(weight="weight")
        listed = AdjacencyListGraph()
        for vertex in graph.vertices():
            listed.add_vertex(vertex.value)
        for edge in graph.edges():
            listed.add_edge(edge.origin, edge.destination, edge.weight, edge.capacity)

        assert SpanningTreeAnalysis(listed, "prim").run().total_weight == expected
