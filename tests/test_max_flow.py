"""
Unit tests for Edmonds-Karp maximum flow analysis.
"""

from collections import defaultdict

import pytest

from routegraph.analysis import EdmondsKarpAnalysis
from routegraph.exceptions import AnalysisError
from routegraph.graph import AdjacencyListGraph, Vertex


def assert_valid_flow(graph, result):
    """Capacity respected, conservation at inner hubs, source outflow = max flow."""
    balance = defaultdict(int)
    for edge, flow in result.edge_flows:
        assert 0 < flow <= edge.capacity
        balance[edge.origin] -= flow
        balance[edge.destination] += flow

    for vertex in graph.vertices():
        if vertex in (result.source, result.sink):
            continue
        assert balance[vertex] == 0

    assert -balance[result.source] == result.max_flow
    assert balance[result.sink] == result.max_flow


class TestEdmondsKarp:
    """Test EdmondsKarpAnalysis."""

    def test_two_routes(self, flow_triangle):
        """4 via 1-2-3 plus 5 via 1-3."""
        result = EdmondsKarpAnalysis(flow_triangle, 1, 3).run()
        assert result.max_flow == 9
        assert result.flow_on(1, 3) == 5
        assert result.flow_on(1, 2) == 4
        assert result.flow_on(2, 3) == 4
        assert_valid_flow(flow_triangle, result)

    def test_report_text(self, flow_triangle):
        """The report lists the total and per-edge flow."""
        report = EdmondsKarpAnalysis(flow_triangle, 1, 3).execute()
        assert "Maximum total flow: 9" in report
        assert "Edge (1 -> 3): Flow = 5" in report

    def test_classic_network(self, make_graph):
        """Six-hub textbook network with a cross edge needing cancellation."""
        graph = make_graph(
            [1, 2, 3, 4, 5, 6],
            [
                (1, 2, 1, 16),
                (1, 3, 1, 13),
                (2, 4, 1, 12),
                (3, 2, 1, 4),
                (3, 5, 1, 14),
                (4, 3, 1, 9),
                (4, 6, 1, 20),
                (5, 4, 1, 7),
                (5, 6, 1, 4),
            ],
        )
        result = EdmondsKarpAnalysis(graph, 1, 6).run()
        assert result.max_flow == 23
        assert_valid_flow(graph, result)

    def test_reverse_residual_is_used(self, make_graph):
        """Flow has to be rerouted through a reverse residual edge."""
        # First augmenting path is 1-2-3-6; the second must cancel 2->3
        graph = make_graph(
            [1, 2, 3, 4, 5, 6],
            [
                (1, 2, 1, 1),
                (2, 3, 1, 1),
                (3, 6, 1, 1),
                (1, 4, 1, 1),
                (4, 3, 1, 1),
                (2, 5, 1, 1),
                (5, 6, 1, 1),
            ],
        )
        result = EdmondsKarpAnalysis(graph, 1, 6).run()
        assert result.max_flow == 2
        assert result.augmentations == 2
        assert result.flow_on(2, 3) == 0
        assert_valid_flow(graph, result)

    def test_sink_unreachable(self, flow_triangle):
        """No route from the sink side gives zero flow."""
        result = EdmondsKarpAnalysis(flow_triangle, 3, 1).run()
        assert result.max_flow == 0
        assert result.edge_flows == []
        assert result.augmentations == 0

    def test_zero_capacity_edges_carry_nothing(self, make_graph):
        """Edges without capacity never carry flow."""
        graph = make_graph([1, 2], [(1, 2, 1, 0)])
        assert EdmondsKarpAnalysis(graph, 1, 2).run().max_flow == 0

    def test_parallel_edges_sum_capacity(self):
        """Parallel routes add their capacities and split the flow."""
        graph = AdjacencyListGraph()
        for value in (1, 2):
            graph.add_vertex(value)
        graph.add_edge(1, 2, 1, 3)
        graph.add_edge(1, 2, 1, 4)

        result = EdmondsKarpAnalysis(graph, 1, 2).run()
        assert result.max_flow == 7
        flows = sorted(flow for _, flow in result.edge_flows)
        assert flows == [3, 4]
        assert_valid_flow(graph, result)

    def test_antiparallel_edges(self, make_graph):
        """Routes in both directions between two hubs are handled."""
        graph = make_graph([1, 2, 3], [(1, 2, 1, 5), (2, 1, 1, 5), (2, 3, 1, 3)])
        result = EdmondsKarpAnalysis(graph, 1, 3).run()
        assert result.max_flow == 3
        assert_valid_flow(graph, result)

    def test_source_equals_sink_rejected(self, flow_triangle):
        """Source and sink must differ."""
        with pytest.raises(AnalysisError):
            EdmondsKarpAnalysis(flow_triangle, 1, 1)

    def test_graph_not_modified(self, flow_triangle):
        """The analysis works on a private residual network."""
        before = set(flow_triangle.edges())
        EdmondsKarpAnalysis(flow_triangle, 1, 3).run()
        assert set(flow_triangle.edges()) == before

    def test_result_endpoints(self, flow_triangle):
        """Source and sink are reported as vertices."""
        result = EdmondsKarpAnalysis(flow_triangle, 1, 3).run()
        assert result.source == Vertex(1)
        assert result.sink == Vertex(3)
