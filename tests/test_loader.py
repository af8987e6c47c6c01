"""
Unit tests for the network file loader and the bundled graph files.
"""

import logging

import pytest

from routegraph.config import GRAPH_MENU_SIZE, get_missing_graph_files, validate_graph_files
from routegraph.data import graph_path, load_graph, parse_graph
from routegraph.exceptions import GraphFormatError
from routegraph.graph import AdjacencyListGraph, AdjacencyMatrixGraph, Vertex


class TestParseGraph:
    """Test parse_graph."""

    def test_vertices_and_edges(self, sample_graph_text):
        """Header counts and edge attributes are read."""
        graph = parse_graph(sample_graph_text)
        assert graph.vertices() == [Vertex(1), Vertex(2), Vertex(3), Vertex(4)]
        assert graph.edge_count == 5
        assert graph.get_weight(1, 2) == 3
        assert graph.get_capacity(1, 2) == 10

    def test_dense_file_uses_matrix(self, sample_graph_text):
        """5 edges over 4 hubs is above the density threshold."""
        assert isinstance(parse_graph(sample_graph_text), AdjacencyMatrixGraph)

    def test_sparse_file_uses_list(self):
        """A sparse network is stored as a list."""
        graph = parse_graph("5 2\n1 2 1 1\n3 4 1 1\n")
        assert isinstance(graph, AdjacencyListGraph)

    def test_blank_lines_ignored(self):
        """Blank lines anywhere are skipped."""
        graph = parse_graph("\n3 2\n\n1 2 4 5\n   \n2 3 1 1\n\n")
        assert graph.edge_count == 2

    def test_trailing_lines_warn(self, caplog):
        """Lines after the announced edges are ignored with a warning."""
        with caplog.at_level(logging.WARNING):
            graph = parse_graph("3 1\n1 2 4 5\n2 3 1 1\n")
        assert graph.edge_count == 1
        assert "Ignoring 1 line(s)" in caplog.text

    def test_no_edges(self):
        """A header with zero edges is valid."""
        graph = parse_graph("3 0\n")
        assert graph.vertex_count == 3
        assert graph.edge_count == 0

    @pytest.mark.parametrize(
        "text, line_number",
        [
            ("3\n", 1),
            ("a b\n", 1),
            ("3 1\n1 2 4\n", 2),
            ("3 1\n1 2 x 1\n", 2),
            ("3 1\n1 9 4 1\n", 2),
            ("3 1\n0 2 4 1\n", 2),
            ("3 1\n1 2 4 -1\n", 2),
            ("3 2\n1 2 4 1\n", 2),
            ("-1 0\n", 1),
        ],
    )
    def test_malformed_input(self, text, line_number):
        """Malformed files raise GraphFormatError with the line number."""
        with pytest.raises(GraphFormatError) as exc_info:
            parse_graph(text)
        assert exc_info.value.line_number == line_number
        assert str(exc_info.value).startswith(f"line {line_number}:")

    def test_empty_file(self):
        """An empty file has no header."""
        with pytest.raises(GraphFormatError):
            parse_graph("   \n\n")


class TestLoadGraph:
    """Test load_graph and graph_path."""

    def test_load_from_disk(self, tmp_path, sample_graph_text):
        """Files are read from disk."""
        path = tmp_path / "network.dimacs"
        path.write_text(sample_graph_text)
        assert load_graph(path).edge_count == 5

    def test_missing_file(self, tmp_path):
        """Missing files propagate FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.dimacs")

    def test_graph_path(self, tmp_path):
        """Bundled files are numbered with two digits."""
        assert graph_path(3, tmp_path) == tmp_path / "graph03.dimacs"


class TestBundledGraphs:
    """The shipped graph files load."""

    def test_all_present(self):
        """Every menu entry has a file."""
        assert len(validate_graph_files()) == GRAPH_MENU_SIZE
        assert get_missing_graph_files() == []

    @pytest.mark.parametrize("index", range(1, GRAPH_MENU_SIZE + 1))
    def test_loads(self, data_dir, index):
        """Each bundled file parses."""
        graph = load_graph(graph_path(index, data_dir))
        assert graph.vertex_count > 0
        assert graph.edge_count > 0
