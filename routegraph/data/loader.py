"""
Network file loader.

Graph files are plain text:

    N M
    origin destination weight capacity
    ...             (M edge lines)

Vertex ids run from 1 to N. Blank lines are ignored anywhere in the file.
The representation (list or matrix) is chosen from the density of the
header, see graph.factory.create_graph.

Usage:
    from routegraph.data.loader import load_graph, graph_path

    graph = load_graph(graph_path(3))
"""

from __future__ import annotations

import logging
from pathlib import Path

from routegraph.config import DATA_DIR, GRAPH_FILE_TEMPLATE
from routegraph.exceptions import GraphFormatError
from routegraph.graph.base import Graph
from routegraph.graph.factory import create_graph

logger = logging.getLogger(__name__)


def _parse_ints(parts: list[str], line_number: int) -> list[int]:
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise GraphFormatError(f"expected integers, got {' '.join(parts)!r}", line_number) from None


def parse_graph(text: str) -> Graph:
    """
    Build a graph from the text of a network file.

    Args:
        text: File contents

    Returns:
        Adjacency list or matrix graph holding vertices 1..N and the M edges

    Raises:
        GraphFormatError: On a malformed header or edge line, an id out of
            range, a negative capacity, or fewer edge lines than announced
    """
    lines = [
        (number, line.split())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        raise GraphFormatError("empty graph file: missing 'N M' header")

    header_number, header = lines[0]
    if len(header) != 2:
        raise GraphFormatError("header must be 'N M'", header_number)
    vertex_count, edge_count = _parse_ints(header, header_number)
    if vertex_count < 0 or edge_count < 0:
        raise GraphFormatError("vertex and edge counts must be non-negative", header_number)

    graph = create_graph(vertex_count, edge_count)
    for value in range(1, vertex_count + 1):
        graph.add_vertex(value)

    edge_lines = lines[1:]
    if len(edge_lines) < edge_count:
        last = edge_lines[-1][0] if edge_lines else header_number
        raise GraphFormatError(
            f"expected {edge_count} edge lines, found {len(edge_lines)}", last
        )

    for number, parts in edge_lines[:edge_count]:
        if len(parts) != 4:
            raise GraphFormatError(
                "edge line must be 'origin destination weight capacity'", number
            )
        origin, destination, weight, capacity = _parse_ints(parts, number)

        for vertex in (origin, destination):
            if not 1 <= vertex <= vertex_count:
                raise GraphFormatError(
                    f"vertex {vertex} out of range 1..{vertex_count}", number
                )
        if capacity < 0:
            raise GraphFormatError(f"negative capacity {capacity}", number)

        graph.add_edge(origin, destination, weight, capacity)

    extra = len(edge_lines) - edge_count
    if extra > 0:
        logger.warning(f"Ignoring {extra} line(s) after the {edge_count} announced edges")

    logger.debug(f"Parsed {graph!r}")
    return graph


def load_graph(path: Path | str) -> Graph:
    """
    Load a network file from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        GraphFormatError: If the contents are malformed
    """
    path = Path(path)
    logger.info(f"Loading graph from {path}")
    return parse_graph(path.read_text(encoding="utf-8"))


def graph_path(index: int, data_dir: Path | None = None) -> Path:
    """Path of the bundled network file with the given 1-based index."""
    return (data_dir or DATA_DIR) / GRAPH_FILE_TEMPLATE.format(index=index)
