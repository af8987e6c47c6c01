"""
Breadth-first traversal helpers.

`find_path` returns the path with the fewest edges between two vertices,
optionally restricted by a predicate on each (origin, destination) pair. It
backs the augmenting-path search of Edmonds-Karp; `reachable_vertices` backs
the connectivity checks of the Eulerian analysis.
"""

from __future__ import annotations

from collections import deque
from typing import Callable

from routegraph.graph.base import Graph
from routegraph.graph.model import Edge, Vertex

TraversalRule = Callable[[Vertex, Vertex], bool]


def find_path(
    graph: Graph,
    origin: Vertex,
    destination: Vertex,
    can_traverse: TraversalRule | None = None,
) -> list[Edge] | None:
    """
    Find the shortest path (by edge count) from origin to destination.

    Args:
        graph: Graph to search
        origin: Start vertex
        destination: Target vertex
        can_traverse: Optional rule deciding whether the pair (u, v) may be
            crossed. Defaults to any existing edge.

    Returns:
        Edges from origin to destination in travel order, an empty list when
        origin equals destination, or None if destination is unreachable
    """
    origin = graph.find_vertex(origin)
    destination = graph.find_vertex(destination)

    # BFS with parent tracking
    predecessors: dict[Vertex, Vertex | None] = {origin: None}
    queue = deque([origin])

    while queue:
        current = queue.popleft()

        if current == destination:
            return _rebuild_path(graph, predecessors, destination)

        for neighbor in graph.neighbors(current):
            if neighbor in predecessors:
                continue
            if can_traverse is not None and not can_traverse(current, neighbor):
                continue

            predecessors[neighbor] = current
            queue.append(neighbor)

    return None


def _rebuild_path(
    graph: Graph,
    predecessors: dict[Vertex, Vertex | None],
    destination: Vertex,
) -> list[Edge]:
    """Walk the predecessor chain back from destination and reverse it."""
    path = []
    current = destination

    while predecessors[current] is not None:
        parent = predecessors[current]
        path.append(
            Edge(
                parent,
                current,
                graph.get_weight(parent, current),
                graph.get_capacity(parent, current),
            )
        )
        current = parent

    path.reverse()
    return path


def reachable_vertices(
    graph: Graph,
    start: Vertex,
    can_traverse: TraversalRule | None = None,
) -> set[Vertex]:
    """Every vertex reachable from start (start included)."""
    start = graph.find_vertex(start)
    visited = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            if can_traverse is not None and not can_traverse(current, neighbor):
                continue
            visited.add(neighbor)
            queue.append(neighbor)

    return visited
