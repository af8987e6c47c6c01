"""
Hamiltonian path / cycle search: visit every hub exactly once.

The problem is NP-complete, so two strategies are used:

- Exact backtracking for networks up to `exact_limit` vertices. Neighbours
  are tried in ascending out-degree order, which tends to reach dead ends
  early and prune the search.
- Warnsdorff's greedy rule above the limit: always move to the unvisited
  neighbour with the fewest unvisited onward options. Fast, but it can miss
  a solution that exists, so a negative answer is not proof.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from routegraph.analysis.base import Analysis
from routegraph.config import HAMILTON_EXACT_VERTEX_LIMIT, HAMILTON_HEURISTIC_MAX_STARTS
from routegraph.graph.base import Graph
from routegraph.graph.model import Vertex

logger = logging.getLogger(__name__)


class HamiltonianKind(Enum):
    CYCLE = "cycle"
    PATH = "path"
    NONE = "none"


@dataclass
class HamiltonianResult:
    """
    Outcome of a Hamiltonian search.

    Attributes:
        kind: Cycle, path, or nothing found
        path: Vertices in visiting order (each exactly once)
        exact: False when the greedy heuristic produced the answer
    """

    kind: HamiltonianKind
    path: list[Vertex] = field(default_factory=list)
    exact: bool = True

    @property
    def found(self) -> bool:
        return self.kind is not HamiltonianKind.NONE

    def to_report(self) -> str:
        lines = ["=== Hamiltonian Path / Cycle ===", ""]
        if not self.exact:
            lines.append(
                "Large network: greedy heuristic used (approximate result, "
                "a negative answer is not proof)."
            )

        if not self.found:
            lines.append("No Hamiltonian path was found.")
        else:
            if self.kind is HamiltonianKind.CYCLE:
                lines.append("A Hamiltonian CYCLE was found.")
                route = self.path + self.path[:1]
            else:
                lines.append("A Hamiltonian PATH was found.")
                route = self.path
            lines.append("  " + " -> ".join(str(v) for v in route))

        lines.append("")
        return "\n".join(lines) + "\n"


class HamiltonianAnalysis(Analysis):
    """
    Can a single trip visit every hub exactly once?
    """

    def __init__(
        self,
        graph: Graph,
        exact_limit: int = HAMILTON_EXACT_VERTEX_LIMIT,
        max_starts: int = HAMILTON_HEURISTIC_MAX_STARTS,
        prefer_cycle: bool = False,
    ) -> None:
        """
        Initialize the analysis.

        Args:
            graph: Network to inspect
            exact_limit: Largest vertex count solved by exhaustive backtracking
            max_starts: Start vertices tried by the greedy heuristic
            prefer_cycle: Search for a closed tour before accepting an open path
        """
        super().__init__(graph)
        self.exact_limit = exact_limit
        self.max_starts = max_starts
        self.prefer_cycle = prefer_cycle

        self._out_degree: dict[Vertex, int] = {}
        self._successors: dict[Vertex, list[Vertex]] = {}

    @property
    def name(self) -> str:
        return "hamiltonian"

    @property
    def description(self) -> str:
        return "Single trip visiting every hub exactly once (Hamiltonian path / cycle)"

    def _prepare(self) -> None:
        """Distinct successors of each vertex, self-loops dropped, by ascending degree."""
        self._out_degree = dict(self._graph.degrees())
        self._successors = {}
        for vertex in self._graph.vertices():
            distinct = []
            for neighbor in self._graph.neighbors(vertex):
                if neighbor != vertex and neighbor not in distinct:
                    distinct.append(neighbor)
            distinct.sort(key=lambda v: self._out_degree[v])
            self._successors[vertex] = distinct

    def _closes(self, path: list[Vertex]) -> bool:
        return len(path) > 1 and path[0] in self._successors[path[-1]]

    def _backtrack(
        self,
        path: list[Vertex],
        visited: set[Vertex],
        total: int,
        require_cycle: bool,
    ) -> bool:
        if len(path) == total:
            return not require_cycle or self._closes(path)

        for neighbor in self._successors[path[-1]]:
            if neighbor in visited:
                continue
            path.append(neighbor)
            visited.add(neighbor)
            if self._backtrack(path, visited, total, require_cycle):
                return True
            path.pop()
            visited.remove(neighbor)

        return False

    def _search_exact(self, require_cycle: bool) -> list[Vertex] | None:
        vertices = self._graph.vertices()
        for start in vertices:
            path = [start]
            if self._backtrack(path, {start}, len(vertices), require_cycle):
                return path
        return None

    def _greedy_from(self, start: Vertex, total: int) -> list[Vertex] | None:
        path = [start]
        visited = {start}

        while len(path) < total:
            best = None
            best_options = None
            for neighbor in self._successors[path[-1]]:
                if neighbor in visited:
                    continue
                options = sum(1 for v in self._successors[neighbor] if v not in visited)
                if best is None or options < best_options:
                    best = neighbor
                    best_options = options
            if best is None:
                return None
            path.append(best)
            visited.add(best)

        return path

    def _search_greedy(self) -> list[Vertex] | None:
        vertices = self._graph.vertices()
        fallback = None
        for start in vertices[: self.max_starts]:
            path = self._greedy_from(start, len(vertices))
            if path is None:
                continue
            if not self.prefer_cycle or self._closes(path):
                return path
            if fallback is None:
                fallback = path
        return fallback

    def _classify(self, path: list[Vertex] | None, exact: bool) -> HamiltonianResult:
        if path is None:
            return HamiltonianResult(HamiltonianKind.NONE, exact=exact)
        kind = HamiltonianKind.CYCLE if self._closes(path) else HamiltonianKind.PATH
        return HamiltonianResult(kind, path, exact)

    def run(self) -> HamiltonianResult:
        vertices = self._graph.vertices()
        if not vertices:
            return HamiltonianResult(HamiltonianKind.NONE)

        self._prepare()

        if len(vertices) > self.exact_limit:
            logger.info(
                f"Hamiltonian: {len(vertices)} vertices exceed exact limit "
                f"{self.exact_limit}, using greedy heuristic"
            )
            return self._classify(self._search_greedy(), exact=False)

        logger.info(f"Hamiltonian: exact backtracking over {len(vertices)} vertices")
        path = None
        if self.prefer_cycle:
            path = self._search_exact(require_cycle=True)
        if path is None:
            path = self._search_exact(require_cycle=False)
        return self._classify(path, exact=True)
