"""
Maintenance scheduling via Welsh-Powell colouring of the conflict graph.

Each vertex of the conflict graph is a route; linked routes share a hub and
cannot be closed in the same maintenance round. Colours are rounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from routegraph.analysis.base import Analysis
from routegraph.graph.base import Graph
from routegraph.graph.model import Vertex
from routegraph.graph.utils import conflict_graph

logger = logging.getLogger(__name__)


@dataclass
class ColoringResult:
    """
    Round assigned to every route.

    Attributes:
        assignment: Route vertex -> round number (starting at 1)
    """

    assignment: dict[Vertex, int] = field(default_factory=dict)

    @property
    def round_count(self) -> int:
        return max(self.assignment.values(), default=0)

    @property
    def rounds(self) -> dict[int, list[Vertex]]:
        """Routes grouped by round, rounds in ascending order."""
        grouped: dict[int, list[Vertex]] = {}
        for vertex, round_number in self.assignment.items():
            grouped.setdefault(round_number, []).append(vertex)
        return dict(sorted(grouped.items()))

    def to_report(self) -> str:
        lines = ["=== Maintenance Schedule (Welsh-Powell) ===", ""]
        if not self.assignment:
            lines.append("No routes to schedule.")
        for round_number, routes in self.rounds.items():
            lines.append(f"--- Round {round_number} ---")
            for route in routes:
                lines.append(f"Maintenance on route: {route}")
            lines.append("")
        lines.append(f"Total rounds: {self.round_count}")
        return "\n".join(lines) + "\n"


class WelshPowellAnalysis(Analysis):
    """
    Greedy colouring that visits vertices by descending degree.

    Expects a conflict graph (see graph.utils.conflict_graph), whose links
    are stored in both directions, so out-degree equals degree.
    """

    @property
    def name(self) -> str:
        return "schedule"

    @property
    def description(self) -> str:
        return "Fewest maintenance rounds with no two conflicting routes together"

    def order(self) -> list[Vertex]:
        """Vertices by descending degree; ties keep insertion order."""
        degrees = self._graph.degrees()
        return [vertex for vertex, _ in sorted(degrees, key=lambda item: -item[1])]

    def run(self) -> ColoringResult:
        ordered = self.order()
        assignment: dict[Vertex, int] = {}
        round_number = 0

        while len(assignment) < len(ordered):
            round_number += 1
            in_round: list[Vertex] = []

            for vertex in ordered:
                if vertex in assignment:
                    continue
                neighbors = self._graph.neighbors(vertex)
                if any(member in neighbors for member in in_round):
                    continue
                assignment[vertex] = round_number
                in_round.append(vertex)

            logger.debug(f"Welsh-Powell: round {round_number} takes {len(in_round)} routes")

        logger.info(f"Welsh-Powell: {len(ordered)} routes in {round_number} rounds")
        return ColoringResult(assignment)


def schedule_graph(graph: Graph) -> WelshPowellAnalysis:
    """Welsh-Powell analysis over the conflict graph of a network."""
    return WelshPowellAnalysis(conflict_graph(graph))
