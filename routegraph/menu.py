"""
Interactive console menu: pick a bundled network, then run operations on it.

Input and output functions are injectable so the loop can be driven from
tests with scripted answers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from routegraph.config import DATA_DIR, GRAPH_MENU_SIZE
from routegraph.data.loader import graph_path, load_graph
from routegraph.data.recorder import ReportRecorder
from routegraph.exceptions import RouteGraphError
from routegraph.graph.base import Graph
from routegraph.graph.model import Vertex
from routegraph.session import AnalysisSession

logger = logging.getLogger(__name__)

OPERATION_MENU = [
    ("1", "Cheapest route"),
    ("2", "Maximum throughput"),
    ("3", "Network expansion (spanning tree)"),
    ("4", "Conflict-free maintenance schedule"),
    ("5", "Single inspection trip"),
]


class InteractiveMenu:
    """
    Graph selection loop wrapping an operation loop.

    Graphs 1..GRAPH_MENU_SIZE are offered; 0 quits. Inside a graph, operations
    1-5 run analyses and 0 goes back to graph selection.
    """

    def __init__(
        self,
        recorder: ReportRecorder | None = None,
        data_dir: Path = DATA_DIR,
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[..., None] = print,
    ) -> None:
        self.recorder = recorder if recorder is not None else ReportRecorder(echo=False)
        self.data_dir = Path(data_dir)
        self._input = input_fn
        self._print = print_fn

    def _ask(self, prompt: str) -> str | None:
        """Read one answer, None when input is exhausted."""
        try:
            return self._input(prompt).strip()
        except EOFError:
            return None

    def _header(self, title: str) -> None:
        self._print(f"\n========== {title} ==========")

    def _show(self, text: str) -> None:
        # The recorder only writes to file here, the menu owns the console
        self._print(text, end="" if text.endswith("\n") else "\n")

    def ask_vertex(self, graph: Graph, role: str) -> Vertex | None:
        """
        Prompt until an existing vertex id is entered.

        Returns:
            The vertex, or None when the user types 'skip' (or input ends)
        """
        while True:
            answer = self._ask(f"Enter the {role} vertex id (or 'skip'): ")
            if answer is None or answer.lower() == "skip":
                return None
            try:
                value = int(answer)
            except ValueError:
                self._print("[Error] Enter a valid integer.")
                continue
            if graph.has_vertex(value):
                return graph.find_vertex(value)
            self._print(f"[Error] Vertex {value} does not exist in the graph.")

    def run(self) -> int:
        """Run the menu until the user quits. Returns an exit code."""
        self._print("=== Logistics Route Optimization ===")

        while True:
            self._header("Graph Selection")
            self._print("Choose a graph to analyze:")
            for index in range(1, GRAPH_MENU_SIZE + 1):
                self._print(f"{index}) Graph {index}")
            self._print("0) Quit")

            choice = self._ask("\nOption: ")
            if choice is None or choice == "0":
                self._print("Exiting...")
                return 0

            if not choice.isdigit() or not 1 <= int(choice) <= GRAPH_MENU_SIZE:
                self._print(
                    f"Invalid option. Choose a number from 1 to {GRAPH_MENU_SIZE} or 0 to quit."
                )
                continue

            index = int(choice)
            try:
                graph = load_graph(graph_path(index, self.data_dir))
            except (OSError, RouteGraphError) as e:
                self._print(f"Error loading graph: {e}")
                continue

            session = AnalysisSession(graph, index, self.recorder)
            self._show(session.show_graph())
            if not self.operation_loop(session):
                self._print("Exiting...")
                return 0

    def operation_loop(self, session: AnalysisSession) -> bool:
        """
        Run operations on one graph.

        Returns:
            False when input ran out and the menu should stop
        """
        while True:
            self._header(f"Operations - Graph {session.graph_index}")
            self._print("Choose an operation:")
            for key, label in OPERATION_MENU:
                self._print(f"{key}) {label}")
            self._print("0) Back to graph selection")

            choice = self._ask("\nOption: ")
            if choice is None:
                return False
            if choice == "0":
                return True

            try:
                self.dispatch(session, choice)
            except RouteGraphError as e:
                logger.debug(f"Operation {choice} failed: {e}")
                self._print(f"[Error] {e}")

            again = self._ask("\nRun another operation on this graph? (Y/N): ")
            if again is None:
                return False
            if again.upper() != "Y":
                return True

    def dispatch(self, session: AnalysisSession, choice: str) -> None:
        graph = session.graph

        if choice in ("1", "2"):
            origin = self.ask_vertex(graph, "origin")
            destination = self.ask_vertex(graph, "destination") if origin is not None else None
            if origin is None or destination is None:
                return
            if choice == "1":
                self._show(session.shortest_path(origin, destination))
            else:
                self._show(session.max_flow(origin, destination))
        elif choice == "3":
            self._show(session.spanning_tree())
        elif choice == "4":
            self._show(session.maintenance_schedule())
        elif choice == "5":
            self._show(session.inspection_routes())
        else:
            self._print("Invalid option. Choose one of the listed operations.")
