"""
Analysis base class shared by every network analysis.

Each analysis computes a result object with `run()`; `execute()` returns the
plain-text report for that result, ready to be recorded or printed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from routegraph.graph.base import Graph


class Report(Protocol):
    """Anything that can render itself as a plain-text report."""

    def to_report(self) -> str: ...


class Analysis(ABC):
    """
    Abstract base class for network analyses.

    Analyses never modify the graph they were given; any structure they need
    to mutate is built privately.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the analysis (e.g., 'dijkstra', 'max-flow')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the analysis answers."""
        ...

    @abstractmethod
    def run(self) -> Any:
        """
        Run the analysis.

        Returns:
            A result dataclass exposing to_report()

        Raises:
            RouteGraphError: On structural problems with the graph or parameters
        """
        ...

    def execute(self) -> str:
        """Run the analysis and return its text report."""
        result: Report = self.run()
        return result.to_report()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, graph={self._graph!r})"
