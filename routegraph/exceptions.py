"""
Custom exceptions for the routegraph package.

Structural problems (missing vertices, unknown representations, a spanning
tree requested on a disconnected network) raise one of these. Expected
negative outcomes such as "no path exists" are reported in analysis results
instead.
"""


class RouteGraphError(Exception):
    """Base exception class for routegraph errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class VertexNotFoundError(RouteGraphError):
    """Raised when a vertex value is not present in the graph."""

    def __init__(self, value):
        super().__init__(f"Vertex {value!r} does not exist in the graph.", {"value": value})
        self.value = value


class UnknownRepresentationError(RouteGraphError):
    """Raised when a graph is neither an adjacency list nor an adjacency matrix."""
    pass


class CapacityExceededError(RouteGraphError):
    """Raised when an adjacency matrix is asked to hold more vertices than it was sized for."""
    pass


class DisconnectedGraphError(RouteGraphError):
    """Raised when a spanning tree cannot reach every vertex."""
    pass


class NegativeWeightError(RouteGraphError):
    """Raised when Dijkstra is given an edge with negative weight."""
    pass


class GraphFormatError(RouteGraphError):
    """Raised when a graph file cannot be parsed."""

    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message, {"line_number": line_number})
        self.line_number = line_number


class AnalysisError(RouteGraphError):
    """Raised when an analysis is configured with invalid parameters."""
    pass
