"""
Configuration constants for the logistics route analysis project.

All paths, thresholds, and tunable parameters are defined here.
Environment overrides are read from the process environment and from an
optional `.env` file at the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of routegraph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Directory holding the bundled network files (graph01.dimacs ... graph07.dimacs)
DATA_DIR = Path(os.environ.get("ROUTEGRAPH_DATA_DIR", PROJECT_ROOT / "data" / "graphs"))

# Directory receiving one report log per analysed graph
LOGS_DIR = Path(os.environ.get("ROUTEGRAPH_LOGS_DIR", PROJECT_ROOT / "logs"))

# File name patterns, formatted with the 1-based graph index
GRAPH_FILE_TEMPLATE = "graph{index:02d}.dimacs"
LOG_FILE_TEMPLATE = "log_graph{index:02d}.txt"

# Number of graphs offered by the interactive menu
GRAPH_MENU_SIZE = 7

# =============================================================================
# Representation Selection
# =============================================================================

# density = |E| / (|V| * (|V| - 1))
# Below the threshold an adjacency list is used, at or above it a matrix.
DENSITY_THRESHOLD = 0.30

# =============================================================================
# Hamiltonian Search
# =============================================================================

# Exact backtracking is O(n!) - only attempted up to this many vertices
HAMILTON_EXACT_VERTEX_LIMIT = 20

# Start vertices tried by the greedy (Warnsdorff) fallback above the limit
HAMILTON_HEURISTIC_MAX_STARTS = 50

# =============================================================================
# Report Configuration
# =============================================================================

# Timestamp written in front of every recorded report
REPORT_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================


def validate_graph_files() -> dict[str, bool]:
    """Check which bundled graph files exist."""
    status = {}
    for index in range(1, GRAPH_MENU_SIZE + 1):
        name = GRAPH_FILE_TEMPLATE.format(index=index)
        status[name] = (DATA_DIR / name).exists()
    return status


def get_missing_graph_files() -> list[str]:
    """Return list of missing graph file names."""
    status = validate_graph_files()
    return [name for name, exists in status.items() if not exists]
