#!/usr/bin/env python3
"""
Validate the bundled graph files and the loader.

Usage:
    python scripts/validate_graphs.py
"""

import logging
import sys
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from routegraph.config import (  # noqa: E402 - must be after sys.path modification
    DATA_DIR,
    DENSITY_THRESHOLD,
    GRAPH_MENU_SIZE,
    validate_graph_files,
)
from routegraph.data import graph_path, load_graph  # noqa: E402
from routegraph.exceptions import RouteGraphError  # noqa: E402
from routegraph.graph import graph_density  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_graph_files_exist() -> bool:
    """Check that all bundled graph files exist."""
    print(f"\n=== Checking Graph Files ({DATA_DIR}) ===\n")

    all_exist = True
    for name, exists in validate_graph_files().items():
        print(f"✓ {name}" if exists else f"✗ {name}: NOT FOUND")
        if not exists:
            all_exist = False

    return all_exist


def load_and_describe() -> bool:
    """Load every graph and print its statistics."""
    print("\n=== Graph Statistics ===\n")
    print(f"{'Graph':<8} {'Vertices':>9} {'Edges':>7} {'Density':>9}  Representation")
    print("-" * 60)

    all_loaded = True
    for index in range(1, GRAPH_MENU_SIZE + 1):
        path = graph_path(index)
        try:
            graph = load_graph(path)
        except (OSError, RouteGraphError) as e:
            print(f"{index:<8} ✗ {e}")
            all_loaded = False
            continue

        density = graph_density(graph.vertex_count, graph.edge_count)
        print(
            f"{index:<8} {graph.vertex_count:>9} {graph.edge_count:>7} {density:>9.3f}  "
            f"{type(graph).__name__}"
        )

    print(f"\nDensity threshold for matrix storage: {DENSITY_THRESHOLD}")
    return all_loaded


def main() -> int:
    """Main validation routine."""
    print("=" * 60)
    print("Logistics Graph Validation")
    print("=" * 60)

    if not check_graph_files_exist():
        print("\n✗ Some graph files are missing.")
        return 1

    if not load_and_describe():
        print("\n✗ Some graph files failed to load.")
        return 1

    print("\n" + "=" * 60)
    print("✓ All graph files loaded!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
