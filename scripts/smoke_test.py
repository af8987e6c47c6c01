#!/usr/bin/env python3
"""
Smoke test: run every operation against every bundled graph.

Shortest path and max flow use the first and last hub of each graph.
Nothing is written to the log directory.
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

logging.basicConfig(level=logging.WARNING)

from routegraph.config import GRAPH_MENU_SIZE  # noqa: E402
from routegraph.data import graph_path, load_graph  # noqa: E402
from routegraph.exceptions import RouteGraphError  # noqa: E402
from routegraph.session import AnalysisSession  # noqa: E402

OPERATIONS = ["show", "shortest-path", "max-flow", "spanning-tree", "schedule", "inspection"]


def run_operation(session: AnalysisSession, operation: str) -> dict:
    """Run one operation and return a result dict."""
    vertices = session.graph.vertices()
    start_time = time.time()
    try:
        report = session.run(
            operation,
            origin=vertices[0] if vertices else None,
            destination=vertices[-1] if vertices else None,
        )
        status = "OK"
        detail = report.strip().splitlines()[0] if report.strip() else ""
    except RouteGraphError as e:
        # Expected structural refusals (e.g. Prim on a disconnected network)
        status = "REFUSED"
        detail = str(e)
    return {
        "operation": operation,
        "status": status,
        "detail": detail[:60],
        "time": time.time() - start_time,
    }


def main() -> int:
    print("=" * 90)
    print(f"SMOKE TEST: {len(OPERATIONS)} operations × {GRAPH_MENU_SIZE} graphs")
    print("=" * 90)

    failures = 0

    for index in range(1, GRAPH_MENU_SIZE + 1):
        path = graph_path(index)
        try:
            graph = load_graph(path)
        except (OSError, RouteGraphError) as e:
            print(f"\nGraph {index}: ERROR {e}")
            failures += 1
            continue

        print(f"\nGraph {index}: {graph!r}")
        print(f"{'Operation':<16} {'Status':>8} {'Time':>9}  Detail")
        print("-" * 90)

        session = AnalysisSession(graph)
        for operation in OPERATIONS:
            result = run_operation(session, operation)
            print(
                f"{result['operation']:<16} {result['status']:>8} "
                f"{result['time'] * 1000:>7.1f}ms  {result['detail']}"
            )

    print("\n" + "=" * 90)
    print("✓ Smoke test finished" if not failures else f"✗ {failures} graph(s) failed to load")
    print("=" * 90)
    return 0 if not failures else 1


if __name__ == "__main__":
    sys.exit(main())
