#!/usr/bin/env python3
"""
Logistics Route Analysis CLI - run one analysis on a network, or the menu.

Usage:
    python scripts/analyze.py --interactive
    python scripts/analyze.py --index 1 --operation show
    python scripts/analyze.py --index 1 --operation shortest-path --origin 1 --destination 5
    python scripts/analyze.py --index 2 --operation max-flow --origin 1 --destination 6
    python scripts/analyze.py --graph my_network.dimacs --operation spanning-tree --algorithm kruskal
    python scripts/analyze.py --index 4 --operation inspection --euler-method fleury

Operations:
    show           - List every hub and its outgoing routes
    shortest-path  - Cheapest route between two hubs (Dijkstra)
    max-flow       - Maximum throughput between two hubs (Edmonds-Karp)
    spanning-tree  - Cheapest set of routes connecting every hub (Prim / Kruskal)
    schedule       - Conflict-free maintenance rounds (Welsh-Powell)
    inspection     - Single trip over every route / every hub (Eulerian, Hamiltonian)

Graph files:
    First line "N M", then M lines "origin destination weight capacity".
    Bundled graphs live in data/graphs/graph01.dimacs ... graph07.dimacs.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from routegraph.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL, LOGS_DIR  # noqa: E402
from routegraph.data import ReportRecorder, graph_path, load_graph  # noqa: E402
from routegraph.exceptions import RouteGraphError  # noqa: E402
from routegraph.menu import InteractiveMenu  # noqa: E402
from routegraph.session import OPERATIONS, AnalysisSession  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Analyze a logistics network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--graph",
        type=Path,
        help="Path to a graph file",
    )
    source.add_argument(
        "--index",
        type=int,
        help="Index of a bundled graph (1-7)",
    )
    parser.add_argument(
        "--operation",
        type=str,
        default="show",
        choices=list(OPERATIONS),
        help="Operation to run (default: show)",
    )
    parser.add_argument(
        "--origin",
        type=int,
        default=None,
        help="Origin hub for shortest-path / source hub for max-flow",
    )
    parser.add_argument(
        "--destination",
        type=int,
        default=None,
        help="Destination hub for shortest-path / sink hub for max-flow",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=None,
        choices=["prim", "kruskal"],
        help="Force the spanning tree algorithm (default: chosen by representation)",
    )
    parser.add_argument(
        "--euler-method",
        type=str,
        default="hierholzer",
        choices=["hierholzer", "fleury"],
        help="Eulerian trail construction (default: hierholzer)",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=LOGS_DIR,
        help=f"Directory for report logs (default: {LOGS_DIR})",
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Print reports without appending them to log files",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Start the interactive menu",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if not args.interactive and args.graph is None and args.index is None:
        parser.error("one of --graph, --index or --interactive is required")
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    if args.interactive:
        menu = InteractiveMenu(recorder=ReportRecorder(args.log_dir, echo=False))
        try:
            return menu.run()
        except KeyboardInterrupt:
            print("\n\nInterrupted by user")
            return 130

    path = args.graph if args.graph is not None else graph_path(args.index)
    try:
        graph = load_graph(path)
    except (OSError, RouteGraphError) as e:
        print(f"Error loading graph: {e}", file=sys.stderr)
        return 1

    # Log files are named after the bundled graph index
    recorder = None
    graph_index = args.index
    if not args.no_log and graph_index is not None:
        recorder = ReportRecorder(args.log_dir, echo=False)

    session = AnalysisSession(graph, graph_index, recorder)

    try:
        report = session.run(
            args.operation,
            origin=args.origin,
            destination=args.destination,
            algorithm=args.algorithm,
            euler_method=args.euler_method,
        )
    except RouteGraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report, end="")
    if recorder is not None:
        print(f"\nReport appended to {recorder.log_path(graph_index)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
