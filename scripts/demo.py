#!/usr/bin/env python3
"""
Breadth-first traversal demo on the built-in sample graph.

Prints the graph's adjacency lists, the BFS order from a start node,
the sample value array, and graph statistics.

Usage:
    python scripts/demo.py
    python scripts/demo.py --start 2
    python scripts/demo.py --start 3 --verbose

Environment (or .env at the project root):
    BFSGRAPH_START_NODE  Default for --start
    LOG_LEVEL            DEBUG, INFO, WARNING, ERROR (default: INFO)
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

from dotenv import load_dotenv  # noqa: E402

from bfsgraph import config  # noqa: E402 - must be after sys.path modification
from bfsgraph.data import load_sample_graph, load_sample_values  # noqa: E402
from bfsgraph.graph import (  # noqa: E402
    InvalidArgument,
    breadth_first_traversal,
    compute_stats,
    format_adjacency,
    format_sequence,
)

load_dotenv(config.ENV_FILE_PATH)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run breadth-first traversal on the sample graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    # String default so argparse parses and reports a bad environment value
    parser.add_argument(
        "--start",
        type=int,
        default=config.get_start_node_setting(),
        help=f"Start node index (default: ${config.START_NODE_ENV} or {config.DEFAULT_START_NODE})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging and extra statistics",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else config.get_log_level()
    logging.basicConfig(
        level=log_level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
    )

    graph = load_sample_graph()

    print("=== Graph Adjacency List Test ===")
    print("Graph representation:")
    for line in format_adjacency(graph):
        print(line)

    print("\n=== BFS Traversal Test ===")
    try:
        order = breadth_first_traversal(graph, args.start)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"BFS order: {format_sequence(order)}")

    print("\n=== Array Operations Test ===")
    print(f"Array elements: {format_sequence(load_sample_values())}")

    print("\n=== Graph Statistics ===")
    stats = compute_stats(graph)
    print(f"Total edges: {stats.edge_count}")
    print(f"Nodes: {stats.node_count}")

    if args.verbose:
        for key, value in stats.as_dict().items():
            if key not in ("nodes", "edges"):
                print(f"  {key}: {value}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
