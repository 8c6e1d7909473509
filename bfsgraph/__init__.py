"""
bfsgraph - breadth-first traversal over adjacency-list graphs.

A small library for building immutable directed graphs from neighbor
lists or edge lists and walking them in breadth-first order, plus
graph statistics and plain-text rendering helpers.
"""

from bfsgraph.graph import (
    AdjacencyGraph,
    GraphStats,
    InvalidArgument,
    breadth_first_traversal,
    compute_stats,
)

__version__ = "0.1.0"

__all__ = [
    "AdjacencyGraph",
    "GraphStats",
    "InvalidArgument",
    "breadth_first_traversal",
    "compute_stats",
]
