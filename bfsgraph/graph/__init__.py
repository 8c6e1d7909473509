"""
Graph algorithms module.

Provides the adjacency-list graph and the algorithms run over it:
- AdjacencyGraph: Immutable, validated directed graph
- breadth_first_traversal: BFS visitation order from a start node
- compute_stats: Node, edge, and degree statistics
- format_adjacency / format_sequence: Plain-text rendering
"""

from bfsgraph.graph.adjacency import AdjacencyGraph
from bfsgraph.graph.errors import InvalidArgument
from bfsgraph.graph.render import format_adjacency, format_sequence
from bfsgraph.graph.stats import GraphStats, compute_stats
from bfsgraph.graph.traversal import breadth_first_traversal

__all__ = [
    "AdjacencyGraph",
    "InvalidArgument",
    "breadth_first_traversal",
    "GraphStats",
    "compute_stats",
    "format_adjacency",
    "format_sequence",
]
