"""
Plain-text rendering of graphs and index sequences.
"""

from __future__ import annotations

from collections.abc import Iterable

from bfsgraph.graph.adjacency import AdjacencyGraph


def format_sequence(values: Iterable[object], sep: str = " ") -> str:
    """Join values with sep, e.g. [0, 1, 4] -> "0 1 4"."""
    return sep.join(str(v) for v in values)


def format_adjacency(graph: AdjacencyGraph) -> list[str]:
    """
    Render one line per node as "Node i: n1 n2 ...".

    Nodes without outgoing edges render as "Node i: ".
    """
    return [
        f"Node {idx}: {format_sequence(graph.neighbors(idx))}"
        for idx in range(graph.node_count)
    ]
