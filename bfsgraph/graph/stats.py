"""
Degree and size statistics for adjacency-list graphs.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from bfsgraph.graph.adjacency import AdjacencyGraph


@dataclass(frozen=True, eq=False)
class GraphStats:
    """
    Summary statistics of a directed graph.

    Attributes:
        node_count: Number of nodes
        edge_count: Number of directed edges (parallel edges counted separately)
        self_loop_count: Edges whose source and target are the same node
        sink_count: Nodes without outgoing edges
        max_out_degree: Largest out-degree, 0 for an empty graph
        max_in_degree: Largest in-degree, 0 for an empty graph
        out_degrees: Out-degree per node
        in_degrees: In-degree per node
    """

    node_count: int
    edge_count: int
    self_loop_count: int
    sink_count: int
    max_out_degree: int
    max_in_degree: int
    out_degrees: np.ndarray
    in_degrees: np.ndarray

    def as_dict(self) -> dict[str, int]:
        """Scalar statistics as plain ints, for printing."""
        return {
            "nodes": self.node_count,
            "edges": self.edge_count,
            "self_loops": self.self_loop_count,
            "sinks": self.sink_count,
            "max_out_degree": self.max_out_degree,
            "max_in_degree": self.max_in_degree,
        }


def compute_stats(graph: AdjacencyGraph) -> GraphStats:
    """Compute size and degree statistics for a graph."""
    n = graph.node_count
    pairs = np.array(list(graph.edges()), dtype=np.int64).reshape(-1, 2)
    sources, targets = pairs[:, 0], pairs[:, 1]

    out_degrees = np.bincount(sources, minlength=n)
    in_degrees = np.bincount(targets, minlength=n)

    return GraphStats(
        node_count=n,
        edge_count=int(len(pairs)),
        self_loop_count=int(np.count_nonzero(sources == targets)),
        sink_count=int(np.count_nonzero(out_degrees == 0)),
        max_out_degree=int(out_degrees.max()) if n else 0,
        max_in_degree=int(in_degrees.max()) if n else 0,
        out_degrees=out_degrees,
        in_degrees=in_degrees,
    )
