"""
Sample graph and value array used by the demo and tests.

Usage:
    from bfsgraph.data import load_sample_graph

    graph = load_sample_graph()
    graph.breadth_first(0)   # [0, 1, 4, 2, 3]
"""

from __future__ import annotations

import logging

import numpy as np

from bfsgraph.config import SAMPLE_EDGES, SAMPLE_NODE_COUNT, SAMPLE_VALUES
from bfsgraph.graph.adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)


def load_sample_graph() -> AdjacencyGraph:
    """Build the 5-node sample graph (0->1, 0->4, 1->2, 2->3, 3->4, 4->0)."""
    graph = AdjacencyGraph.from_edges(SAMPLE_NODE_COUNT, SAMPLE_EDGES)
    logger.debug(f"Built sample graph: {graph.node_count} nodes, {graph.edge_count} edges")
    return graph


def load_sample_values() -> np.ndarray:
    """Static integer array shown by the demo."""
    return np.array(SAMPLE_VALUES, dtype=np.int64)
