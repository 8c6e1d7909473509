"""
Breadth-first traversal over an adjacency-list graph.

Visits every node reachable from a start node in breadth-first order.
Neighbors are discovered in the order their adjacency list stores them,
so the result is fully deterministic for a given graph and start.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from bfsgraph.graph.adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)


def breadth_first_traversal(
    graph: AdjacencyGraph | Sequence[Sequence[int]],
    start: int,
) -> list[int]:
    """
    Walk the graph breadth-first from start.

    A node is marked visited when it is enqueued, not when it is dequeued,
    so no node enters the frontier twice. The graph is only read; callers
    sharing a plain sequence between threads must not mutate it meanwhile.

    Args:
        graph: AdjacencyGraph, or per-node neighbor sequences
        start: Index of the start node

    Returns:
        Node indices in dequeue order. The first element is start and every
        node reachable from start appears exactly once.

    Raises:
        InvalidArgument: If the graph is empty, malformed, or start is not in [0, N)
    """
    graph = AdjacencyGraph.coerce(graph)
    start = graph.validate_node(start)

    queue = deque([start])
    visited = {start}
    order: list[int] = []

    while queue:
        current = queue.popleft()
        order.append(current)

        for neighbor in graph.neighbors(current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append(neighbor)

    logger.debug(
        f"BFS from node {start} visited {len(order)}/{graph.node_count} nodes"
    )
    return order
