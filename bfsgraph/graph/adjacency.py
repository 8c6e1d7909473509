"""
Immutable directed graph stored as an adjacency list.

Nodes are identified by zero-based indices in [0, node_count). Each node
owns an ordered tuple of outgoing neighbor indices. Self-loops and
parallel edges are allowed.

Usage:
    from bfsgraph.graph.adjacency import AdjacencyGraph

    graph = AdjacencyGraph.from_edges(3, [(0, 1), (1, 2)])
    graph.neighbors(0)       # (1,)
    graph.edge_count         # 2
    graph.breadth_first(0)   # [0, 1, 2]
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator, Sequence

from bfsgraph.graph.errors import InvalidArgument


def _as_index(value: object, what: str) -> int:
    """Coerce an integral value to int, rejecting bools and non-integers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}")
    return int(value)


class AdjacencyGraph:
    """
    Directed graph with ordered, validated adjacency lists.

    The input is copied into tuples at construction, so the graph cannot be
    mutated afterwards and is safe to share between concurrent readers.

    Attributes:
        node_count: Number of nodes (N)
        edge_count: Total number of directed edges, parallel edges included
    """

    __slots__ = ("_adjacency", "_edge_count")

    def __init__(self, adjacency: Iterable[Iterable[int]] = ()) -> None:
        """
        Build a graph from per-node neighbor lists.

        Args:
            adjacency: Element i holds the outgoing neighbors of node i

        Raises:
            InvalidArgument: If adjacency or a row is not iterable, or a
                neighbor is not an integer in [0, N)
        """
        try:
            rows = [list(row) for row in adjacency]
        except TypeError as e:
            raise InvalidArgument(
                f"Adjacency must be a sequence of neighbor sequences: {e}"
            ) from e
        node_count = len(rows)

        validated: list[tuple[int, ...]] = []
        for source, row in enumerate(rows):
            neighbors = []
            for neighbor in row:
                idx = _as_index(neighbor, f"Neighbor of node {source}")
                if not 0 <= idx < node_count:
                    raise InvalidArgument(
                        f"Neighbor {idx} of node {source} out of range [0, {node_count})"
                    )
                neighbors.append(idx)
            validated.append(tuple(neighbors))

        self._adjacency: tuple[tuple[int, ...], ...] = tuple(validated)
        self._edge_count = sum(len(row) for row in self._adjacency)

    @classmethod
    def from_edges(
        cls, node_count: int, edges: Iterable[tuple[int, int]]
    ) -> AdjacencyGraph:
        """
        Build a graph from (source, target) pairs.

        Neighbors of each source keep the order in which edges are given.

        Raises:
            InvalidArgument: If node_count is negative, an edge is not a
                (source, target) pair, or an endpoint is out of range
        """
        node_count = _as_index(node_count, "Node count")
        if node_count < 0:
            raise InvalidArgument(f"Node count must be non-negative, got {node_count}")

        try:
            pairs = [tuple(edge) for edge in edges]
        except TypeError as e:
            raise InvalidArgument(f"Edges must be (source, target) pairs: {e}") from e

        rows: list[list[int]] = [[] for _ in range(node_count)]
        for edge in pairs:
            if len(edge) != 2:
                raise InvalidArgument(f"Edge {edge!r} is not a (source, target) pair")
            source, target = edge
            src = _as_index(source, "Edge source")
            if not 0 <= src < node_count:
                raise InvalidArgument(
                    f"Edge source {src} out of range [0, {node_count})"
                )
            rows[src].append(target)

        return cls(rows)

    @classmethod
    def coerce(cls, graph: AdjacencyGraph | Sequence[Sequence[int]]) -> AdjacencyGraph:
        """Return graph unchanged if already an AdjacencyGraph, else build one."""
        if isinstance(graph, cls):
            return graph
        return cls(graph)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def has_node(self, idx: object) -> bool:
        """Check if idx is a valid node index."""
        if isinstance(idx, bool) or not isinstance(idx, numbers.Integral):
            return False
        return 0 <= int(idx) < len(self._adjacency)

    def validate_node(self, idx: object) -> int:
        """
        Return idx as an int if it names a node in this graph.

        Raises:
            InvalidArgument: If the graph is empty or idx is outside [0, N)
        """
        if not self._adjacency:
            raise InvalidArgument("Graph has no nodes")
        node = _as_index(idx, "Node index")
        if not 0 <= node < len(self._adjacency):
            raise InvalidArgument(
                f"Node index {node} out of range [0, {len(self._adjacency)})"
            )
        return node

    def neighbors(self, idx: int) -> tuple[int, ...]:
        """Get outgoing neighbor indices of a node, in adjacency order."""
        return self._adjacency[self.validate_node(idx)]

    def inbound(self, idx: int) -> list[int]:
        """
        Get all nodes with an edge into this node.

        Each source is listed once, in index order. O(N + E).
        """
        node = self.validate_node(idx)
        return [src for src, row in enumerate(self._adjacency) if node in row]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate (source, target) pairs in adjacency order."""
        for source, row in enumerate(self._adjacency):
            for target in row:
                yield source, target

    def adjacency(self) -> list[list[int]]:
        """Return a mutable copy of the adjacency lists."""
        return [list(row) for row in self._adjacency]

    def breadth_first(self, start: int) -> list[int]:
        """Breadth-first visitation order from start. See breadth_first_traversal."""
        from bfsgraph.graph.traversal import breadth_first_traversal

        return breadth_first_traversal(self, start)

    # =========================================================================
    # Dunder Methods
    # =========================================================================

    def __len__(self) -> int:
        return len(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __hash__(self) -> int:
        return hash(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(nodes={self.node_count}, "
            f"edges={self.edge_count})"
        )
