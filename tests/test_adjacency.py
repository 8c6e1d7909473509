"""
Unit tests for AdjacencyGraph construction and accessors.
"""

import numpy as np
import pytest

from bfsgraph.graph import AdjacencyGraph, InvalidArgument


class TestConstruction:
    """Test building graphs from neighbor lists and edge lists."""

    def test_from_neighbor_lists(self, sample_graph):
        """Counts should match the input lists."""
        assert sample_graph.node_count == 5
        assert sample_graph.edge_count == 6
        assert len(sample_graph) == 5

    def test_from_edges_matches_lists(self, sample_graph):
        """from_edges should preserve per-source edge order."""
        edges = [(0, 1), (0, 4), (1, 2), (2, 3), (3, 4), (4, 0)]
        assert AdjacencyGraph.from_edges(5, edges) == sample_graph

    def test_from_edges_isolated_nodes(self):
        """Nodes without edges should still exist."""
        graph = AdjacencyGraph.from_edges(4, [(0, 1)])
        assert graph.node_count == 4
        assert graph.neighbors(3) == ()

    def test_empty_graph(self):
        """An empty graph has no nodes and no edges."""
        graph = AdjacencyGraph()
        assert graph.node_count == 0
        assert graph.edge_count == 0

    def test_input_is_copied(self):
        """Mutating the input afterwards should not affect the graph."""
        rows = [[1], [0]]
        graph = AdjacencyGraph(rows)
        rows[0].append(0)
        assert graph.neighbors(0) == (1,)

    def test_numpy_integers_accepted(self):
        """Numpy integer indices should be accepted and stored as int."""
        graph = AdjacencyGraph([np.array([1, 1]), []])
        assert graph.neighbors(0) == (1, 1)
        assert all(type(n) is int for n in graph.neighbors(0))

    def test_coerce_passthrough(self, sample_graph):
        """coerce should return an existing graph unchanged."""
        assert AdjacencyGraph.coerce(sample_graph) is sample_graph


class TestValidation:
    """Test rejection of malformed graphs."""

    def test_neighbor_out_of_range(self):
        """A neighbor >= N should raise."""
        with pytest.raises(InvalidArgument, match="out of range"):
            AdjacencyGraph([[2], []])

    def test_negative_neighbor(self):
        """A negative neighbor should raise."""
        with pytest.raises(InvalidArgument):
            AdjacencyGraph([[-1]])

    def test_non_integer_neighbor(self):
        """A non-integer neighbor should raise."""
        with pytest.raises(InvalidArgument, match="integer"):
            AdjacencyGraph([["0"]])

    def test_from_edges_negative_count(self):
        """A negative node count should raise."""
        with pytest.raises(InvalidArgument):
            AdjacencyGraph.from_edges(-1, [])

    def test_from_edges_bad_source(self):
        """An edge source outside [0, N) should raise."""
        with pytest.raises(InvalidArgument):
            AdjacencyGraph.from_edges(2, [(2, 0)])

    def test_from_edges_bad_target(self):
        """An edge target outside [0, N) should raise."""
        with pytest.raises(InvalidArgument):
            AdjacencyGraph.from_edges(2, [(0, 5)])

    @pytest.mark.parametrize("adjacency", [None, 5, [1, 2], [[1], None]])
    def test_non_iterable_input(self, adjacency):
        """A non-iterable graph or row should raise InvalidArgument, not TypeError."""
        with pytest.raises(InvalidArgument, match="neighbor sequences"):
            AdjacencyGraph(adjacency)

    @pytest.mark.parametrize("edges", [[(0, 1, 2)], [(0,)], [()]])
    def test_from_edges_wrong_arity(self, edges):
        """Edges that are not pairs should raise InvalidArgument."""
        with pytest.raises(InvalidArgument, match="pair"):
            AdjacencyGraph.from_edges(3, edges)

    @pytest.mark.parametrize("edges", [None, [1, 2], [(0, 1), None]])
    def test_from_edges_not_iterable(self, edges):
        """Non-iterable edge lists or edges should raise InvalidArgument."""
        with pytest.raises(InvalidArgument, match="pairs"):
            AdjacencyGraph.from_edges(3, edges)


class TestAccessors:
    """Test graph accessor methods."""

    def test_neighbors_order(self, sample_graph):
        """neighbors should return stored order."""
        assert sample_graph.neighbors(0) == (1, 4)

    def test_neighbors_invalid_index(self, sample_graph):
        """neighbors should raise for invalid index."""
        with pytest.raises(InvalidArgument):
            sample_graph.neighbors(5)
        with pytest.raises(InvalidArgument):
            sample_graph.neighbors(-1)

    def test_has_node(self, sample_graph):
        """has_node should accept only integers in range."""
        assert sample_graph.has_node(0) is True
        assert sample_graph.has_node(4) is True
        assert sample_graph.has_node(5) is False
        assert sample_graph.has_node(-1) is False
        assert sample_graph.has_node(True) is False

    def test_inbound(self, sample_graph):
        """inbound should list each source once."""
        assert sample_graph.inbound(4) == [0, 3]
        assert sample_graph.inbound(0) == [4]

    def test_inbound_parallel_edges(self, multigraph):
        """Parallel edges should not duplicate sources."""
        assert multigraph.inbound(1) == [0, 3]

    def test_edges(self, sample_graph):
        """edges should yield pairs in adjacency order."""
        assert list(sample_graph.edges()) == [
            (0, 1), (0, 4), (1, 2), (2, 3), (3, 4), (4, 0),
        ]

    def test_adjacency_copy(self, sample_graph):
        """adjacency should return an independent copy."""
        rows = sample_graph.adjacency()
        rows[0].clear()
        assert sample_graph.neighbors(0) == (1, 4)

    def test_repr(self, sample_graph):
        """repr should show node and edge counts."""
        assert repr(sample_graph) == "AdjacencyGraph(nodes=5, edges=6)"

    def test_equality_and_hash(self):
        """Equal adjacency lists should compare and hash equal."""
        a = AdjacencyGraph([[1], []])
        b = AdjacencyGraph.from_edges(2, [(0, 1)])
        assert a == b
        assert hash(a) == hash(b)
        assert a != AdjacencyGraph([[], [0]])
