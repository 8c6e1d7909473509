"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from bfsgraph.graph import AdjacencyGraph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_graph() -> AdjacencyGraph:
    """Return the 5-node sample graph: 0->1, 0->4, 1->2, 2->3, 3->4, 4->0."""
    return AdjacencyGraph([[1, 4], [2], [3], [4], [0]])


@pytest.fixture
def disconnected_graph() -> AdjacencyGraph:
    """Return a 3-node graph with a single edge 0->1."""
    return AdjacencyGraph.from_edges(3, [(0, 1)])


@pytest.fixture
def multigraph() -> AdjacencyGraph:
    """Return a graph with a self-loop and parallel edges."""
    return AdjacencyGraph([[0, 1, 1, 2], [2, 2], [], [1]])


@pytest.fixture
def random_graphs() -> list[AdjacencyGraph]:
    """Return a batch of seeded random graphs of varying size and density."""
    import random

    rng = random.Random(1234)
    graphs = []
    for _ in range(40):
        n = rng.randint(1, 12)
        rows = [
            [rng.randrange(n) for _ in range(rng.randint(0, 4))]
            for _ in range(n)
        ]
        graphs.append(AdjacencyGraph(rows))
    return graphs
