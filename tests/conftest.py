"""
Pytest configuration and common fixtures for the test suite.
"""

import pytest
import networkx as nx
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from colorclique import Graph


@pytest.fixture
def expected_candidates():
    """Fixture computing the common neighborhood of a vertex set from scratch."""
    def compute(graph, members):
        members = set(members)
        return {
            v for v in graph.vertices()
            if v not in members and all(graph.has_edge(v, m) for m in members)
        }
    return compute


@pytest.fixture
def small_test_graphs():
    """Fixture providing small graphs with their known clique numbers."""
    graphs = []

    # Complete graph K5 - clique size 5
    graphs.append(("Complete K5", Graph.from_networkx(nx.complete_graph(5)), 5))

    # Star graph (5 nodes) - clique size 2
    graphs.append(("Star 5 nodes", Graph.from_networkx(nx.star_graph(4)), 2))

    # Path of 4 nodes - clique size 2
    graphs.append(("4-path", Graph.from_networkx(nx.path_graph(4)), 2))

    # Square (4-cycle) - clique size 2
    graphs.append(("4-cycle", Graph.from_networkx(nx.cycle_graph(4)), 2))

    # Wheel graph - clique size 3
    graphs.append(("Wheel 8", Graph.from_networkx(nx.wheel_graph(8)), 3))

    # Edgeless graph - clique size 1
    graphs.append(("Empty 6", Graph(6), 1))

    return graphs


@pytest.fixture
def random_test_graphs():
    """Fixture providing seeded random graphs of various densities."""
    graphs = []
    for n, p, seed in [(20, 0.3, 42), (30, 0.5, 123), (40, 0.7, 7), (25, 0.9, 99)]:
        G = nx.gnp_random_graph(n, p, seed=seed)
        graphs.append((f"G({n},{p})", Graph.from_networkx(G)))
    return graphs


@pytest.fixture
def planted_clique_graph():
    """Sparse random graph on 60 nodes with a clique planted on nodes 0..11."""
    G = nx.gnp_random_graph(60, 0.1, seed=2024)
    G.add_edges_from((u, v) for u in range(12) for v in range(u + 1, 12))
    return Graph.from_networkx(G)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
