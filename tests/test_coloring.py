"""
Tests for DSatur coloring and the color-based ranking.
"""

import pytest
import networkx as nx

from colorclique import Graph, RankedVertex, build_graph
from colorclique.coloring import (
    SaturationQueue,
    dsatur_coloring,
    rank_by_color,
    rank_by_degree,
    verify_coloring
)


class TestSaturationQueue:
    """Test the DSatur priority queue."""

    def test_orders_by_saturation_then_degree_then_id(self):
        queue = SaturationQueue()
        queue.push(1, 0, 3)
        queue.push(2, 1, 0)
        queue.push(3, 0, 3)
        queue.push(4, 0, 5)
        assert [queue.pop() for _ in range(4)] == [2, 4, 3, 1]

    def test_update_replaces_previous_key(self):
        queue = SaturationQueue()
        queue.push(1, 0, 5)
        queue.push(2, 0, 5)
        queue.push(1, 2, 0)
        assert len(queue) == 2
        assert queue.pop() == 1
        assert queue.pop() == 2
        assert len(queue) == 0
        with pytest.raises(IndexError):
            queue.pop()

    def test_discard(self):
        queue = SaturationQueue()
        queue.push(1, 0, 1)
        queue.push(2, 0, 0)
        queue.discard(1)
        assert 1 not in queue
        assert queue.pop() == 2
        with pytest.raises(IndexError):
            queue.pop()


class TestDSaturColoring:
    """Test the DSatur coloring itself."""

    def test_complete_graph_uses_n_colors(self):
        graph = Graph.from_networkx(nx.complete_graph(5))
        coloring = dsatur_coloring(graph)
        assert sorted(coloring.values()) == [0, 1, 2, 3, 4]

    def test_even_cycle_is_two_colored(self):
        graph = Graph.from_networkx(nx.cycle_graph(6))
        coloring = dsatur_coloring(graph)
        assert set(coloring.values()) == {0, 1}
        assert verify_coloring(graph, coloring)

    def test_edgeless_graph_uses_one_color(self):
        coloring = dsatur_coloring(Graph(4))
        assert coloring == {0: 0, 1: 0, 2: 0, 3: 0}

    def test_empty_graph(self):
        assert dsatur_coloring(Graph(0)) == {}

    @pytest.mark.parametrize("n,p,seed", [(15, 0.3, 1), (25, 0.5, 2), (30, 0.8, 3), (40, 0.2, 4)])
    def test_random_graphs_are_properly_colored(self, n, p, seed):
        graph = Graph.from_networkx(nx.gnp_random_graph(n, p, seed=seed))
        coloring = dsatur_coloring(graph)
        max_degree = max(graph.degree(v) for v in graph.vertices())
        assert verify_coloring(graph, coloring, max_color=max_degree)


class TestVerifyColoring:
    """Test the coloring verification function."""

    def test_conflict(self):
        graph = build_graph(2, [(0, 1)])
        assert not verify_coloring(graph, {0: 0, 1: 0})

    def test_missing_vertex(self):
        graph = build_graph(2, [(0, 1)])
        assert not verify_coloring(graph, {0: 0})

    def test_color_above_bound(self):
        graph = build_graph(2, [(0, 1)])
        assert verify_coloring(graph, {0: 0, 1: 2})
        assert not verify_coloring(graph, {0: 0, 1: 2}, max_color=1)


class TestRankByColor:
    """Test the color-based ranking."""

    def test_empty_subset(self):
        graph = Graph.from_networkx(nx.complete_graph(3))
        assert rank_by_color(graph, []) == []

    def test_star_graph(self):
        graph = Graph.from_networkx(nx.star_graph(4))
        ranking = rank_by_color(graph, graph.vertices())
        assert ranking[0] == RankedVertex(0, 1, 4)
        assert [r.vertex for r in ranking[1:]] == [4, 3, 2, 1]
        assert all(r.neighbor_colors == 1 and r.degree == 1 for r in ranking[1:])

    def test_ranking_uses_induced_subgraph(self):
        graph = Graph.from_networkx(nx.path_graph(4))
        ranking = rank_by_color(graph, {0, 2, 3})
        assert ranking == [
            RankedVertex(3, 1, 1),
            RankedVertex(2, 1, 1),
            RankedVertex(0, 0, 0),
        ]

    def test_counts_distinct_colors_not_neighbors(self):
        # Vertex 0 is adjacent to three mutually non-adjacent vertices
        # sharing one color, vertex 4 to a triangle using three colors.
        graph = build_graph(8, [
            (0, 1), (0, 2), (0, 3),
            (4, 5), (4, 6), (4, 7), (5, 6), (5, 7), (6, 7),
        ])
        ranking = {r.vertex: r for r in rank_by_color(graph, graph.vertices())}
        assert ranking[0].degree == 3
        assert ranking[0].neighbor_colors == 1
        assert ranking[4].degree == 3
        assert ranking[4].neighbor_colors == 3

    def test_ranking_is_sorted(self, random_test_graphs):
        for _, graph in random_test_graphs:
            ranking = rank_by_color(graph, graph.vertices())
            keys = [(r.neighbor_colors, r.degree, r.vertex) for r in ranking]
            assert keys == sorted(keys, reverse=True)
            assert sorted(r.vertex for r in ranking) == sorted(graph.vertices())

    def test_does_not_mutate_graph(self):
        graph = Graph.from_networkx(nx.petersen_graph())
        edges_before = graph.number_of_edges()
        rank_by_color(graph, range(6))
        assert graph.number_of_edges() == edges_before
        assert len(graph) == 10


class TestRankByDegree:
    """Test the degree-based ranking."""

    def test_path_graph(self):
        graph = Graph.from_networkx(nx.path_graph(4))
        assert rank_by_degree(graph, graph.vertices()) == [(2, 2), (1, 2), (3, 1), (0, 1)]

    def test_subset(self):
        graph = Graph.from_networkx(nx.star_graph(4))
        assert rank_by_degree(graph, [1, 2, 3]) == [(3, 0), (2, 0), (1, 0)]
