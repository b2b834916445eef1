"""
Undirected graph over integer vertex ids, backed by a networkx graph.
"""

import networkx as nx
from typing import AbstractSet, Iterable, List, Tuple

from .exceptions import UnknownVertexError


_EMPTY = frozenset()


class Graph:
    """
    Adjacency-set graph used by the clique search.

    Every vertex of the graph is registered up front, so isolated vertices
    are known vertices with an empty neighborhood. Edges are undirected and
    stored once per pair; repeated insertions collapse.

    Args:
        num_vertices: Number of vertices; ids are ``0 .. num_vertices - 1``.
    """

    def __init__(self, num_vertices: int = 0):
        if num_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {num_vertices}")
        self._graph = nx.Graph()
        self._graph.add_nodes_from(range(num_vertices))

    @classmethod
    def from_vertices(cls, vertices: Iterable[int]) -> "Graph":
        """Create an edgeless graph over an arbitrary set of vertex ids."""
        graph = cls()
        graph._graph.add_nodes_from(vertices)
        return graph

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> "Graph":
        """
        Convert a networkx graph, relabelling its nodes to ``0 .. n-1``.

        Nodes are relabelled in sorted order so that integer-labelled
        graphs keep their ids. Self-loops are dropped.
        """
        mapping = {node: i for i, node in enumerate(sorted(nx_graph.nodes()))}
        graph = cls(len(mapping))
        for u, v in nx_graph.edges():
            if u != v:
                graph.add_edge(mapping[u], mapping[v])
        return graph

    def to_networkx(self) -> nx.Graph:
        """Return an independent networkx copy of this graph."""
        return self._graph.copy()

    def vertices(self) -> List[int]:
        return list(self._graph.nodes())

    def number_of_vertices(self) -> int:
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def has_edge(self, u: int, v: int) -> bool:
        """
        Check whether ``u`` and ``v`` are adjacent.

        Raises:
            UnknownVertexError: If either vertex is not in the graph.
        """
        if u not in self._graph:
            raise UnknownVertexError(u)
        if v not in self._graph:
            raise UnknownVertexError(v)
        return v in self._graph.adj[u]

    def neighbors(self, v: int) -> AbstractSet[int]:
        """
        Return a read-only set view of the neighbors of ``v``.

        A vertex without an adjacency entry has no neighbors.
        """
        if v not in self._graph:
            return _EMPTY
        return self._graph.adj[v].keys()

    def degree(self, v: int) -> int:
        return len(self.neighbors(v))

    def add_edge(self, u: int, v: int):
        """
        Add the undirected edge ``(u, v)``. Adding an existing edge is a no-op.

        Raises:
            ValueError: If ``u == v``.
            UnknownVertexError: If either endpoint is not in the graph.
        """
        if u == v:
            raise ValueError(f"Self-loop on vertex {u} is not allowed")
        if u not in self._graph:
            raise UnknownVertexError(u)
        if v not in self._graph:
            raise UnknownVertexError(v)
        self._graph.add_edge(u, v)

    def remove_edge(self, u: int, v: int):
        """Remove the undirected edge ``(u, v)`` if present."""
        if self._graph.has_edge(u, v):
            self._graph.remove_edge(u, v)

    def induced_subgraph(self, vertex_subset: Iterable[int]) -> "Graph":
        """
        Build a fresh graph over ``vertex_subset`` with the edges between them.

        The returned graph shares no state with this one.

        Raises:
            UnknownVertexError: If a vertex of the subset is not in the graph.
        """
        subset = set(vertex_subset)
        for v in subset:
            if v not in self._graph:
                raise UnknownVertexError(v)

        sub_graph = Graph.from_vertices(subset)
        sub_graph._graph.add_edges_from(
            (u, w) for u in subset for w in self._graph.adj[u] if w in subset and u < w
        )
        return sub_graph

    def __len__(self) -> int:
        return self.number_of_vertices()

    def __contains__(self, v) -> bool:
        return v in self._graph

    def __repr__(self) -> str:
        return f"Graph(vertices={self.number_of_vertices()}, edges={self.number_of_edges()})"


def build_graph(
    vertex_count: int,
    edge_list: Iterable[Tuple[int, int]],
    one_based: bool = False
) -> Graph:
    """
    Build a graph from a vertex count and an edge list.

    Duplicate edges are tolerated and self-loops are skipped.

    Args:
        vertex_count: Number of vertices in the graph.
        edge_list: Pairs ``(u, v)`` of vertex ids.
        one_based: Whether the ids in ``edge_list`` start at 1 (as in DIMACS files).

    Returns:
        The graph with vertices ``0 .. vertex_count - 1``.

    Raises:
        UnknownVertexError: If an edge endpoint is out of range.
    """
    graph = Graph(vertex_count)
    offset = 1 if one_based else 0
    for u, v in edge_list:
        u, v = u - offset, v - offset
        if u == v:
            continue
        graph.add_edge(u, v)
    return graph
