"""
Incremental clique state with a maintained candidate set.
"""

import logging
from typing import FrozenSet, Iterator, List

from .exceptions import CliqueConsistencyError, UnknownVertexError
from .graph import Graph


logger = logging.getLogger(__name__)


class Clique:
    """
    A clique of a graph together with the vertices that can extend it.

    The members are kept in insertion order. The candidate set always holds
    exactly the vertices that are adjacent to every member and are not
    members themselves, so ``add_vertex`` on any candidate keeps the clique
    valid.

    Args:
        graph: The graph the clique lives in. It is shared, never mutated.
        vertex: The seed vertex.
    """

    def __init__(self, graph: Graph, vertex: int):
        if vertex not in graph:
            raise UnknownVertexError(vertex)
        self._graph = graph
        self._vertices: List[int] = [vertex]
        self._lookup = {vertex}
        self._candidates = set(graph.neighbors(vertex))

    def copy(self) -> "Clique":
        """Return an independent copy sharing only the graph."""
        clone = Clique.__new__(Clique)
        clone._graph = self._graph
        clone._vertices = list(self._vertices)
        clone._lookup = set(self._lookup)
        clone._candidates = set(self._candidates)
        return clone

    __copy__ = copy

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def vertices(self) -> List[int]:
        """Members in insertion order (a copy)."""
        return list(self._vertices)

    @property
    def candidates(self) -> FrozenSet[int]:
        return frozenset(self._candidates)

    def is_candidate(self, vertex: int) -> bool:
        return vertex in self._candidates

    def has_candidates(self) -> bool:
        """True while the clique can still be extended."""
        return bool(self._candidates)

    def candidates_size(self) -> int:
        return len(self._candidates)

    def size(self) -> int:
        return len(self._vertices)

    def add_vertex(self, vertex: int) -> bool:
        """
        Add a candidate vertex to the clique.

        Args:
            vertex: Vertex to add.

        Returns:
            False if ``vertex`` is already a member (nothing changes), True otherwise.

        Raises:
            CliqueConsistencyError: If ``vertex`` is not adjacent to every member.
        """
        if vertex in self._lookup:
            return False
        if vertex not in self._candidates:
            raise CliqueConsistencyError(
                f"Vertex {vertex} is not adjacent to every member of the clique"
            )

        self._vertices.append(vertex)
        self._lookup.add(vertex)

        neighbors = self._graph.neighbors(vertex)
        self._candidates = {c for c in self._candidates if c in neighbors}
        return True

    def remove_vertex(self, vertex: int) -> bool:
        """
        Remove a member and re-admit every vertex that becomes a candidate.

        Any new candidate is adjacent to all remaining members, so it is
        found among the neighbors of the remaining member with the smallest
        degree. Once the clique is empty every vertex is a candidate.

        Returns:
            False if ``vertex`` is not a member (nothing changes), True otherwise.
        """
        if vertex not in self._lookup:
            return False

        self._vertices.remove(vertex)
        self._lookup.discard(vertex)

        if not self._vertices:
            self._candidates = set(self._graph.vertices())
            return True

        pivot = min(self._vertices, key=self._graph.degree)
        for n in self._graph.neighbors(pivot):
            if n in self._lookup or n in self._candidates:
                continue
            if all(self._graph.has_edge(n, m) for m in self._vertices):
                self._candidates.add(n)

        return True

    def verify(self) -> bool:
        """
        Check from scratch that the members are unique and pairwise adjacent.
        """
        if len(set(self._vertices)) != len(self._vertices):
            logger.warning("Duplicated vertices in the clique")
            return False

        for i, u in enumerate(self._vertices):
            for v in self._vertices[i + 1:]:
                if not self._graph.has_edge(u, v):
                    logger.warning("Vertices %d and %d of the clique are not adjacent", u, v)
                    return False
        return True

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, vertex) -> bool:
        return vertex in self._lookup

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._vertices))

    def __repr__(self) -> str:
        return f"Clique({self._vertices})"
