"""
DSatur coloring and the color-based vertex ranking that drives the clique search.

The ranking is computed on the subgraph induced by a vertex subset:
vertices whose neighbors use many distinct colors are the most
"constrained" ones and are the most promising clique extensions.
"""

import heapq
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from .graph import Graph


UNCOLORED = -1


class RankedVertex(NamedTuple):
    """One entry of a color ranking."""
    vertex: int
    neighbor_colors: int
    degree: int


class SaturationQueue:
    """
    Priority queue of uncolored vertices for DSatur.

    The top vertex is the one with the largest
    ``(saturation, uncolored_degree, vertex)`` key. Every vertex has one
    current key; updating a vertex drops its previous key, and heap entries
    that no longer match the current key are skipped when popping.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, int]] = []
        self._keys: Dict[int, Tuple[int, int]] = {}

    def push(self, vertex: int, saturation: int, uncolored_degree: int):
        """Insert ``vertex`` or replace its current key."""
        self._keys[vertex] = (saturation, uncolored_degree)
        heapq.heappush(self._heap, (-saturation, -uncolored_degree, -vertex))

    def discard(self, vertex: int):
        self._keys.pop(vertex, None)

    def pop(self) -> int:
        """
        Remove and return the top-priority vertex.

        Raises:
            IndexError: If the queue is empty.
        """
        while self._heap:
            neg_saturation, neg_degree, neg_vertex = heapq.heappop(self._heap)
            vertex = -neg_vertex
            if self._keys.get(vertex) == (-neg_saturation, -neg_degree):
                del self._keys[vertex]
                return vertex
        raise IndexError("pop from an empty SaturationQueue")

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, vertex) -> bool:
        return vertex in self._keys


def dsatur_coloring(graph: Graph) -> Dict[int, int]:
    """
    Color ``graph`` with the DSatur heuristic.

    The next vertex to color is the uncolored one with the most distinct
    colors among its colored neighbors, ties broken by uncolored degree and
    then by the larger vertex id. Each vertex gets the smallest color not
    used by a colored neighbor.

    Args:
        graph: The graph to color.

    Returns:
        Mapping from vertex to color index.
    """
    colors = {v: UNCOLORED for v in graph.vertices()}
    uncolored_degree = {v: graph.degree(v) for v in colors}
    adjacent_colors = {v: set() for v in colors}

    queue = SaturationQueue()
    for v in colors:
        queue.push(v, 0, uncolored_degree[v])

    while len(queue):
        vertex = queue.pop()

        used = {colors[n] for n in graph.neighbors(vertex) if colors[n] != UNCOLORED}
        color = 0
        while color in used:
            color += 1
        colors[vertex] = color

        for n in graph.neighbors(vertex):
            if colors[n] != UNCOLORED:
                continue
            queue.discard(n)
            adjacent_colors[n].add(color)
            uncolored_degree[n] -= 1
            queue.push(n, len(adjacent_colors[n]), uncolored_degree[n])

    return colors


def rank_by_color(graph: Graph, vertex_subset: Iterable[int]) -> List[RankedVertex]:
    """
    Rank the vertices of a subset using a DSatur coloring of their induced subgraph.

    Vertices are sorted by the number of distinct colors among their
    neighbors, then by their degree in the induced subgraph, then by id,
    all descending.

    Args:
        graph: The full graph.
        vertex_subset: Vertices to rank.

    Returns:
        The ranking, best vertex first. Empty if the subset is empty.
    """
    vertex_subset = set(vertex_subset)
    if not vertex_subset:
        return []

    sub_graph = graph.induced_subgraph(vertex_subset)
    colors = dsatur_coloring(sub_graph)

    ranking = [
        RankedVertex(
            v,
            len({colors[n] for n in sub_graph.neighbors(v)}),
            sub_graph.degree(v)
        )
        for v in sub_graph.vertices()
    ]
    ranking.sort(key=lambda r: (r.neighbor_colors, r.degree, r.vertex), reverse=True)
    return ranking


def rank_by_degree(graph: Graph, vertex_subset: Iterable[int]) -> List[Tuple[int, int]]:
    """
    Rank the vertices of a subset by their degree in the induced subgraph.

    Returns:
        ``(vertex, degree)`` pairs sorted by degree, then id, descending.
    """
    sub_graph = graph.induced_subgraph(vertex_subset)
    ranking = [(v, sub_graph.degree(v)) for v in sub_graph.vertices()]
    ranking.sort(key=lambda r: (r[1], r[0]), reverse=True)
    return ranking


def verify_coloring(graph: Graph, coloring: Dict[int, int], max_color: Optional[int] = None) -> bool:
    """
    Verify that ``coloring`` is a proper coloring of ``graph``.

    Args:
        graph: The colored graph.
        coloring: Mapping from vertex to color.
        max_color: Optional inclusive upper bound on color indices.

    Returns:
        True if every vertex has a valid color and no edge joins two
        vertices of the same color, False otherwise.
    """
    for v in graph.vertices():
        color = coloring.get(v, UNCOLORED)
        if color == UNCOLORED or color < 0:
            return False
        if max_color is not None and color > max_color:
            return False
        for n in graph.neighbors(v):
            if coloring.get(n) == color:
                return False
    return True
