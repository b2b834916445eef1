"""
Perturb-and-rebuild local search for large cliques.

The search builds one clique greedily, always adding the candidate ranked
first by ``rank_by_color``. It then runs a fixed number of rounds: each
round copies the best clique, removes a random share of its members and
regrows it, picking uniformly among the top ranked candidates. A rebuilt
clique replaces the best one only if it is strictly larger.
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, List, Optional

import numpy as np

from .clique import Clique
from .coloring import rank_by_color
from .exceptions import CliqueConsistencyError, EmptyGraphError, InvalidCliqueError
from .graph import Graph


logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Parameters of the clique search."""
    rounds: int = 130
    perturbation_ratio: float = 0.7
    # Number of top ranked candidates the rebuild step chooses from.
    top_k: int = 2
    seed: Optional[int] = None

    def __post_init__(self):
        if self.rounds < 0:
            raise ValueError(f"rounds must be non-negative, got {self.rounds}")
        if not 0.0 <= self.perturbation_ratio <= 1.0:
            raise ValueError(f"perturbation_ratio must be in [0, 1], got {self.perturbation_ratio}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {self.top_k}")


class CliqueSearch:
    """
    Owner of the best clique found on one graph.

    Args:
        graph: The graph to search.
        config: Search parameters (default: ``SearchConfig()``).
        rng: Random generator. Created from ``config.seed`` when omitted.
        verbose: Whether to print progress information.
    """

    def __init__(
        self,
        graph: Graph,
        config: Optional[SearchConfig] = None,
        rng: Optional[np.random.Generator] = None,
        verbose: bool = False
    ):
        if graph.number_of_vertices() == 0:
            raise EmptyGraphError("Cannot search for a clique in a graph without vertices")

        self.graph = graph
        self.config = config if config is not None else SearchConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.verbose = verbose

        self.best_clique: Optional[Clique] = None
        self.history: List[int] = []

    def construct_initial(self) -> Clique:
        """Build the first clique greedily and make it the best one."""
        ranking = rank_by_color(self.graph, self.graph.vertices())
        clique = Clique(self.graph, ranking[0].vertex)

        while clique.has_candidates():
            ranking = rank_by_color(self.graph, clique.candidates)
            clique.add_vertex(ranking[0].vertex)

        self.best_clique = clique
        self.history = [clique.size()]

        logger.info("Initial clique of size %d", clique.size())
        if self.verbose:
            print(f"Initial clique: size {clique.size()}")
        return clique

    def _positions_to_remove(self, size: int) -> List[int]:
        amount = max(1, int(size * self.config.perturbation_ratio))

        # Rejection sampling: redraw until the position is new.
        positions = set()
        while len(positions) < amount:
            positions.add(int(self.rng.integers(0, size)))
        return sorted(positions)

    def perturb(self, clique: Clique):
        """
        Remove a random share of the members of ``clique`` in place.

        Raises:
            CliqueConsistencyError: If a chosen member cannot be removed.
        """
        members = clique.vertices
        for position in self._positions_to_remove(len(members)):
            if not clique.remove_vertex(members[position]):
                raise CliqueConsistencyError(
                    f"Trying to remove vertex {members[position]} that is not in the clique"
                )

    def rebuild(self, clique: Clique):
        """Extend ``clique`` in place until no candidate is left."""
        while clique.has_candidates():
            ranking = rank_by_color(self.graph, clique.candidates)
            index = min(int(self.rng.integers(0, self.config.top_k)), len(ranking) - 1)
            if not clique.add_vertex(ranking[index].vertex):
                raise CliqueConsistencyError(
                    f"Candidate {ranking[index].vertex} is already in the clique"
                )

    def improve(self, round_index: int = 0) -> bool:
        """
        Run one perturb-and-rebuild round.

        Returns:
            True if the round found a strictly larger clique.
        """
        if self.best_clique is None:
            self.construct_initial()

        clique = self.best_clique.copy()
        self.perturb(clique)
        self.rebuild(clique)

        improved = clique.size() > self.best_clique.size()
        if improved:
            self.best_clique = clique
            logger.info("Round %d: improved clique to size %d", round_index, clique.size())
            if self.verbose:
                print(f"  Round {round_index}: IMPROVED clique size {clique.size()}")
        else:
            logger.debug("Round %d: rebuilt clique of size %d", round_index, clique.size())

        self.history.append(self.best_clique.size())
        return improved

    def run_rounds(self) -> Clique:
        """Build the initial clique and run every improvement round without verifying."""
        self.construct_initial()
        for round_index in range(self.config.rounds):
            self.improve(round_index)
        return self.best_clique

    def run(self) -> Clique:
        """
        Run the search and verify its result.

        Returns:
            The best clique found.

        Raises:
            InvalidCliqueError: If the best clique fails verification.
        """
        self.run_rounds()

        if not self.is_clique_valid():
            raise InvalidCliqueError(f"Search returned an invalid clique: {self.best_clique.vertices}")

        if self.verbose:
            print(f"Best clique after {self.config.rounds} rounds: size {self.best_clique.size()}")
        return self.best_clique

    def is_clique_valid(self) -> bool:
        return self.best_clique is not None and self.best_clique.verify()


def find_clique(
    graph: Graph,
    config: Optional[SearchConfig] = None,
    seed: Optional[int] = None,
    verbose: bool = False
) -> List[int]:
    """
    Find a large clique with the coloring-guided local search.

    Args:
        graph: The input graph.
        config: Search parameters (default: ``SearchConfig()``).
        seed: Random seed; overrides ``config.seed`` when given.
        verbose: Whether to print progress information.

    Returns:
        The vertices of the best clique, in insertion order.

    Raises:
        EmptyGraphError: If the graph has no vertices.
    """
    config = config if config is not None else SearchConfig()
    rng = np.random.default_rng(seed if seed is not None else config.seed)
    search = CliqueSearch(graph, config, rng=rng, verbose=verbose)
    return search.run().vertices


def verify_clique(graph: Graph, vertices: Iterable[int]) -> bool:
    """
    Verify that a sequence of vertices forms a clique.

    Args:
        graph: The input graph.
        vertices: Vertex ids to verify.

    Returns:
        True if the ids are unique graph vertices and pairwise adjacent, False otherwise.
    """
    vertices = list(vertices)
    if any(v not in graph for v in vertices):
        return False
    if len(set(vertices)) != len(vertices):
        return False
    for u, v in combinations(vertices, 2):
        if not graph.has_edge(u, v):
            return False
    return True
