"""
Coloring-guided local search for large cliques.

This package finds a large (not necessarily maximum) clique in an
undirected graph:
1. A greedy construction that repeatedly adds the candidate ranked first
   by a DSatur coloring of the candidates' induced subgraph
2. A perturb-and-rebuild local search that removes a random share of the
   best clique and regrows it

It also provides DIMACS I/O, a benchmark runner and plotting helpers.
"""

from .graph import Graph, build_graph
from .coloring import (
    RankedVertex,
    dsatur_coloring,
    rank_by_color,
    rank_by_degree,
    verify_coloring
)
from .clique import Clique
from .search import CliqueSearch, SearchConfig, find_clique, verify_clique
from .io import parse_dimacs, read_dimacs_graph, write_dimacs_graph
from .exceptions import (
    ColorCliqueError,
    UnknownVertexError,
    CliqueConsistencyError,
    EmptyGraphError,
    InvalidCliqueError,
    DimacsFormatError
)

__version__ = "0.1.0"
__all__ = [
    # Graph
    "Graph",
    "build_graph",
    # Coloring
    "RankedVertex",
    "dsatur_coloring",
    "rank_by_color",
    "rank_by_degree",
    "verify_coloring",
    # Search
    "Clique",
    "CliqueSearch",
    "SearchConfig",
    "find_clique",
    "verify_clique",
    # I/O
    "parse_dimacs",
    "read_dimacs_graph",
    "write_dimacs_graph",
    # Exceptions
    "ColorCliqueError",
    "UnknownVertexError",
    "CliqueConsistencyError",
    "EmptyGraphError",
    "InvalidCliqueError",
    "DimacsFormatError"
]
