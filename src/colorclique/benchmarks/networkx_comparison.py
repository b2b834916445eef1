"""
Comparison of the heuristic clique size against the exact NetworkX clique number.
"""

import time
import networkx as nx
from typing import Any, Dict, Optional

from ..graph import Graph
from ..search import SearchConfig, find_clique


def exact_clique_number(graph: Graph) -> int:
    """
    Compute the clique number exactly with NetworkX.

    Exponential in the worst case; meant for small graphs.
    """
    if graph.number_of_vertices() == 0:
        return 0
    _, weight = nx.max_weight_clique(graph.to_networkx(), weight=None)
    return weight


def compare_with_exact(graph: Graph, config: Optional[SearchConfig] = None) -> Dict[str, Any]:
    """
    Run the heuristic search and the exact NetworkX solver on the same graph.

    Args:
        graph: The graph to solve.
        config: Search parameters for the heuristic.

    Returns:
        Dict with the heuristic clique, both sizes, their ratio and runtimes.
    """
    start_time = time.perf_counter()
    clique = find_clique(graph, config)
    heuristic_runtime = time.perf_counter() - start_time

    start_time = time.perf_counter()
    omega = exact_clique_number(graph)
    exact_runtime = time.perf_counter() - start_time

    return {
        'clique': clique,
        'heuristic_size': len(clique),
        'exact_size': omega,
        'approximation_ratio': len(clique) / omega if omega > 0 else 1.0,
        'heuristic_runtime': heuristic_runtime,
        'exact_runtime': exact_runtime,
    }
