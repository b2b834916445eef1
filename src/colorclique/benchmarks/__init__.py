"""
Benchmarking tools for the coloring-guided clique search.
"""

from .runner import (
    DEFAULT_INSTANCES,
    BenchmarkResult,
    run_benchmarks,
    run_instance,
    solve_graph
)
from .networkx_comparison import (
    compare_with_exact,
    exact_clique_number
)

__all__ = [
    "DEFAULT_INSTANCES",
    "BenchmarkResult",
    "run_benchmarks",
    "run_instance",
    "solve_graph",
    "compare_with_exact",
    "exact_clique_number"
]
