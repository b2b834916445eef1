"""
Benchmark runner: solves DIMACS instances, times them and reports the results.
"""

import time
from contextlib import nullcontext
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..graph import Graph
from ..io import read_dimacs_graph
from ..search import CliqueSearch, SearchConfig, verify_clique
from .networkx_comparison import exact_clique_number


# Standard DIMACS maximum clique instances
DEFAULT_INSTANCES = [
    "brock200_1.clq", "brock200_2.clq", "brock200_3.clq", "brock200_4.clq",
    "brock400_1.clq", "brock400_2.clq", "brock400_3.clq", "brock400_4.clq",
    "C125.9.clq",
    "gen200_p0.9_44.clq", "gen200_p0.9_55.clq",
    "hamming8-4.clq",
    "johnson16-2-4.clq", "johnson8-2-4.clq",
    "keller4.clq",
    "MANN_a27.clq", "MANN_a9.clq",
    "p_hat1000-1.clq", "p_hat1000-2.clq",
    "p_hat1500-1.clq",
    "p_hat300-3.clq", "p_hat500-3.clq",
    "san1000.clq",
    "sanr200_0.9.clq", "sanr400_0.7.clq",
]

CSV_HEADER = "File; Clique; Time (sec); Clique vertices"
INVALID_CLIQUE_WARNING = "*** WARNING: incorrect clique ***"


@dataclass
class BenchmarkResult:
    """Result of running the clique search on a single instance."""
    instance: str
    num_vertices: int
    num_edges: int
    clique: List[int] = field(default_factory=list)
    runtime_seconds: float = 0.0
    valid: bool = True
    exact_clique_number: Optional[int] = None

    @property
    def clique_size(self) -> int:
        return len(self.clique)

    def to_csv_row(self) -> str:
        if not self.valid:
            return INVALID_CLIQUE_WARNING
        vertices = ", ".join(str(v) for v in self.clique)
        return f"{self.instance}; {self.clique_size}; {self.runtime_seconds}; {vertices}"

    def to_console_row(self) -> str:
        if not self.valid:
            return INVALID_CLIQUE_WARNING
        return f"{self.instance:>20}{self.clique_size:>10}{round(self.runtime_seconds, 3):>15}"


def console_header() -> str:
    return f"{'Instance':>20}{'Clique':>10}{'Time, sec':>15}"


def solve_graph(
    graph: Graph,
    instance: str,
    config: Optional[SearchConfig] = None,
    with_exact: bool = False
) -> BenchmarkResult:
    """
    Run the clique search on an already loaded graph and time it.

    Args:
        graph: The graph to solve.
        instance: Name reported for the graph.
        config: Search parameters.
        with_exact: Whether to also compute the exact clique number (small graphs only).

    Returns:
        The benchmark result. ``valid`` is False if the clique fails verification.
    """
    search = CliqueSearch(graph, config)

    start_time = time.perf_counter()
    clique = search.run_rounds().vertices
    runtime = time.perf_counter() - start_time

    return BenchmarkResult(
        instance=instance,
        num_vertices=graph.number_of_vertices(),
        num_edges=graph.number_of_edges(),
        clique=clique,
        runtime_seconds=runtime,
        valid=verify_clique(graph, clique),
        exact_clique_number=exact_clique_number(graph) if with_exact else None
    )


def run_instance(file_path: Union[str, Path], config: Optional[SearchConfig] = None) -> BenchmarkResult:
    """Read a DIMACS instance and solve it."""
    file_path = Path(file_path)
    graph = read_dimacs_graph(file_path)
    return solve_graph(graph, file_path.name, config)


def run_benchmarks(
    file_paths: Iterable[Union[str, Path]],
    csv_path: Optional[Union[str, Path]] = None,
    config: Optional[SearchConfig] = None,
    verbose: bool = True
) -> List[BenchmarkResult]:
    """
    Solve a list of DIMACS instances, printing a table and writing a CSV report.

    Args:
        file_paths: Instance files to solve, in order.
        csv_path: Where to write the CSV report (skipped when None).
        config: Search parameters shared by every instance.
        verbose: Whether to print the console table.

    Returns:
        One result per instance.
    """
    results = []

    if verbose:
        print(console_header())

    # Each row is written as soon as its instance finishes.
    with (open(csv_path, 'w') if csv_path is not None else nullcontext()) as f:
        if f is not None:
            f.write(CSV_HEADER + "\n")
            f.flush()

        for file_path in file_paths:
            result = run_instance(file_path, config)
            results.append(result)
            if f is not None:
                f.write(result.to_csv_row() + "\n")
                f.flush()
            if verbose:
                print(result.to_console_row())

    return results
