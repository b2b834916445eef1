#!/usr/bin/env python3
"""
Find a large clique in a DIMACS graph and optionally plot it.

USAGE:
    python examples/solve_dimacs_clique.py DIMACS/graph.dimacs [OPTIONS]

EXAMPLES:
    # Default search (130 rounds, top-2 rebuild choice)
    python examples/solve_dimacs_clique.py DIMACS/complete_k5.dimacs

    # Reproducible run with a wider rebuild window
    python examples/solve_dimacs_clique.py data/C125.9.clq --seed 7 --top-k 5

    # Save plots of the clique and of the search progress
    python examples/solve_dimacs_clique.py DIMACS/petersen.dimacs --plot
"""

import argparse
import logging
import time

from colorclique import CliqueSearch, SearchConfig, read_dimacs_graph
from colorclique.visualization import plot_clique, plot_search_history


def main():
    parser = argparse.ArgumentParser(description="Find a large clique in a DIMACS graph")
    parser.add_argument("file", help="DIMACS graph file")
    parser.add_argument("--rounds", type=int, default=130, help="Number of improvement rounds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--top-k", type=int, default=2, help="Rebuild picks among the top K candidates")
    parser.add_argument("--plot", action="store_true", help="Save clique and progress plots")
    parser.add_argument("--quiet", action="store_true", help="Only print the final result")
    parser.add_argument("--debug", action="store_true", help="Log every search round")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    graph = read_dimacs_graph(args.file)
    if not args.quiet:
        print(f"Loaded {args.file}: {graph.number_of_vertices()} vertices, {graph.number_of_edges()} edges")

    config = SearchConfig(rounds=args.rounds, top_k=args.top_k, seed=args.seed)
    search = CliqueSearch(graph, config, verbose=not args.quiet)

    start_time = time.perf_counter()
    clique = search.run()
    runtime = time.perf_counter() - start_time

    print(f"Clique found: {sorted(v + 1 for v in clique.vertices)}")
    print(f"Clique size: {clique.size()}")
    print(f"Time: {runtime:.3f}s")

    if args.plot:
        plot_clique(graph, clique.vertices, save_path="dimacs_clique_solution.png")
        plot_search_history(search.history, save_path="dimacs_clique_history.png")
        print("Plots saved to dimacs_clique_solution.png and dimacs_clique_history.png")


if __name__ == "__main__":
    main()
