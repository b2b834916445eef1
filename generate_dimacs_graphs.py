#!/usr/bin/env python3
"""
Generate test graphs with NetworkX and save them in DIMACS format.

USAGE:
    python generate_dimacs_graphs.py [OPTIONS]

EXAMPLES:
    # Generate all graph types (default behavior)
    python generate_dimacs_graphs.py

    # Generate only Erdos-Renyi random graphs
    python generate_dimacs_graphs.py --random-only

    # Generate a custom Erdos-Renyi graph
    python generate_dimacs_graphs.py --custom 40 0.6 42 my_test_graph

OUTPUT:
    Graphs are saved to the output directory (default: DIMACS/) as
    <name>.dimacs, with 1-based vertex ids. Each file starts with comment
    lines describing the graph and, for small graphs, its exact clique number.
"""

import argparse
import networkx as nx
from pathlib import Path

from colorclique import Graph, write_dimacs_graph
from colorclique.benchmarks import exact_clique_number


# (n, p, seed) for the random instances
RANDOM_GRAPH_CONFIGS = [
    (10, 0.5, 42),
    (15, 0.7, 123),
    (20, 0.5, 456),
    (30, 0.8, 999),
    (60, 0.9, 2024),
]

STRUCTURED_GRAPHS = [
    (nx.complete_graph(5), "complete_k5", "Complete graph K5"),
    (nx.star_graph(4), "star_5", "Star graph with 5 nodes"),
    (nx.path_graph(4), "path_4", "Path graph 0-1-2-3"),
    (nx.cycle_graph(8), "cycle_8", "8-cycle graph"),
    (nx.wheel_graph(8), "wheel_8", "Wheel graph with 8 nodes"),
    (nx.petersen_graph(), "petersen", "Petersen graph"),
    (nx.empty_graph(6), "empty_6", "Graph with 6 isolated nodes"),
]


def save_graph(nx_graph: nx.Graph, output_dir: Path, name: str, description: str):
    """Convert, annotate and write one graph; prints a short summary."""
    graph = Graph.from_networkx(nx_graph)
    n = graph.number_of_vertices()

    if n <= 60:
        description = f"{description} (clique number = {exact_clique_number(graph)})"

    filename = output_dir / f"{name}.dimacs"
    write_dimacs_graph(graph, filename, description)
    print(f"{name}: {n} nodes, {graph.number_of_edges()} edges -> {filename}")


def generate_random_graphs(output_dir: Path):
    for n, p, seed in RANDOM_GRAPH_CONFIGS:
        name = f"erdos_renyi_{n}_p{int(p * 10):02d}_seed{seed}"
        save_graph(nx.erdos_renyi_graph(n, p, seed=seed), output_dir, name,
                   f"Erdos-Renyi G({n}, {p}) with seed={seed}")


def generate_structured_graphs(output_dir: Path):
    for nx_graph, name, description in STRUCTURED_GRAPHS:
        save_graph(nx_graph, output_dir, name, description)


def main():
    parser = argparse.ArgumentParser(description="Generate graphs in DIMACS format")
    parser.add_argument("--output-dir", default="DIMACS", help="Directory for the generated files")
    parser.add_argument("--random-only", action="store_true", help="Generate only Erdos-Renyi graphs")
    parser.add_argument("--structured-only", action="store_true", help="Generate only structured graphs")
    parser.add_argument("--custom", nargs=4, metavar=("N", "P", "SEED", "NAME"),
                        help="Generate custom Erdos-Renyi graph: N P SEED NAME")
    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if args.custom:
        n, p, seed, name = int(args.custom[0]), float(args.custom[1]), int(args.custom[2]), args.custom[3]
        save_graph(nx.erdos_renyi_graph(n, p, seed=seed), output_dir, name,
                   f"Custom Erdos-Renyi G({n}, {p}) with seed={seed}")
    elif args.random_only:
        generate_random_graphs(output_dir)
    elif args.structured_only:
        generate_structured_graphs(output_dir)
    else:
        generate_random_graphs(output_dir)
        generate_structured_graphs(output_dir)


if __name__ == "__main__":
    main()
