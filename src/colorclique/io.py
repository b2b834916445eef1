"""
Reading and writing graphs in DIMACS edge format.

DIMACS format:
- Lines starting with 'c' are comments
- Line starting with 'p edge n m' defines problem with n nodes and m edges
- Lines starting with 'e u v' define edges between nodes u and v (1-based)
"""

from typing import Iterable, Union
from pathlib import Path

from .exceptions import DimacsFormatError, UnknownVertexError
from .graph import Graph


def parse_dimacs(lines: Iterable[str]) -> Graph:
    """
    Parse DIMACS lines into a graph with 0-based vertex ids.

    Repeated edges collapse and self-loops are skipped.

    Args:
        lines: Lines of a DIMACS file.

    Returns:
        The parsed graph.

    Raises:
        DimacsFormatError: On a malformed header, a malformed edge line,
            an edge before the header or an edge endpoint out of range.
    """
    graph = None

    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith('c'):
            continue

        parts = line.split()
        if parts[0] == 'p':
            # Problem definition: p edge <num_nodes> <num_edges>
            if len(parts) < 3 or not parts[2].isdigit():
                raise DimacsFormatError(f"Line {line_number}: malformed problem line '{line}'")
            graph = Graph(int(parts[2]))
        elif parts[0] == 'e':
            if graph is None:
                raise DimacsFormatError(f"Line {line_number}: edge defined before the problem line")
            if len(parts) < 3:
                raise DimacsFormatError(f"Line {line_number}: malformed edge line '{line}'")
            try:
                u, v = int(parts[1]) - 1, int(parts[2]) - 1
            except ValueError:
                raise DimacsFormatError(f"Line {line_number}: malformed edge line '{line}'") from None
            if u == v:
                continue
            try:
                graph.add_edge(u, v)
            except UnknownVertexError as e:
                raise DimacsFormatError(
                    f"Line {line_number}: vertex {e.vertex + 1} is out of range"
                ) from e

    if graph is None:
        raise DimacsFormatError("Missing problem line 'p edge <nodes> <edges>'")
    return graph


def read_dimacs_graph(file_path: Union[str, Path]) -> Graph:
    """
    Read a graph from DIMACS format file.

    Args:
        file_path: Path to DIMACS format file

    Returns:
        Graph with vertices renumbered from 0
    """
    with open(file_path, 'r') as f:
        return parse_dimacs(f)


def write_dimacs_graph(graph: Graph, file_path: Union[str, Path], description: str = "Generated graph"):
    """
    Write a graph to a DIMACS format file with 1-based vertex ids.

    Args:
        graph: Graph with vertices ``0 .. n-1``.
        file_path: Output filename.
        description: Description for the comment line.
    """
    num_nodes = graph.number_of_vertices()
    num_edges = graph.number_of_edges()

    with open(file_path, 'w') as f:
        f.write(f"c {description}\n")
        f.write(f"c Nodes: {num_nodes}, Edges: {num_edges}\n")
        f.write(f"p edge {num_nodes} {num_edges}\n")

        for u in sorted(graph.vertices()):
            for v in sorted(graph.neighbors(u)):
                if u < v:
                    f.write(f"e {u + 1} {v + 1}\n")
