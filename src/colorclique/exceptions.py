"""
Custom exceptions for the colorclique search engine.
"""


class ColorCliqueError(Exception):
    """Base exception for colorclique errors."""
    pass


class UnknownVertexError(ColorCliqueError, LookupError):
    """Raised when a vertex id is not known to the graph."""

    def __init__(self, vertex):
        super().__init__(f"Vertex {vertex} is not in the graph")
        self.vertex = vertex


class CliqueConsistencyError(ColorCliqueError):
    """Raised when the clique state is found to be internally inconsistent."""
    pass


class EmptyGraphError(ColorCliqueError):
    """Raised when a search is started on a graph without vertices."""
    pass


class InvalidCliqueError(ColorCliqueError):
    """Raised when a returned vertex set fails clique verification."""
    pass


class DimacsFormatError(ColorCliqueError, ValueError):
    """Raised when a DIMACS file cannot be parsed."""
    pass
