"""
Exception types raised at the graph mutation and query boundary.
"""


class GraphError(Exception):
    """Base class for every error the graph core reports."""


class InvalidInputError(GraphError, ValueError):
    """Malformed input: non-integer identifier, bad position, unparsable text."""


class InvalidWeightError(InvalidInputError):
    """Edge weight is not a positive integer."""


class SelfLoopError(InvalidInputError):
    """Edge endpoints name the same vertex."""

    def __init__(self, vertex_id):
        self.vertex_id = vertex_id
        super().__init__(f"Self-loop on vertex {vertex_id} is not allowed")


class UnknownVertexError(GraphError, KeyError):
    """A mutation or query referenced a vertex that does not exist."""

    def __init__(self, vertex_id):
        self.vertex_id = vertex_id
        super().__init__(vertex_id)

    def __str__(self):
        return f"Unknown vertex {self.vertex_id}"
