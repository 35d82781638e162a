"""
path-sim: interactive weighted graph editing with Dijkstra shortest paths.
"""

from pathsim.errors import (
    GraphError,
    InvalidInputError,
    InvalidWeightError,
    SelfLoopError,
    UnknownVertexError,
)
from pathsim.graph_store import Edge, GraphStore, Vertex
from pathsim.dijkstra import DijkstraEngine, PathResult, shortest_path

__version__ = "0.1.0"

__all__ = [
    'GraphStore',
    'Vertex',
    'Edge',
    'PathResult',
    'DijkstraEngine',
    'shortest_path',
    'GraphError',
    'InvalidInputError',
    'InvalidWeightError',
    'SelfLoopError',
    'UnknownVertexError',
]
