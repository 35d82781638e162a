"""
Graph store for the interactive path editor.

Owns the live vertices and undirected weighted edges of one graph and keeps
the derived adjacency index in step with every mutation:
- Vertex ids are dense (1..N) and are renumbered when a vertex is deleted
- Edges are unordered pairs with a positive integer weight
- Parallel edges are kept, self-loops are rejected
Usage:
    from pathsim.graph_store import GraphStore
    graph = GraphStore()
    a = graph.add_vertex((100, 120))
    b = graph.add_vertex((240, 80))
    graph.add_edge(a, b, 7)
    result = graph.shortest_path(a, b)
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

import networkx as nx

from pathsim.adjacency import build_adjacency
from pathsim.dijkstra import PathResult, shortest_path
from pathsim.errors import (
    InvalidInputError,
    InvalidWeightError,
    SelfLoopError,
    UnknownVertexError,
)

logger = logging.getLogger(__name__)

# Pointer hit radius in canvas pixels
DEFAULT_HIT_RADIUS = 30


@dataclass(frozen=True)
class Vertex:
    """A user-created point. ``position`` is opaque to the graph core."""
    id: int
    position: Tuple[float, float]


@dataclass(frozen=True)
class Edge:
    """Undirected weighted connection between two vertices."""
    source: int
    target: int
    weight: int

    def touches(self, vertex_id: int) -> bool:
        return self.source == vertex_id or self.target == vertex_id

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.source, self.target, self.weight)


def validate_vertex_id(value) -> int:
    """Return ``value`` if it is a positive integer id, otherwise raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Vertex id must be an integer, got {value!r}")
    if value < 1:
        raise InvalidInputError(f"Vertex id must be positive, got {value}")
    return value


def validate_weight(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidWeightError(f"Edge weight must be an integer, got {value!r}")
    if value < 1:
        raise InvalidWeightError(f"Edge weight must be positive, got {value}")
    return value


def validate_position(value) -> Tuple[float, float]:
    try:
        x, y = value
    except (TypeError, ValueError):
        raise InvalidInputError(f"Position must be an (x, y) pair, got {value!r}")
    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, (int, float)) or math.isnan(coord):
            raise InvalidInputError(f"Position coordinates must be numbers, got {value!r}")
    return (x, y)


class GraphStore:
    """
    Vertex and edge collections of a single graph plus its adjacency index.

    Every mutation is validated in full before any state changes, so a
    rejected call leaves the store exactly as it was.
    """

    def __init__(self):
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self._adjacency: Dict[int, List[Tuple[int, int]]] = {}

    # ----------------------
    # Queries
    # ----------------------

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def adjacency(self) -> Dict[int, List[Tuple[int, int]]]:
        """Current adjacency index (vertex id -> [(neighbor, weight), ...])."""
        return self._adjacency

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def vertex_ids(self) -> List[int]:
        return [vertex.id for vertex in self._vertices]

    def has_vertex(self, vertex_id) -> bool:
        return any(vertex.id == vertex_id for vertex in self._vertices)

    def vertex(self, vertex_id: int) -> Vertex:
        for vertex in self._vertices:
            if vertex.id == vertex_id:
                return vertex
        raise UnknownVertexError(vertex_id)

    def vertex_at(self, x: float, y: float, radius: float = DEFAULT_HIT_RADIUS) -> Optional[Vertex]:
        """Return the first vertex whose centre lies within ``radius`` of (x, y)."""
        for vertex in self._vertices:
            vx, vy = vertex.position
            if math.hypot(vx - x, vy - y) < radius:
                return vertex
        return None

    # ----------------------
    # Mutations
    # ----------------------

    def add_vertex(self, position) -> int:
        """Record a new vertex at ``position`` and return its id."""
        position = validate_position(position)
        new_id = max(self.vertex_ids()) + 1 if self._vertices else 1
        self._vertices.append(Vertex(new_id, position))
        logger.info(f"Added vertex {new_id} at {position}")
        return new_id

    def move_vertex(self, vertex_id: int, position) -> None:
        position = validate_position(position)
        current = self.vertex(validate_vertex_id(vertex_id))
        self._vertices = [
            replace(vertex, position=position) if vertex is current else vertex
            for vertex in self._vertices
        ]

    def add_edge(self, source: int, target: int, weight: int) -> Edge:
        """
        Append an undirected edge and rebuild the adjacency index.

        Raises:
            InvalidInputError: malformed vertex ids
            InvalidWeightError: weight is not a positive integer
            SelfLoopError: source and target are the same vertex
            UnknownVertexError: an endpoint does not exist
        """
        validate_vertex_id(source)
        validate_vertex_id(target)
        validate_weight(weight)
        for endpoint in (source, target):
            if not self.has_vertex(endpoint):
                raise UnknownVertexError(endpoint)
        if source == target:
            raise SelfLoopError(source)

        edge = Edge(source, target, weight)
        self._edges.append(edge)
        self._rebuild_adjacency()
        logger.info(f"Added edge {source}-{target} (weight {weight})")
        return edge

    def remove_vertex(self, vertex_id: int) -> Dict[int, int]:
        """
        Delete a vertex and its incident edges, then renumber survivors.

        Surviving vertices keep their relative order and are renumbered
        1..N; edge endpoints are rewritten to match. Ids held by callers
        are invalid afterwards and must be re-resolved through the
        returned ``{old_id: new_id}`` mapping.
        """
        validate_vertex_id(vertex_id)
        if not self.has_vertex(vertex_id):
            raise UnknownVertexError(vertex_id)

        kept = [vertex for vertex in self._vertices if vertex.id != vertex_id]
        renumber = {vertex.id: index for index, vertex in enumerate(kept, start=1)}

        survivors = [replace(vertex, id=renumber[vertex.id]) for vertex in kept]
        self._vertices = survivors
        self._edges = [
            Edge(renumber[edge.source], renumber[edge.target], edge.weight)
            for edge in self._edges
            if not edge.touches(vertex_id)
        ]
        self._rebuild_adjacency()

        logger.info(f"Removed vertex {vertex_id}; {len(survivors)} vertices, {len(self._edges)} edges remain")
        return renumber

    def _rebuild_adjacency(self):
        self._adjacency = build_adjacency(self._edges)

    # ----------------------
    # Queries over paths
    # ----------------------

    def shortest_path(self, source: int, destination: int) -> PathResult:
        return shortest_path(self, source, destination)

    # ----------------------
    # Conversion helpers
    # ----------------------

    def to_dict(self) -> dict:
        """Plain JSON-serialisable snapshot (used by the dashboard store)."""
        return {
            'vertices': [
                {'id': v.id, 'x': v.position[0], 'y': v.position[1]}
                for v in self._vertices
            ],
            'edges': [
                {'source': e.source, 'target': e.target, 'weight': e.weight}
                for e in self._edges
            ],
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "GraphStore":
        """Rebuild a store from :meth:`to_dict` output, validating every entry."""
        graph = cls()
        if not data:
            return graph
        for entry in data.get('vertices', []):
            vertex_id = validate_vertex_id(entry['id'])
            if graph.has_vertex(vertex_id):
                raise InvalidInputError(f"Duplicate vertex id {vertex_id}")
            position = validate_position((entry['x'], entry['y']))
            graph._vertices.append(Vertex(vertex_id, position))
        for entry in data.get('edges', []):
            graph.add_edge(entry['source'], entry['target'], entry['weight'])
        logger.debug(f"Restored graph with {graph.vertex_count} vertices and {graph.edge_count} edges")
        return graph

    def to_networkx(self) -> nx.MultiGraph:
        """Export as a networkx MultiGraph with ``pos`` and ``weight`` attributes."""
        G = nx.MultiGraph()
        for vertex in self._vertices:
            G.add_node(vertex.id, pos=vertex.position)
        for edge in self._edges:
            G.add_edge(edge.source, edge.target, weight=edge.weight)
        return G
