"""
Single-pair shortest paths over the graph store's adjacency index.

Dijkstra's algorithm with a binary-heap frontier and lazy deletion:
stale frontier entries stay in the heap and are skipped when popped.
Weights are positive, so the search stops as soon as the destination
is finalized.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pathsim.errors import InvalidInputError, UnknownVertexError

logger = logging.getLogger(__name__)

UNREACHABLE = float('inf')


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a shortest-path query.

    ``path`` lists vertex ids from source to destination inclusive and
    ``distance`` is the summed edge weight. An unreachable destination
    gives an empty path and an infinite distance.
    """
    path: List[int] = field(default_factory=list)
    distance: float = UNREACHABLE

    @property
    def reachable(self) -> bool:
        return self.distance != UNREACHABLE

    @property
    def hops(self) -> List[Tuple[int, int]]:
        """Consecutive (u, v) pairs along the path."""
        return list(zip(self.path[:-1], self.path[1:]))

    def contains_edge(self, a: int, b: int) -> bool:
        """True if the path traverses a-b in either direction."""
        return any({u, v} == {a, b} for u, v in self.hops)


def _check_endpoint(graph, vertex_id):
    if isinstance(vertex_id, bool) or not isinstance(vertex_id, int):
        raise InvalidInputError(f"Vertex id must be an integer, got {vertex_id!r}")
    if not graph.has_vertex(vertex_id):
        raise UnknownVertexError(vertex_id)


def shortest_path(graph, source: int, destination: int) -> PathResult:
    """
    Compute the minimum-weight path between two vertices.

    Args:
        graph: object exposing ``vertex_ids()``, ``has_vertex()`` and
            ``adjacency`` (normally a GraphStore)
        source: id of the start vertex
        destination: id of the end vertex

    Returns:
        PathResult; ``reachable`` is False when no path exists

    Raises:
        UnknownVertexError: source or destination is not in the graph
    """
    _check_endpoint(graph, source)
    _check_endpoint(graph, destination)

    adjacency = graph.adjacency
    distances: Dict[int, float] = {v: UNREACHABLE for v in graph.vertex_ids()}
    previous: Dict[int, Optional[int]] = {v: None for v in distances}
    distances[source] = 0

    counter = itertools.count()
    frontier = [(0, next(counter), source)]
    finalized = set()

    while frontier:
        dist, _seq, node = heapq.heappop(frontier)
        if node in finalized:
            continue
        if node == destination:
            break
        finalized.add(node)

        for neighbor, weight in adjacency.get(node, []):
            candidate = dist + weight
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = node
                heapq.heappush(frontier, (candidate, next(counter), neighbor))

    if distances[destination] == UNREACHABLE:
        logger.debug(f"No path from {source} to {destination}")
        return PathResult([], UNREACHABLE)

    path = [destination]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()

    logger.debug(f"Shortest path {source}->{destination}: {path} (distance {distances[destination]})")
    return PathResult(path, distances[destination])


class DijkstraEngine:
    """
    Query wrapper that keeps running counters, matching the router interface
    used by the editor (``compute_path(G, src, dst)``).
    """

    def __init__(self):
        self.stats = {
            'paths_computed': 0,
            'unreachable': 0,
        }

    def compute_path(self, graph, src: int, dst: int) -> PathResult:
        result = shortest_path(graph, src, dst)
        self.stats['paths_computed'] += 1
        if not result.reachable:
            self.stats['unreachable'] += 1
        return result

    def get_statistics(self) -> Dict[str, int]:
        return dict(self.stats)
