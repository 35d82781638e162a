"""
Editor controller: turns raw user input into graph store calls.

The dashboard (or any other front end) hands over form strings and pointer
coordinates; the editor parses and validates them, applies the mutation or
query, and answers with an EditorResponse carrying a display message.
Rejected input never reaches the store.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pathsim.dijkstra import DijkstraEngine, PathResult
from pathsim.errors import GraphError, InvalidInputError
from pathsim.graph_store import DEFAULT_HIT_RADIUS, GraphStore
from pathsim.metrics import Metrics

logger = logging.getLogger(__name__)


@dataclass
class EditorResponse:
    ok: bool
    message: str
    result: Optional[PathResult] = None
    vertex_id: Optional[int] = None


def parse_int(raw, label: str) -> int:
    """Parse a form field into an int, rejecting blanks, floats and junk."""
    if isinstance(raw, bool):
        raise InvalidInputError(f"{label} must be a whole number, got {raw!r}")
    if isinstance(raw, int):
        return raw
    text = '' if raw is None else str(raw).strip()
    if not text:
        raise InvalidInputError(f"{label} is required")
    digits = text[1:] if text.startswith('-') else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidInputError(f"{label} must be a whole number, got {text!r}")
    return int(text)


def format_result(result: PathResult, source: int, destination: int) -> str:
    if not result.reachable:
        return f"No path from {source} to {destination}\nTotal Distance: unreachable"
    route = ' -> '.join(str(v) for v in result.path)
    return f"Shortest Path: {route}\nTotal Distance: {result.distance}"


class GraphEditor:
    """
    Interactive session over one GraphStore.

    Pointer handling follows the canvas editor: pressing on a vertex grabs
    it for dragging, pressing on empty space creates a vertex there.
    """

    def __init__(self, graph: Optional[GraphStore] = None, hit_radius: float = DEFAULT_HIT_RADIUS):
        self.graph = graph if graph is not None else GraphStore()
        self.hit_radius = hit_radius
        self.engine = DijkstraEngine()
        self.metrics = Metrics()
        self.dragging: Optional[int] = None
        self.last_result: Optional[PathResult] = None

    # --- pointer input ---

    def click(self, x: float, y: float) -> EditorResponse:
        hit = self.graph.vertex_at(x, y, self.hit_radius)
        if hit is not None:
            self.dragging = hit.id
            return EditorResponse(True, f"Selected vertex {hit.id}", vertex_id=hit.id)
        try:
            new_id = self.graph.add_vertex((x, y))
        except GraphError as e:
            return self._reject(e)
        return EditorResponse(True, f"Added vertex {new_id}", vertex_id=new_id)

    def drag(self, x: float, y: float) -> EditorResponse:
        if self.dragging is None:
            return EditorResponse(False, "No vertex selected")
        try:
            self.graph.move_vertex(self.dragging, (x, y))
        except GraphError as e:
            return self._reject(e)
        return EditorResponse(True, f"Moved vertex {self.dragging}", vertex_id=self.dragging)

    def release(self):
        self.dragging = None

    # --- form input ---

    def add_edge(self, raw_from, raw_to, raw_weight) -> EditorResponse:
        try:
            source = parse_int(raw_from, "From vertex")
            target = parse_int(raw_to, "To vertex")
            weight = parse_int(raw_weight, "Weight")
            self.graph.add_edge(source, target, weight)
        except GraphError as e:
            return self._reject(e)
        self.last_result = None
        return EditorResponse(True, f"Added edge {source}-{target} (weight {weight})")

    def delete_vertex(self, raw_id) -> EditorResponse:
        try:
            vertex_id = parse_int(raw_id, "Vertex")
            self.graph.remove_vertex(vertex_id)
        except GraphError as e:
            return self._reject(e)
        # ids were renumbered; any highlighted path is stale
        self.dragging = None
        self.last_result = None
        return EditorResponse(True, f"Deleted vertex {vertex_id}", vertex_id=vertex_id)

    def find_path(self, raw_source, raw_destination) -> EditorResponse:
        try:
            source = parse_int(raw_source, "Source")
            destination = parse_int(raw_destination, "Destination")
            result = self.engine.compute_path(self.graph, source, destination)
        except GraphError as e:
            return self._reject(e)
        self.metrics.log(result)
        self.last_result = result
        return EditorResponse(True, format_result(result, source, destination), result=result)

    def _reject(self, error: GraphError) -> EditorResponse:
        logger.warning(f"Rejected input: {error}")
        return EditorResponse(False, str(error))
