import logging

from pathsim.baseline_dijkstra import run_dijkstra
from pathsim.config import build_graph_from_config
from pathsim.editor import GraphEditor, parse_int

logger = logging.getLogger(__name__)


def run_session(config):
    """
    Seed a graph from ``config``, answer the configured query and compare
    the heap engine against the networkx baseline.
    Returns the editor so callers can inspect the graph, result and metrics.
    """
    print("Building graph from config...")
    graph = build_graph_from_config(config)
    editor = GraphEditor(graph, hit_radius=config["hit_radius"])
    print(f"Graph: {graph.vertex_count} vertices, {graph.edge_count} edges")

    query = config.get("query", {})
    src, dst = query.get("source"), query.get("destination")
    if src is None or dst is None:
        print("No query configured.")
        return editor

    response = editor.find_path(src, dst)
    print(f"\n=== Query {src} -> {dst} ===")
    print(response.message)
    if not response.ok:
        return editor

    # ids were accepted by the editor, so they parse
    src, dst = parse_int(src, "Source"), parse_int(dst, "Destination")
    baseline = run_dijkstra(graph, src, dst)
    if baseline.distance != response.result.distance:
        logger.error(f"Baseline disagrees: engine={response.result.distance}, networkx={baseline.distance}")
    else:
        print(f"networkx baseline agrees (distance {baseline.distance})")

    print("\n=== Session Complete ===")
    print(editor.metrics.summary())
    return editor
