"""
Tests for the dashboard helpers: figure building, store round trips and
action dispatch (no browser needed).
"""

import sys
from pathlib import Path

import pytest

from frontend.app import create_app
from frontend.callbacks import apply_action, restore_editor, save_session, summary_cards
from frontend.layout import (
    EDGE_COLOR,
    NODE_COLOR,
    PATH_COLOR,
    SELECTED_COLOR,
    create_graph_figure,
)
from pathsim.baseline_dijkstra import build_sample_graph
from pathsim.config import load_config
from pathsim.editor import GraphEditor

EXAMPLE_CONFIG = Path(__file__).resolve().parent / "config" / "example_config.yaml"

EMPTY_SESSION = {'selected': None, 'result': None,
                 'metrics': {'distance': [], 'hops': [], 'reachable': []}}


def canvas_click(x, y, vertex_id=None):
    point = {'x': x, 'y': y}
    if vertex_id is not None:
        point['customdata'] = vertex_id
    return {'points': [point]}


def test_figure_highlights_path():
    graph = build_sample_graph()
    result = graph.shortest_path(1, 4)
    fig = create_graph_figure(graph, result)

    edge_traces = [t for t in fig.data if t.mode == 'lines']
    assert len(edge_traces) == graph.edge_count
    highlighted = [t for t in edge_traces if t.line.color == PATH_COLOR]
    assert len(highlighted) == 3
    assert sum(t.line.color == EDGE_COLOR for t in edge_traces) == graph.edge_count - 3

    nodes = [t for t in fig.data if t.name == 'vertices'][0]
    colors = dict(zip(nodes.customdata, nodes.marker.color))
    assert colors[1] == PATH_COLOR and colors[4] == PATH_COLOR
    assert colors[2] == NODE_COLOR
    assert sorted(a.text for a in fig.layout.annotations) == sorted(str(e.weight) for e in graph.edges)


def test_figure_marks_selected_vertex():
    graph = build_sample_graph()
    fig = create_graph_figure(graph, None, selected=2)
    nodes = [t for t in fig.data if t.name == 'vertices'][0]
    assert dict(zip(nodes.customdata, nodes.marker.color))[2] == SELECTED_COLOR


def test_session_round_trip_keeps_unreachable_result():
    editor = GraphEditor(build_sample_graph())
    editor.find_path(1, 4)
    editor.graph.add_vertex((700, 400))
    editor.find_path(1, 6)

    restored = restore_editor(editor.graph.to_dict(), save_session(editor), 30)
    assert restored.graph.to_dict() == editor.graph.to_dict()
    assert not restored.last_result.reachable
    assert restored.metrics.data == editor.metrics.data


def test_canvas_click_adds_then_moves_vertex():
    editor = restore_editor({'vertices': [], 'edges': []}, EMPTY_SESSION, 30)
    response = apply_action(editor, 'graph-canvas', canvas_click(100, 100))
    assert response.ok and editor.graph.vertex_count == 1

    apply_action(editor, 'graph-canvas', canvas_click(100, 100, vertex_id=1))
    assert editor.dragging == 1
    response = apply_action(editor, 'graph-canvas', canvas_click(400, 200))
    assert response.message == "Moved vertex 1"
    assert editor.graph.vertex(1).position == (400, 200)
    assert editor.dragging is None
    assert editor.graph.vertex_count == 1


def test_form_actions_dispatch_to_editor():
    editor = GraphEditor(build_sample_graph())
    response = apply_action(editor, 'btn-find-path', form={'source': '1', 'destination': '4'})
    assert response.message.startswith("Shortest Path: 1 -> 3 -> 5 -> 4")

    response = apply_action(editor, 'btn-add-edge', form={'from': '1', 'to': '4', 'weight': '1'})
    assert response.ok

    response = apply_action(editor, 'btn-delete-node', form={'delete': '2'})
    assert response.ok and editor.graph.vertex_count == 4

    assert apply_action(editor, 'something-else') is None
    assert apply_action(editor, 'graph-canvas', {'points': [{}]}) is None
    assert apply_action(editor, 'graph-canvas', {'points': []}) is None
    assert apply_action(editor, 'graph-canvas', None) is None


def test_summary_cards_and_app_factory():
    editor = GraphEditor(build_sample_graph())
    editor.find_path(1, 4)
    cards = summary_cards(editor)
    assert cards[0].children[1].children == "5"
    assert cards[3].children[1].children == "9.0"

    app = create_app(load_config(EXAMPLE_CONFIG))
    assert app.title == "Path-Sim Dashboard"


def run_all_tests():
    """Run every test in this module and report results."""
    return pytest.main([__file__, "-v"]) == 0


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
