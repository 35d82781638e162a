"""
Tests for the editor controller: form parsing, pointer handling, messages
and query metrics.
"""

import sys

import pytest

from pathsim.baseline_dijkstra import build_sample_graph
from pathsim.editor import GraphEditor, format_result, parse_int
from pathsim.errors import InvalidInputError
from pathsim.dijkstra import PathResult
from pathsim.metrics import Metrics


def test_parse_int_accepts_whole_numbers():
    assert parse_int("12", "Vertex") == 12
    assert parse_int("  7 ", "Vertex") == 7
    assert parse_int(3, "Vertex") == 3
    assert parse_int("-4", "Vertex") == -4


@pytest.mark.parametrize("raw", ["", "   ", None, "2.5", "abc", "1e3", True,
                                 "1_000", "\u0661\u0662", "--5", "-", "+"])
def test_parse_int_rejects_junk(raw):
    with pytest.raises(InvalidInputError):
        parse_int(raw, "Vertex")


def test_click_adds_vertex_on_empty_canvas():
    editor = GraphEditor()
    response = editor.click(100, 100)
    assert response.ok
    assert response.vertex_id == 1
    assert editor.graph.vertex(1).position == (100, 100)
    assert editor.dragging is None


def test_click_on_vertex_selects_and_drag_moves_it():
    editor = GraphEditor()
    editor.click(100, 100)
    response = editor.click(110, 95)
    assert response.message == "Selected vertex 1"
    assert editor.graph.vertex_count == 1
    assert editor.dragging == 1

    editor.drag(250, 300)
    assert editor.graph.vertex(1).position == (250, 300)
    editor.release()
    assert editor.dragging is None
    assert not editor.drag(10, 10).ok


def test_add_edge_from_form_strings():
    editor = GraphEditor()
    editor.click(0, 0)
    editor.click(200, 0)
    response = editor.add_edge("1", "2", "6")
    assert response.ok
    assert [e.as_tuple() for e in editor.graph.edges] == [(1, 2, 6)]


@pytest.mark.parametrize("raw", [("1", "9", "3"), ("1", "2", "0"), ("1", "", "3"),
                                 ("1", "1", "3"), ("x", "2", "3"), ("1", "2", "-2")])
def test_add_edge_rejections_are_reported(raw):
    editor = GraphEditor()
    editor.click(0, 0)
    editor.click(200, 0)
    response = editor.add_edge(*raw)
    assert not response.ok
    assert response.message
    assert editor.graph.edge_count == 0


def test_find_path_message():
    editor = GraphEditor(build_sample_graph())
    response = editor.find_path("1", "4")
    assert response.ok
    assert response.result == PathResult([1, 3, 5, 4], 9)
    assert response.message == "Shortest Path: 1 -> 3 -> 5 -> 4\nTotal Distance: 9"
    assert editor.last_result is response.result


def test_find_path_unreachable_is_not_an_error():
    editor = GraphEditor()
    editor.click(0, 0)
    editor.click(200, 0)
    response = editor.find_path(1, 2)
    assert response.ok
    assert not response.result.reachable
    assert response.message == "No path from 1 to 2\nTotal Distance: unreachable"


def test_find_path_unknown_vertex():
    editor = GraphEditor(build_sample_graph())
    response = editor.find_path("1", "17")
    assert not response.ok
    assert response.message == "Unknown vertex 17"
    assert editor.metrics.queries == 0


def test_delete_vertex_clears_stale_state():
    editor = GraphEditor(build_sample_graph())
    editor.find_path(1, 4)
    editor.click(100, 100)
    response = editor.delete_vertex("3")
    assert response.ok
    assert editor.last_result is None
    assert editor.dragging is None
    assert editor.graph.vertex_ids() == [1, 2, 3, 4]
    assert not editor.delete_vertex("9").ok


def test_metrics_summary():
    editor = GraphEditor(build_sample_graph())
    editor.find_path(1, 4)
    editor.find_path(1, 3)
    editor.find_path(2, 2)
    summary = editor.metrics.summary()
    assert editor.metrics.queries == 3
    assert summary['distance'] == pytest.approx((9 + 2 + 0) / 3)
    assert summary['hops'] == pytest.approx((3 + 1 + 0) / 3)
    assert summary['reachable'] == 1.0


def test_empty_metrics_summary():
    assert Metrics().summary() == {'distance': 0.0, 'hops': 0.0, 'reachable': 0.0}


def test_format_result_helper():
    assert format_result(PathResult([2], 0), 2, 2) == "Shortest Path: 2\nTotal Distance: 0"


def run_all_tests():
    """Run every test in this module and report results."""
    return pytest.main([__file__, "-v"]) == 0


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
