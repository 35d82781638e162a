"""
Tests for YAML config loading and graph seeding.
"""

import sys
from pathlib import Path

import pytest

from pathsim.config import DEFAULT_CONFIG, build_graph_from_config, load_config
from pathsim.errors import InvalidInputError, UnknownVertexError

EXAMPLE_CONFIG = Path(__file__).resolve().parent / "config" / "example_config.yaml"


def test_defaults_without_file():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_example_config_seeds_sample_graph():
    config = load_config(EXAMPLE_CONFIG)
    graph = build_graph_from_config(config)
    assert graph.vertex_count == 5
    assert graph.edge_count == 6
    assert config['query'] == {'source': 1, 'destination': 4}
    assert graph.shortest_path(1, 4).distance == 9


def test_partial_override_keeps_defaults(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("log_level: debug\ndashboard:\n  port: 9000\n")
    config = load_config(path)
    assert config['log_level'] == 'DEBUG'
    assert config['dashboard']['port'] == 9000
    assert config['dashboard']['title'] == DEFAULT_CONFIG['dashboard']['title']
    assert config['hit_radius'] == 30


@pytest.mark.parametrize("text", [
    "log_level: LOUD\n",
    "hit_radius: -1\n",
    "dashboard:\n  port: 70000\n",
    "graph:\n  edges: 3\n",
    "query:\n  source: \"1\"\n",
    "query:\n  destination: 0\n",
    "- just\n- a list\n",
])
def test_invalid_config_rejected(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(InvalidInputError):
        load_config(path)


def test_bad_graph_section_rejected():
    config = load_config()
    config['graph'] = {'vertices': [[0, 0]], 'edges': [[1, 2]]}
    with pytest.raises(InvalidInputError):
        build_graph_from_config(config)
    config['graph'] = {'vertices': [[0, 0]], 'edges': [[1, 2, 3]]}
    with pytest.raises(UnknownVertexError):
        build_graph_from_config(config)


def test_query_ids_are_checked(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("query:\n  source: 2\n  destination: 5\n")
    assert load_config(path)['query'] == {'source': 2, 'destination': 5}


def run_all_tests():
    """Run every test in this module and report results."""
    return pytest.main([__file__, "-v"]) == 0


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
