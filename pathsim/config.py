"""
YAML configuration for the demo script and the dashboard.

Usage:
    from pathsim.config import load_config, build_graph_from_config
    config = load_config("config/example_config.yaml")
    graph = build_graph_from_config(config)
"""

import copy
import logging

import yaml

from pathsim.errors import InvalidInputError
from pathsim.graph_store import GraphStore

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/example_config.yaml"

DEFAULT_CONFIG = {
    'log_level': 'INFO',
    'hit_radius': 30,
    'graph': {
        'vertices': [],
        'edges': [],
    },
    'query': {
        'source': None,
        'destination': None,
    },
    'plot_path': None,
    'dashboard': {
        'title': 'Path-Sim Dashboard',
        'port': 8050,
        'debug': False,
    },
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _merge(base, override):
    """Recursively overlay ``override`` onto a copy of ``base``."""
    out = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def validate_config(config):
    level = str(config['log_level']).upper()
    if level not in LOG_LEVELS:
        raise InvalidInputError(f"log_level must be one of {LOG_LEVELS}, got {config['log_level']!r}")
    config['log_level'] = level

    radius = config['hit_radius']
    if isinstance(radius, bool) or not isinstance(radius, (int, float)) or radius <= 0:
        raise InvalidInputError(f"hit_radius must be a positive number, got {radius!r}")

    port = config['dashboard']['port']
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise InvalidInputError(f"dashboard.port must be a valid TCP port, got {port!r}")

    for key in ('vertices', 'edges'):
        if not isinstance(config['graph'][key], list):
            raise InvalidInputError(f"graph.{key} must be a list")

    for key in ('source', 'destination'):
        value = config['query'][key]
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 1):
            raise InvalidInputError(f"query.{key} must be a positive integer, got {value!r}")
    return config


def load_config(path=None):
    """
    Load a YAML config file and overlay it on DEFAULT_CONFIG.
    With ``path=None`` the defaults are returned unchanged.
    """
    if path is None:
        return validate_config(copy.deepcopy(DEFAULT_CONFIG))

    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidInputError(f"Config file {path} must contain a mapping")

    config = validate_config(_merge(DEFAULT_CONFIG, data))
    logger.debug(f"Loaded config from {path}")
    return config


def build_graph_from_config(config):
    """Seed a GraphStore from the ``graph`` section of a config."""
    graph = GraphStore()
    for pos in config['graph']['vertices']:
        graph.add_vertex(pos)
    for entry in config['graph']['edges']:
        try:
            u, v, w = entry
        except (TypeError, ValueError):
            raise InvalidInputError(f"Edge entry must be [source, target, weight], got {entry!r}")
        graph.add_edge(u, v, w)
    logger.info(f"Seeded graph with {graph.vertex_count} vertices and {graph.edge_count} edges")
    return graph
