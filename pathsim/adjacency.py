"""
Adjacency index derived from an undirected edge list.
"""

import logging
from collections import defaultdict
from typing import DefaultDict, Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)


def build_adjacency(edges: Iterable) -> Dict[int, List[Tuple[int, int]]]:
    """
    Build the vertex -> [(neighbor, weight), ...] mapping from scratch.

    Each edge contributes one entry under each endpoint. Neighbor order
    follows edge order, which decides ties in the shortest-path engine.

    Args:
        edges: iterable of objects with ``source``, ``target`` and ``weight``

    Returns:
        dict keyed by vertex id; vertices without edges are absent
    """
    index: DefaultDict[int, List[Tuple[int, int]]] = defaultdict(list)
    count = 0
    for edge in edges:
        index[edge.source].append((edge.target, edge.weight))
        index[edge.target].append((edge.source, edge.weight))
        count += 1

    logger.debug(f"Rebuilt adjacency index: {len(index)} vertices, {count} edges")
    return dict(index)
