import networkx as nx

from pathsim.dijkstra import PathResult, UNREACHABLE
from pathsim.errors import UnknownVertexError
from pathsim.graph_store import GraphStore


def build_sample_graph():
    """
    Creates a small graph store for demonstration and cross-checks.
    """
    graph = GraphStore()
    positions = [(100, 100), (250, 60), (220, 220), (420, 140), (360, 300)]
    for pos in positions:
        graph.add_vertex(pos)

    # (source, target, weight)
    edges = [
        (1, 2, 4),
        (1, 3, 2),
        (2, 3, 5),
        (2, 4, 10),
        (3, 5, 3),
        (5, 4, 4)
    ]

    for u, v, w in edges:
        graph.add_edge(u, v, w)

    return graph


def run_dijkstra(graph, source, target):
    """
    Runs networkx's Dijkstra between two vertices of a GraphStore.
    Parallel edges collapse to their cheapest weight.
    """
    G = graph.to_networkx()
    for node in (source, target):
        if node not in G:
            raise UnknownVertexError(node)
    try:
        path = nx.dijkstra_path(G, source, target, weight='weight')
        cost = nx.dijkstra_path_length(G, source, target, weight='weight')
        return PathResult(path, cost)
    except nx.NetworkXNoPath:
        return PathResult([], UNREACHABLE)


if __name__ == "__main__":
    print("Running networkx Dijkstra baseline...")
    graph = build_sample_graph()
    result = run_dijkstra(graph, 1, 4)
    print(f"Shortest path from 1 to 4: {result.path} (total cost = {result.distance})")
