import matplotlib.pyplot as plt

NODE_RADIUS = 30
EDGE_COLOR = '#4682B4'
PATH_COLOR = '#FF4500'
NODE_COLOR = '#00FA9A'
NODE_EDGE_COLOR = '#006400'
WEIGHT_COLOR = '#B8860B'


def draw_graph(graph, result=None, path=None, title=None):
    """
    Render a GraphStore snapshot; vertices and edges on the shortest path are
    highlighted. Positions are canvas pixels, so the y axis is inverted.
    Saves to ``path`` when given and returns the figure.
    """
    on_path = set(result.path) if result is not None else set()

    fig, ax = plt.subplots(figsize=(8, 6))
    for edge in graph.edges:
        x0, y0 = graph.vertex(edge.source).position
        x1, y1 = graph.vertex(edge.target).position
        highlighted = result is not None and result.contains_edge(edge.source, edge.target)
        ax.plot([x0, x1], [y0, y1],
                color=PATH_COLOR if highlighted else EDGE_COLOR,
                linewidth=6 if highlighted else 4, zorder=1)
        ax.text((x0 + x1) / 2, (y0 + y1) / 2, str(edge.weight),
                color=WEIGHT_COLOR, fontsize=14, zorder=3)

    for vertex in graph.vertices:
        x, y = vertex.position
        ax.add_patch(plt.Circle((x, y), NODE_RADIUS,
                                facecolor=PATH_COLOR if vertex.id in on_path else NODE_COLOR,
                                edgecolor=NODE_EDGE_COLOR, linewidth=3, zorder=2))
        ax.text(x, y, str(vertex.id), ha='center', va='center', fontsize=14, zorder=4)

    ax.set_aspect('equal')
    ax.autoscale_view()
    ax.invert_yaxis()
    ax.axis('off')
    if title:
        ax.set_title(title)
    fig.tight_layout()

    if path:
        fig.savefig(path)
    return fig
