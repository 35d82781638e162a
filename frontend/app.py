import dash
import dash_bootstrap_components as dbc

from pathsim.config import build_graph_from_config, load_config

# Import layout and callback functions from other files in this package
from .layout import build_layout
from .callbacks import register_callbacks


def create_app(config=None):
    """Builds the Dash app, seeded with the config's demo graph."""
    if config is None:
        config = load_config()
    graph = build_graph_from_config(config)

    app = dash.Dash(__name__, external_stylesheets=[dbc.themes.BOOTSTRAP])
    app.title = config["dashboard"]["title"]
    app.layout = build_layout(graph.to_dict(), title=config["dashboard"]["title"])
    register_callbacks(app, hit_radius=config["hit_radius"])
    return app
