import dash_bootstrap_components as dbc
from dash import dcc, html
import plotly.graph_objects as go

# --- Colors ---
PLOT_BG_COLOR = '#1D1D1D'
PLOT_FONT_COLOR = '#F1F5F9'
EDGE_COLOR = '#4682B4'       # Steel Blue
PATH_COLOR = '#FF4500'       # Orange Red
NODE_COLOR = '#00FA9A'       # Medium Spring Green
NODE_LINE_COLOR = '#006400'
SELECTED_COLOR = '#FFD700'   # Gold
WEIGHT_COLOR = '#FFD700'
GRID_COLOR = '#333333'
# ------------------------------------------------

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 500
CLICK_GRID_STEP = 20

# --- Plot & Card Creation Functions ---

def _click_capture_trace():
    """Invisible point grid so clicks on empty canvas report coordinates."""
    xs, ys = [], []
    for x in range(0, CANVAS_WIDTH + 1, CLICK_GRID_STEP):
        for y in range(0, CANVAS_HEIGHT + 1, CLICK_GRID_STEP):
            xs.append(x)
            ys.append(y)
    return go.Scatter(
        x=xs, y=ys, mode='markers', name='canvas',
        marker=dict(size=CLICK_GRID_STEP, color='rgba(0,0,0,0)'),
        hoverinfo='none', showlegend=False,
    )


def create_graph_figure(graph=None, result=None, selected=None):
    """Generates the Plotly Figure for a GraphStore with the shortest path highlighted."""
    if graph is None:
        return create_empty_figure("Graph")

    on_path = set(result.path) if result is not None else set()

    edge_traces = []
    annotations = []
    for edge in graph.edges:
        x0, y0 = graph.vertex(edge.source).position
        x1, y1 = graph.vertex(edge.target).position
        highlighted = result is not None and result.contains_edge(edge.source, edge.target)
        edge_traces.append(go.Scatter(
            x=[x0, x1], y=[y0, y1], mode='lines',
            line=dict(width=6 if highlighted else 4, color=PATH_COLOR if highlighted else EDGE_COLOR),
            hoverinfo='text', text=f"Edge {edge.source}-{edge.target}<br>Weight: {edge.weight}",
            showlegend=False,
        ))
        annotations.append(dict(
            x=(x0 + x1) / 2, y=(y0 + y1) / 2, text=str(edge.weight),
            showarrow=False, font=dict(size=18, color=WEIGHT_COLOR),
        ))

    node_x, node_y, node_color, node_ids = [], [], [], []
    for vertex in graph.vertices:
        x, y = vertex.position
        node_x.append(x)
        node_y.append(y)
        node_ids.append(vertex.id)
        if vertex.id == selected:
            node_color.append(SELECTED_COLOR)
        elif vertex.id in on_path:
            node_color.append(PATH_COLOR)
        else:
            node_color.append(NODE_COLOR)

    node_trace = go.Scatter(
        x=node_x, y=node_y, mode='markers+text', name='vertices',
        text=[str(i) for i in node_ids], textposition='middle center',
        textfont=dict(size=18, color='#000000'),
        customdata=node_ids, hoverinfo='text',
        hovertext=[f"<b>Vertex {i}</b>" for i in node_ids],
        marker=dict(size=44, color=node_color, line=dict(width=4, color=NODE_LINE_COLOR)),
        showlegend=False,
    )

    fig = go.Figure(
        data=[_click_capture_trace()] + edge_traces + [node_trace],
        layout=go.Layout(
            title='Graph',
            hovermode='closest',
            annotations=annotations,
            margin=dict(b=0, l=0, r=0, t=40),
            xaxis=dict(range=[0, CANVAS_WIDTH], showgrid=False, zeroline=False, showticklabels=False),
            yaxis=dict(range=[CANVAS_HEIGHT, 0], showgrid=False, zeroline=False, showticklabels=False),
            plot_bgcolor=PLOT_BG_COLOR,
            paper_bgcolor=PLOT_BG_COLOR,
            font_color=PLOT_FONT_COLOR,
        )
    )
    return fig

def create_empty_figure(title):
    """Creates a blank canvas figure with a title, styled for the theme."""
    return go.Figure(
        data=[_click_capture_trace()],
        layout=go.Layout(
            title=title,
            xaxis=dict(range=[0, CANVAS_WIDTH], gridcolor=GRID_COLOR, zeroline=False, showticklabels=False),
            yaxis=dict(range=[CANVAS_HEIGHT, 0], gridcolor=GRID_COLOR, zeroline=False, showticklabels=False),
            paper_bgcolor=PLOT_BG_COLOR,
            plot_bgcolor=PLOT_BG_COLOR,
            font_color=PLOT_FONT_COLOR
        )
    )

def create_kpi_card(title, value, color):
    """Creates a single KPI stat card using the custom CSS class."""
    return html.Div(
        [
            html.P(title, className="card-title"),
            html.H3(value, className="card-text", style={'color': color}),
        ],
        className="kpi-card"
    )

# --- Layout Building Functions ---

def build_navbar(title="Path-Sim"):
    """Builds the top navigation bar."""
    return dbc.Navbar(
        dbc.Container([
            html.A(
                html.Div([
                    html.Span(title),
                    html.Span(" // Shortest Path Editor", className="navbar-brand-accent")
                ], className="navbar-brand"),
                href="#",
                style={"textDecoration": "none"},
            )
        ], fluid=True),
        className="mb-4",
    )


def _labelled_input(label, input_id, placeholder=None):
    return dbc.Col([
        dbc.Label(label),
        dbc.Input(id=input_id, type="text", placeholder=placeholder),
    ], width=4)


def build_control_panel():
    """Builds the edge / delete / query form controls."""
    return dbc.Card(
        dbc.CardBody([
            dbc.Row([
                dbc.Col(html.H5("Add Edge"), width=12),
                _labelled_input("From vertex:", "input-from-node"),
                _labelled_input("To vertex:", "input-to-node"),
                _labelled_input("Weight:", "input-edge-weight"),
            ]),
            dbc.Button("Add Edge", id="btn-add-edge", color="primary", className="mt-2", n_clicks=0),
            html.Hr(style={'borderColor': GRID_COLOR}),

            dbc.Row([
                dbc.Col(html.H5("Delete Vertex"), width=12),
                _labelled_input("Vertex:", "input-delete-node"),
            ]),
            html.Small("Remaining vertices are renumbered 1..N after a delete",
                       style={'color': 'var(--muted-text)', 'fontStyle': 'italic'}),
            html.Br(),
            dbc.Button("Delete Vertex", id="btn-delete-node", color="danger", className="mt-2", n_clicks=0),
            html.Hr(style={'borderColor': GRID_COLOR}),

            dbc.Row([
                dbc.Col(html.H5("Shortest Path"), width=12),
                _labelled_input("Source:", "input-source"),
                _labelled_input("Destination:", "input-destination"),
            ]),
            dbc.Button("Find Path", id="btn-find-path", color="success", className="mt-2", n_clicks=0),
        ]),
    )

def build_layout(graph_data=None, title="Path-Sim"):
    """Builds the main app layout, optionally seeded with a graph snapshot."""
    return html.Div([
        dcc.Store(id='store-graph', data=graph_data or {'vertices': [], 'edges': []}),
        dcc.Store(id='store-session', data={'selected': None, 'result': None,
                                            'metrics': {'distance': [], 'hops': [], 'reachable': []}}),

        build_navbar(title),

        dbc.Container([
            dbc.Row([
                dbc.Col([
                    html.H1("Interactive Shortest Path", style={'fontWeight': '700'}),
                    html.P("Click empty canvas to add a vertex; click a vertex, then the canvas, to move it",
                           className="lead", style={'color': 'var(--muted-text)'}),
                ], width=12),
            ]),

            dbc.Row([
                dbc.Col(create_kpi_card("Vertices", "0", NODE_COLOR), id="kpi-vertices", width=3),
                dbc.Col(create_kpi_card("Edges", "0", EDGE_COLOR), id="kpi-edges", width=3),
                dbc.Col(create_kpi_card("Queries", "0", PLOT_FONT_COLOR), id="kpi-queries", width=3),
                dbc.Col(create_kpi_card("Avg. Distance", "N/A", PATH_COLOR), id="kpi-avg-distance", width=3),
            ], className="mt-2 mb-3"),

            dbc.Row([
                dbc.Col(dbc.Card(dbc.CardBody(dcc.Graph(id="graph-canvas", style={"height": "60vh"}))), width=8),
                dbc.Col(build_control_panel(), width=4),
            ]),

            dbc.Row([
                dbc.Col(dbc.Card(dbc.CardBody([
                    html.H5("Output"),
                    html.Pre(id="path-output", children="", style={'whiteSpace': 'pre-wrap'}),
                ])), width=12)
            ], className="mt-3"),

        ], fluid=True, style={'padding': '0 2rem 2rem 2rem'})
    ])
