import logging

import dash
from dash import Input, Output, State, callback_context

from pathsim.dijkstra import PathResult
from pathsim.editor import GraphEditor
from pathsim.graph_store import GraphStore

from .layout import (
    create_graph_figure,
    create_kpi_card,
    NODE_COLOR,
    EDGE_COLOR,
    PATH_COLOR,
    PLOT_FONT_COLOR,
)

logger = logging.getLogger(__name__)


# --- Store <-> editor conversion ---

def _result_to_json(result):
    if result is None:
        return None
    return {'path': list(result.path), 'distance': result.distance if result.reachable else None}


def _result_from_json(data):
    if not data:
        return None
    if data.get('distance') is None:
        return PathResult()
    return PathResult(data['path'], data['distance'])


def restore_editor(graph_data, session, hit_radius):
    """Rebuild a GraphEditor from the browser-side stores."""
    editor = GraphEditor(GraphStore.from_dict(graph_data), hit_radius=hit_radius)
    editor.dragging = session.get('selected')
    editor.last_result = _result_from_json(session.get('result'))
    for key, values in session.get('metrics', {}).items():
        editor.metrics.data[key] = list(values)
    return editor


def save_session(editor):
    return {
        'selected': editor.dragging,
        'result': _result_to_json(editor.last_result),
        'metrics': {k: list(v) for k, v in editor.metrics.data.items()},
    }


# --- Core Action Function ---

def apply_action(editor, trigger_id, click_data=None, form=None):
    """
    Runs ONE user action against the editor and returns the response.

    Canvas clicks: a click on a vertex selects it; a click on empty canvas
    moves the selected vertex there, or adds a vertex when none is selected.
    """
    form = form or {}
    if trigger_id == 'graph-canvas':
        points = (click_data or {}).get('points') or [{}]
        point = points[0]
        x, y = point.get('x'), point.get('y')
        if x is None or y is None:
            return None
        vertex_id = point.get('customdata')
        if vertex_id is None and editor.dragging is not None:
            response = editor.drag(x, y)
            editor.release()
            return response
        return editor.click(x, y)
    if trigger_id == 'btn-add-edge':
        return editor.add_edge(form.get('from'), form.get('to'), form.get('weight'))
    if trigger_id == 'btn-delete-node':
        return editor.delete_vertex(form.get('delete'))
    if trigger_id == 'btn-find-path':
        return editor.find_path(form.get('source'), form.get('destination'))
    return None


def summary_cards(editor):
    summary = editor.metrics.summary()
    avg_distance = f"{summary['distance']:.1f}" if editor.metrics.data['distance'] else "N/A"
    return (
        create_kpi_card("Vertices", str(editor.graph.vertex_count), NODE_COLOR),
        create_kpi_card("Edges", str(editor.graph.edge_count), EDGE_COLOR),
        create_kpi_card("Queries", str(editor.metrics.queries), PLOT_FONT_COLOR),
        create_kpi_card("Avg. Distance", avg_distance, PATH_COLOR),
    )


# --- Callback Registration ---

def register_callbacks(app, hit_radius=30):

    @app.callback(
        [Output('store-graph', 'data'),
         Output('store-session', 'data'),
         Output('path-output', 'children')],
        [Input('graph-canvas', 'clickData'),
         Input('btn-add-edge', 'n_clicks'),
         Input('btn-delete-node', 'n_clicks'),
         Input('btn-find-path', 'n_clicks')],
        [State('store-graph', 'data'),
         State('store-session', 'data'),
         State('input-from-node', 'value'),
         State('input-to-node', 'value'),
         State('input-edge-weight', 'value'),
         State('input-delete-node', 'value'),
         State('input-source', 'value'),
         State('input-destination', 'value')],
        prevent_initial_call=True
    )
    def handle_action(click_data, add_clicks, delete_clicks, find_clicks,
                      graph_data, session, from_node, to_node, weight,
                      delete_node, source, destination):
        """Applies a canvas click or form submission to the graph."""
        ctx = callback_context
        if not ctx.triggered: raise dash.exceptions.PreventUpdate
        trigger_id = ctx.triggered[0]['prop_id'].split('.')[0]

        editor = restore_editor(graph_data, session, hit_radius)
        form = {
            'from': from_node, 'to': to_node, 'weight': weight,
            'delete': delete_node, 'source': source, 'destination': destination,
        }
        response = apply_action(editor, trigger_id, click_data, form)
        if response is None:
            raise dash.exceptions.PreventUpdate

        logger.debug(f"[{trigger_id}] {response.message}")
        return editor.graph.to_dict(), save_session(editor), response.message

    @app.callback(
        [Output('graph-canvas', 'figure'),
         Output('kpi-vertices', 'children'),
         Output('kpi-edges', 'children'),
         Output('kpi-queries', 'children'),
         Output('kpi-avg-distance', 'children')],
        [Input('store-graph', 'data'),
         Input('store-session', 'data')],
    )
    def redraw(graph_data, session):
        """Redraws the canvas and KPI cards from the stores."""
        editor = restore_editor(graph_data, session, hit_radius)
        fig = create_graph_figure(editor.graph, editor.last_result, editor.dragging)
        return (fig,) + summary_cards(editor)
