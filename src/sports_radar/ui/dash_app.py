from __future__ import annotations

import argparse
from typing import Any, Optional

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Dash, Input, Output, State, ctx, dash_table, dcc, html, no_update
from dash.exceptions import PreventUpdate

from sports_radar.core.controller import DashboardController
from sports_radar.core.io import build_session_payload, state_from_payload
from sports_radar.core.plotting import (
    AXIS_LINE_COLOR,
    FILL_COLOR,
    GRID_COLOR,
    LINE_COLOR,
    MARKER_COLOR,
    MARKER_LINE_COLOR,
    RadarPlotData,
    prepare_radar_plot,
)
from sports_radar.core.projection import DetailView, TableRow, project_sort_header
from sports_radar.core.state import METRICS, NAME_FIELD, OVERALL_FIELD, DashboardState
from sports_radar.data.loaders import DEFAULT_DATA_SOURCE
from sports_radar.utils.log import log_event

TABLE_ID = "sports-table"
STORE_ID = "dashboard-session"
RANK_COLUMN = "rank"
SPORT_KEY = "sport"

THEME_URL = dbc.themes.SUPERHERO
SELECTED_ROW_STYLE = {
    "backgroundColor": "rgba(59, 130, 246, 0.25)",
    "border": "1px solid rgba(96, 165, 250, 0.8)",
}

COLUMN_LABELS: dict[str, str] = {
    RANK_COLUMN: "#",
    NAME_FIELD: "Sport",
    OVERALL_FIELD: "Overall",
    **{m.key: m.label for m in METRICS},
}


def _table_columns() -> list[dict[str, str]]:
    return [{"name": label, "id": column_id} for column_id, label in COLUMN_LABELS.items()]


def _table_rows(rows: list[TableRow]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for row in rows:
        item: dict[str, Any] = {
            RANK_COLUMN: row.rank,
            NAME_FIELD: row.display_name,
            OVERALL_FIELD: row.overall_text,
            SPORT_KEY: row.name,
        }
        for m in METRICS:
            item[m.key] = row.metric_texts[m]
        out.append(item)
    return out


def _selected_row_styles(rows: list[TableRow]) -> list[dict[str, Any]]:
    return [
        {"if": {"row_index": idx}, **SELECTED_ROW_STYLE}
        for idx, row in enumerate(rows)
        if row.is_selected
    ]


def _sort_by(state: DashboardState) -> list[dict[str, str]]:
    header = project_sort_header(state.sort)
    return [{"column_id": header.field, "direction": "asc" if header.ascending else "desc"}]


def _sort_caption(state: DashboardState) -> str:
    header = project_sort_header(state.sort)
    return f"Sorted by {COLUMN_LABELS.get(header.field, header.field)} {header.indicator}"


def _clicked_field(sort_by: Optional[list[dict[str, Any]]], state: DashboardState) -> str:
    # The table cycles asc -> desc -> none on its own; an empty sort_by can only
    # come from clicking the column that is already sorted.
    if not sort_by:
        return state.sort.field
    return str(sort_by[0].get("column_id") or "")


def _row_name(active_cell: Optional[dict[str, Any]], rows: Optional[list[dict[str, Any]]]) -> Optional[str]:
    if not active_cell or not rows:
        return None
    try:
        idx = int(active_cell.get("row"))
    except (TypeError, ValueError):
        return None
    if idx < 0 or idx >= len(rows):
        return None
    name = rows[idx].get(SPORT_KEY)
    return str(name) if name else None


def _state_from_session(session_data: Optional[dict[str, Any]]) -> DashboardState:
    return state_from_payload(session_data)


def _session_from_state(state: DashboardState) -> dict[str, Any]:
    return build_session_payload(state)


def _radar_figure(data: RadarPlotData) -> go.Figure:
    fig = go.Figure()
    if data.axes:
        fig.add_trace(
            go.Scatterpolar(
                r=data.values,
                theta=data.axes,
                name=data.label,
                mode="lines+markers",
                fill="toself",
                fillcolor=FILL_COLOR,
                line=dict(color=LINE_COLOR, width=2),
                marker=dict(color=MARKER_COLOR, size=7, line=dict(color=MARKER_LINE_COLOR, width=1)),
                text=data.hover_texts,
                hoverinfo="text",
            )
        )
    fig.update_layout(
        template="plotly_dark",
        showlegend=False,
        margin=dict(l=40, r=40, t=30, b=30),
        paper_bgcolor="rgba(0,0,0,0)",
        polar=dict(
            bgcolor="rgba(0,0,0,0)",
            radialaxis=dict(range=list(data.radial_range), showticklabels=False, gridcolor=GRID_COLOR),
            angularaxis=dict(direction="clockwise", rotation=90, gridcolor=AXIS_LINE_COLOR, linecolor=AXIS_LINE_COLOR),
        ),
    )
    return fig


def _detail_children(detail: Optional[DetailView], has_records: bool) -> list:
    if detail is None:
        message = "Select a sport to see its profile." if has_records else "No sports loaded."
        return [html.P(message, className="text-muted")]
    stats = [
        html.Div(
            className="radar-stat-item",
            children=[
                html.Div(point.label, className="radar-stat-label text-muted small"),
                html.Div(point.value_text, className="radar-stat-value fw-bold"),
            ],
        )
        for point in detail.metric_series
    ]
    return [
        html.H2(detail.title, id="detail-title"),
        html.P(detail.subtitle, id="detail-subtitle", className="text-muted"),
        html.P(detail.overall_summary, id="detail-meta"),
        html.Div(stats, id="radar-stats", className="d-flex flex-wrap gap-3"),
    ]


def _render(state: DashboardState):
    controller = DashboardController(state)
    rows = controller.table()
    detail = controller.detail()
    return (
        _table_rows(rows),
        _selected_row_styles(rows),
        _sort_caption(state),
        _detail_children(detail, bool(state.records)),
        _radar_figure(prepare_radar_plot(detail)),
    )


def _root_layout(session: dict[str, Any]) -> html.Div:
    state = _state_from_session(session)
    table_data, table_styles, caption, detail_children, figure = _render(state)
    return dbc.Container(
        fluid=True,
        className="py-4",
        children=[
            dcc.Store(id=STORE_ID, storage_type="memory", data=session),
            html.H1("Sports Radar", className="mb-1"),
            html.P("Click a column header to sort, click a row to inspect a sport.", className="text-muted"),
            dbc.Row(
                [
                    dbc.Col(
                        [
                            html.Div(caption, id="sort-caption", className="small text-muted mb-2"),
                            dash_table.DataTable(
                                id=TABLE_ID,
                                columns=_table_columns(),
                                data=table_data,
                                sort_action="custom",
                                sort_mode="single",
                                sort_by=_sort_by(state),
                                style_data_conditional=table_styles,
                                style_table={"overflowX": "auto"},
                                style_cell={"padding": "0.4rem", "textAlign": "left", "cursor": "pointer"},
                                style_header={"fontWeight": "700"},
                                page_action="none",
                            ),
                        ],
                        lg=7,
                    ),
                    dbc.Col(
                        [
                            html.Div(detail_children, id="detail-panel"),
                            dcc.Graph(id="radar-graph", figure=figure, config={"displayModeBar": False}),
                        ],
                        lg=5,
                    ),
                ]
            ),
        ],
    )


def create_app(*, data_source: str = DEFAULT_DATA_SOURCE) -> Dash:
    controller = DashboardController()
    controller.load_source(data_source)
    app = Dash(
        __name__,
        external_stylesheets=[THEME_URL],
        title="Sports Radar",
    )
    app.layout = _root_layout(_session_from_state(controller.state))
    _register_callbacks(app)
    return app


def _register_callbacks(app: Dash) -> None:
    @app.callback(
        Output(STORE_ID, "data"),
        Output(TABLE_ID, "sort_by"),
        Output(TABLE_ID, "active_cell"),
        Input(TABLE_ID, "sort_by"),
        Input(TABLE_ID, "active_cell"),
        State(TABLE_ID, "data"),
        State(STORE_ID, "data"),
        prevent_initial_call=True,
    )
    def _on_table_event(
        sort_by: Optional[list[dict[str, Any]]],
        active_cell: Optional[dict[str, Any]],
        rows: Optional[list[dict[str, Any]]],
        session_data: Optional[dict[str, Any]],
    ):
        state = _state_from_session(session_data)
        controller = DashboardController(state)
        triggered = ctx.triggered_prop_ids

        if f"{TABLE_ID}.sort_by" in triggered:
            try:
                controller.on_header_click(_clicked_field(sort_by, state))
            except ValueError as exc:
                log_event("header click", str(exc))
            return _session_from_state(state), _sort_by(state), no_update

        if f"{TABLE_ID}.active_cell" in triggered:
            name = _row_name(active_cell, rows)
            if name is None:
                raise PreventUpdate
            controller.on_row_click(name)
            # clear the cell so clicking the same row again still fires
            return _session_from_state(state), no_update, None

        raise PreventUpdate

    @app.callback(
        Output(TABLE_ID, "data"),
        Output(TABLE_ID, "style_data_conditional"),
        Output("sort-caption", "children"),
        Output("detail-panel", "children"),
        Output("radar-graph", "figure"),
        Input(STORE_ID, "data"),
        prevent_initial_call=True,
    )
    def _render_from_session(session_data: Optional[dict[str, Any]]):
        return _render(_state_from_session(session_data))


def main(**run_kwargs) -> None:
    data_source = run_kwargs.pop("data_source", DEFAULT_DATA_SOURCE)
    app = create_app(data_source=data_source)
    app.run(**run_kwargs)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Sports Radar Dash UI")
    parser.add_argument("--data", default=DEFAULT_DATA_SOURCE)
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8050)
    parser.add_argument("--debug", dest="debug", action="store_true", default=False)
    args = parser.parse_args()
    main(data_source=args.data, host=args.host, port=args.port, debug=args.debug)
