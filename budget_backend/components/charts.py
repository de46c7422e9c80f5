# components/charts.py
from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import dcc, html

from ..config import PEA_CEILING
from ..engine.series import expand_stair_steps, to_display_series

BALANCE_COLOR = "hsl(210, 65%, 45%)"
PEA_COLOR = "hsl(142, 60%, 42%)"
NET_COLOR = "hsl(38, 90%, 50%)"


def format_month_label(month: float) -> str:
    """Axis label: "Aujourd'hui", "6 mois", "1 an", "2 ans et 3 mois"..."""
    if month == 0:
        return "Aujourd'hui"
    if month != int(month):
        return f"Mois {month:.1f}"
    month = int(month)
    years, months = divmod(month, 12)
    if years == 0:
        return f"{months} mois"
    year_label = f"{years} an{'s' if years > 1 else ''}"
    if months == 0:
        return year_label
    return f"{year_label} et {months} mois"


def _base_layout(fig: go.Figure, title: str) -> go.Figure:
    fig.update_layout(
        title=title,
        template="plotly_dark",
        hovermode="x unified",
        margin={"l": 40, "r": 20, "t": 50, "b": 40},
        xaxis_title="Mois",
        yaxis_title="Solde (€)",
        legend={"orientation": "h", "y": -0.2},
    )
    return fig


def build_savings_figure(series: List[dict], goal: float | None = None, goal_month: int | None = None, title: str = "Épargne") -> go.Figure:
    smooth = to_display_series(expand_stair_steps(series))
    fig = go.Figure(
        go.Scatter(
            x=[p["month"] for p in smooth],
            y=[p["balance"] for p in smooth],
            name="Solde projeté",
            mode="lines",
            fill="tozeroy",
            line={"color": BALANCE_COLOR, "shape": "hv"},
            customdata=[format_month_label(p["month"]) for p in smooth],
            hovertemplate="%{customdata}: %{y:,.2f} €<extra></extra>",
        )
    )
    if goal:
        fig.add_hline(y=goal, line_dash="dash", annotation_text="Objectif")
    if goal_month is not None:
        fig.add_vline(x=goal_month, line_dash="dot", annotation_text=format_month_label(goal_month))
    return _base_layout(fig, title)


def build_pea_figure(series: List[dict], ceiling: float = PEA_CEILING, title: str = "PEA") -> go.Figure:
    display = to_display_series(series)
    months = [p["month"] for p in display]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=months, y=[p["balance"] for p in display], name="Brut", mode="lines", fill="tozeroy", line={"color": PEA_COLOR})
    )
    fig.add_trace(
        go.Scatter(x=months, y=[p["net_balance"] for p in display], name="Net (prélèvements sociaux)", mode="lines", line={"color": NET_COLOR})
    )
    fig.add_hline(y=ceiling, line_dash="dash", annotation_text="Plafond")
    return _base_layout(fig, title)


def build_projection_card(title: str, figure: go.Figure, subtitle: str | None = None, graph_id: str | None = None):
    body = [html.H5(title, className="card-title")]
    if subtitle:
        body.append(html.P(subtitle, className="text-muted"))
    graph_kwargs = {"figure": figure, "config": {"displayModeBar": False}}
    if graph_id:
        graph_kwargs["id"] = graph_id
    body.append(dcc.Graph(**graph_kwargs))
    return dbc.Card(dbc.CardBody(body), className="mb-3")
