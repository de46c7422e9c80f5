import dash_bootstrap_components as dbc

from budget_backend.components.charts import (
    build_pea_figure,
    build_projection_card,
    build_savings_figure,
    format_month_label,
)
from budget_backend.engine.pea import pea_projection
from budget_backend.engine.savings import projected_balance_series


def test_month_labels():
    assert format_month_label(0) == "Aujourd'hui"
    assert format_month_label(6) == "6 mois"
    assert format_month_label(12) == "1 an"
    assert format_month_label(27) == "2 ans et 3 mois"
    assert format_month_label(2.5) == "Mois 2.5"


def test_savings_figure_marks_goal():
    series = projected_balance_series(0.0, 100.0, 0.0, "monthly", 12)

    fig = build_savings_figure(series, goal=1000.0, goal_month=10)

    assert len(fig.data) == 1
    assert len(fig.data[0].x) == 121
    assert len(fig.layout.shapes) == 2


def test_pea_figure_has_gross_and_net():
    series = pea_projection(0.0, 1000.0, 0.0, 5000.0, 2, 0.0)

    fig = build_pea_figure(series, ceiling=5000.0)

    assert [trace.name for trace in fig.data] == ["Brut", "Net (prélèvements sociaux)"]
    assert list(fig.data[1].y) == [round(p["net_balance"], 2) for p in series]


def test_projection_card_wraps_graph():
    fig = build_savings_figure(projected_balance_series(0.0, 100.0, 0.0, "monthly", 3))

    card = build_projection_card("Sécurité", fig, subtitle="Objectif dans 5 mois", graph_id="savings-0")

    assert isinstance(card, dbc.Card)
