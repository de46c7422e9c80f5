"""
Projection engine: amount resolution, savings and PEA projections, allocation splits.
"""

from .amounts import disposable_income, resolve_expense_amount, resolve_income_amount, resolve_percentage_base
from .pea import month_ceiling_reached, pea_projection, weighted_average_roe
from .savings import estimate_goal, month_goal_reached, months_to_reach_goal, projected_balance_series
from .summary import build_dashboard_summary

__all__ = [
    "build_dashboard_summary",
    "disposable_income",
    "estimate_goal",
    "month_ceiling_reached",
    "month_goal_reached",
    "months_to_reach_goal",
    "pea_projection",
    "projected_balance_series",
    "resolve_expense_amount",
    "resolve_income_amount",
    "resolve_percentage_base",
    "weighted_average_roe",
]
