"""Everything the dashboard pages derive from a profile."""
from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..config import (
    CHART_DEFAULT_MONTHS,
    CHART_MAX_MONTHS,
    CHART_MONTHS_AFTER_GOAL,
    EMERGENCY_FUND_MONTHS,
    PEA_CEILING,
    PEA_EXTRA_MONTHS_AFTER_GOAL,
    PEA_PLACEMENT_NAME,
    SAVINGS_PLACEMENT_NAME,
)
from ..data_model import PlacementAllocation, Profile, SavingsAccount, coerce_number
from .amounts import expenses_by_group, income_by_group, total_expenses, total_income
from .pea import (
    capped_pea_balance,
    month_ceiling_reached,
    monthly_dividend_amount,
    pea_balance,
    pea_projection,
    remaining_ceiling,
    total_annual_dividends,
    weighted_average_roe,
)
from .savings import GoalEstimate, estimate_goal, projected_balance_series


def placement_monthly_amount(disposable: float, allocations: Sequence[PlacementAllocation], name: str) -> float:
    """Monthly amount sent to the destination called ``name`` (case-insensitive)."""
    for allocation in allocations:
        if allocation.name.lower() == name.lower():
            return disposable * coerce_number(allocation.percentage) / 100
    return 0.0


def account_goal(account: SavingsAccount, expenses: float) -> float:
    """Emergency-fund goal is six months of expenses; other accounts use their own goal."""
    if account.is_emergency_fund():
        return EMERGENCY_FUND_MONTHS * expenses
    return coerce_number(account.goal_amount)


def chart_horizon(goal: float, estimate: GoalEstimate) -> int:
    if goal > 0 and estimate.months is not None:
        return min(estimate.months + CHART_MONTHS_AFTER_GOAL, CHART_MAX_MONTHS)
    return CHART_DEFAULT_MONTHS


class ProfileTotals:
    """Income, expenses and disposable income of a profile, computed once."""

    def __init__(self, profile: Profile) -> None:
        self.income = total_income(profile.income_sources)
        self.expenses = total_expenses(profile.expense_categories, profile.income_sources)
        self.disposable = self.income - self.expenses
        self.savings_pool = placement_monthly_amount(self.disposable, profile.placement_allocation, SAVINGS_PLACEMENT_NAME)
        self.pea_pool = placement_monthly_amount(self.disposable, profile.placement_allocation, PEA_PLACEMENT_NAME)

    @property
    def show_placements(self) -> bool:
        return self.income > 0 and self.expenses > 0 and self.disposable >= 0


def savings_account_projection(account: SavingsAccount, totals: ProfileTotals) -> Dict[str, Any]:
    balance = coerce_number(account.current_balance)
    rate = coerce_number(account.rate_percent)
    contribution = totals.savings_pool * coerce_number(account.allocation_percent) / 100
    goal = account_goal(account, totals.expenses)
    estimate = estimate_goal(balance, contribution, rate, goal, account.interest_frequency)
    horizon = chart_horizon(goal, estimate)
    return {
        "name": account.name,
        "balance": balance,
        "ratePercent": rate,
        "interestFrequency": account.interest_frequency,
        "monthlyContribution": contribution,
        "goal": goal if goal > 0 else None,
        "estimate": estimate.to_dict(),
        "horizon": horizon,
        "series": projected_balance_series(balance, contribution, rate, account.interest_frequency, horizon),
    }


def pea_summary(profile: Profile, totals: ProfileTotals, ceiling: float = PEA_CEILING) -> Dict[str, Any]:
    holdings = profile.all_holdings()
    balance = pea_balance(profile.pea_actions, profile.pea_etfs)
    capped = capped_pea_balance(balance, ceiling)
    roe = weighted_average_roe(holdings)
    series = pea_projection(
        capped,
        totals.pea_pool,
        monthly_dividend_amount(holdings),
        ceiling,
        PEA_EXTRA_MONTHS_AFTER_GOAL,
        roe,
    )
    reached = month_ceiling_reached(series, ceiling)
    return {
        "balance": balance,
        "cappedBalance": capped,
        "remainingCeiling": remaining_ceiling(balance, ceiling),
        "ceiling": ceiling,
        "monthlyContribution": totals.pea_pool,
        "annualDividends": total_annual_dividends(holdings),
        "weightedAverageRoe": roe,
        "ceilingReachedMonth": reached,
        "series": series,
    }


def build_dashboard_summary(profile: Profile) -> Dict[str, Any]:
    totals = ProfileTotals(profile)
    savings_total = sum(coerce_number(a.current_balance) for a in profile.savings_accounts)
    placements: List[Dict[str, Any]] = [
        {
            "name": allocation.name,
            "percentage": allocation.percentage,
            "monthlyAmount": totals.disposable * coerce_number(allocation.percentage) / 100,
        }
        for allocation in profile.placement_allocation
    ]
    pea = pea_summary(profile, totals)
    return {
        "totalIncome": totals.income,
        "totalExpenses": totals.expenses,
        "disposableIncome": totals.disposable,
        "showPlacements": totals.show_placements,
        "incomeByGroup": income_by_group(profile.income_sources, profile.income_group_names),
        "expensesByGroup": expenses_by_group(
            profile.expense_categories, profile.income_sources, profile.expense_group_names
        ),
        "placements": placements,
        "placementTotal": sum(coerce_number(a.percentage) for a in profile.placement_allocation),
        "savingsTotal": savings_total,
        "peaTotal": pea["balance"],
        "totalPlacements": savings_total + pea["balance"],
        "savingsAccounts": [savings_account_projection(a, totals) for a in profile.savings_accounts],
        "pea": pea,
    }
