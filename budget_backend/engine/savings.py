"""Savings account growth projections.

Interest is compounded according to the account's capitalization frequency:

- daily:   x (1 + r/365)^(365/12) each month (about 30.44 days per month)
- weekly:  x (1 + r/52)^(52/12) each month
- monthly: x (1 + r/12) each month
- annual:  contributions every month, x (1 + r) once every 12 months

The goal search and the chart series share ``iter_balances`` so they always
agree on the month a goal is first met. Balances are never rounded here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Literal, Optional

from ..config import DEFAULT_INTEREST_FREQUENCY, SAVINGS_MAX_MONTHS
from ..data_model import coerce_number

GoalStatus = Literal["no_goal", "already_met", "reached", "unreachable"]


def monthly_growth_factor(annual_rate_percent: float, frequency: str) -> float:
    """Per-month multiplier for the smooth frequencies (not used for ``annual``)."""
    r = coerce_number(annual_rate_percent) / 100
    if frequency == "daily":
        return (1 + r / 365) ** (365 / 12)
    if frequency == "weekly":
        return (1 + r / 52) ** (52 / 12)
    return 1 + r / 12


def iter_balances(
    initial_balance: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    frequency: str = DEFAULT_INTEREST_FREQUENCY,
) -> Iterator[tuple[int, float]]:
    """Yield ``(month, balance)`` for months 1, 2, ... without end."""
    balance = coerce_number(initial_balance)
    monthly_contribution = coerce_number(monthly_contribution)
    annual_rate_percent = coerce_number(annual_rate_percent)
    month = 0
    if frequency == "annual":
        yearly_factor = 1 + annual_rate_percent / 100
        while True:
            month += 1
            balance += monthly_contribution
            if month % 12 == 0:
                balance *= yearly_factor
            yield month, balance
    growth = monthly_growth_factor(annual_rate_percent, frequency)
    while True:
        month += 1
        balance = balance * growth + monthly_contribution
        yield month, balance


@dataclass(frozen=True)
class GoalEstimate:
    status: GoalStatus
    months: Optional[int] = None

    @property
    def years(self) -> Optional[int]:
        return None if self.months is None else self.months // 12

    @property
    def remaining_months(self) -> Optional[int]:
        return None if self.months is None else self.months % 12

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "months": self.months,
            "years": self.years,
            "remainingMonths": self.remaining_months,
        }


def estimate_goal(
    initial_balance: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    goal: float,
    frequency: str = DEFAULT_INTEREST_FREQUENCY,
    max_months: int = SAVINGS_MAX_MONTHS,
) -> GoalEstimate:
    goal = coerce_number(goal)
    initial_balance = coerce_number(initial_balance)
    if goal <= 0:
        return GoalEstimate("no_goal")
    if initial_balance >= goal:
        return GoalEstimate("already_met", 0)
    for month, balance in iter_balances(initial_balance, monthly_contribution, annual_rate_percent, frequency):
        if balance >= goal:
            return GoalEstimate("reached", month)
        if month >= max_months:
            break
    return GoalEstimate("unreachable")


def months_to_reach_goal(
    initial_balance: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    goal: float,
    frequency: str = DEFAULT_INTEREST_FREQUENCY,
) -> Optional[int]:
    """Months until ``goal`` is met; 0 if already met, None when there is no goal
    or it is not met within 100 years. Use ``estimate_goal`` to tell those apart."""
    return estimate_goal(initial_balance, monthly_contribution, annual_rate_percent, goal, frequency).months


def projected_balance_series(
    initial_balance: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    frequency: str,
    horizon: int,
) -> List[dict]:
    """Balance at every month from 0 (today) to ``horizon`` inclusive."""
    series = [{"month": 0, "balance": coerce_number(initial_balance)}]
    if horizon <= 0:
        return series
    for month, balance in iter_balances(initial_balance, monthly_contribution, annual_rate_percent, frequency):
        series.append({"month": month, "balance": balance})
        if month >= horizon:
            break
    return series


def month_goal_reached(series: List[dict], goal: float) -> Optional[int]:
    """First month after today whose balance meets ``goal``."""
    goal = coerce_number(goal)
    if goal <= 0 or not series:
        return None
    for point in series:
        if point["month"] > 0 and point["balance"] >= goal:
            return point["month"]
    return None
