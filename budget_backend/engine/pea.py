"""PEA (plan d'épargne en actions) projections.

Each month: balance = min(ceiling, balance x (1 + ROE)^(1/12) + contribution
+ dividends / 12). ``net_balance`` is the balance after social levies.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from ..config import PEA_CEILING, PEA_MAX_MONTHS, PEA_NET_COEFFICIENT
from ..data_model import PEAHolding, coerce_number


def _point(month: int, balance: float) -> dict:
    return {"month": month, "balance": balance, "net_balance": balance * PEA_NET_COEFFICIENT}


def pea_projection(
    initial_balance: float,
    monthly_contribution: float,
    monthly_dividend_amount: float,
    ceiling: float = PEA_CEILING,
    extra_months_after_goal: int = 0,
    annual_roe_percent: float = 0.0,
    max_months: int = PEA_MAX_MONTHS,
) -> List[dict]:
    """Monthly gross and net balances until the ceiling is reached.

    ``extra_months_after_goal`` flat points are appended after the growth
    phase so charts continue past the goal; no point goes beyond
    ``max_months`` unless the account starts at the ceiling.
    """
    ceiling = coerce_number(ceiling)
    monthly_contribution = coerce_number(monthly_contribution)
    monthly_dividend_amount = coerce_number(monthly_dividend_amount)
    annual_roe_percent = coerce_number(annual_roe_percent)
    extra_months_after_goal = int(coerce_number(extra_months_after_goal))
    balance = min(max(coerce_number(initial_balance), 0.0), ceiling)
    data = [_point(0, balance)]

    if balance >= ceiling:
        data.extend(_point(m, ceiling) for m in range(1, extra_months_after_goal + 1))
        return data

    growth = (1 + annual_roe_percent / 100) ** (1 / 12) if annual_roe_percent > 0 else 1.0
    total_monthly = monthly_contribution + monthly_dividend_amount
    if total_monthly <= 0 and growth <= 1:
        data.append(_point(12, balance))
        return data

    month = 0
    while month < max_months:
        month += 1
        balance = min(ceiling, balance * growth + total_monthly)
        data.append(_point(month, balance))
        if balance >= ceiling:
            break

    for m in range(month + 1, min(month + extra_months_after_goal, max_months) + 1):
        data.append(_point(m, balance))
    return data


def month_ceiling_reached(series: List[dict], ceiling: float = PEA_CEILING) -> Optional[int]:
    for point in series:
        if point["month"] > 0 and point["balance"] >= ceiling:
            return point["month"]
    return None


def holding_value(holding: PEAHolding) -> float:
    return coerce_number(holding.quantity) * coerce_number(holding.price)


def holding_annual_dividend(holding: PEAHolding) -> float:
    pct = coerce_number(holding.dividend_percent_per_year)
    if pct <= 0:
        return 0.0
    return holding_value(holding) * pct / 100


def total_annual_dividends(holdings: Iterable[PEAHolding]) -> float:
    return sum(holding_annual_dividend(h) for h in holdings)


def monthly_dividend_amount(holdings: Iterable[PEAHolding]) -> float:
    return total_annual_dividends(holdings) / 12


def weighted_average_roe(holdings: Iterable[PEAHolding]) -> float:
    """Value-weighted ROE over holdings that have a positive value and ROE.

    Lines without an ROE are left out entirely, so adding one never dilutes
    the growth rate applied to the whole balance.
    """
    total_value = 0.0
    weighted_sum = 0.0
    for holding in holdings:
        value = holding_value(holding)
        roe = coerce_number(holding.roe_percent)
        if value <= 0 or roe <= 0:
            continue
        total_value += value
        weighted_sum += value * roe
    return weighted_sum / total_value if total_value > 0 else 0.0


def pea_balance(actions: Iterable[PEAHolding], etfs: Iterable[PEAHolding]) -> float:
    return sum(holding_value(h) for h in actions) + sum(holding_value(h) for h in etfs)


def capped_pea_balance(balance: float, ceiling: float = PEA_CEILING) -> float:
    return max(0.0, min(ceiling, balance))


def remaining_ceiling(balance: float, ceiling: float = PEA_CEILING) -> float:
    return max(0.0, ceiling - capped_pea_balance(balance, ceiling))
