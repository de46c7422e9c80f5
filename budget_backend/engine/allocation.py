"""Percentage splits that must total 100.

An edit only touches the edited item and one adjustment slot: the last item,
or the first one when the last item is the one being edited.
"""
from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from ..data_model import PlacementAllocation, SavingsAccount, coerce_number, new_savings_account


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def apply_percentage_edit(percentages: Sequence[float], index: int, value: float) -> List[float]:
    if not 0 <= index < len(percentages):
        raise IndexError(f"Allocation index {index} out of range")
    result = [coerce_number(p) for p in percentages]
    result[index] = _clamp_percent(coerce_number(value))
    last_index = len(result) - 1
    adjusted_index = 0 if index == last_index else last_index
    others = sum(p for i, p in enumerate(result) if i != adjusted_index)
    result[adjusted_index] = _clamp_percent(round(100 - others, 2))
    return result


def equal_split(n: int) -> List[float]:
    """``n`` equal shares rounded to 2 decimals; the last one absorbs the remainder."""
    if n <= 0:
        return []
    per = round(100 / n, 2)
    return [per] * (n - 1) + [max(0.0, round(100 - (n - 1) * per, 2))]


def allocation_total(percentages: Sequence[float]) -> float:
    return sum(coerce_number(p) for p in percentages)


def update_placement_percentage(
    allocations: Sequence[PlacementAllocation], index: int, value: float
) -> List[PlacementAllocation]:
    split = apply_percentage_edit([a.percentage for a in allocations], index, value)
    return [replace(a, percentage=pct) for a, pct in zip(allocations, split)]


def update_account_allocation(
    accounts: Sequence[SavingsAccount], index: int, value: float
) -> List[SavingsAccount]:
    split = apply_percentage_edit([a.allocation_percent for a in accounts], index, value)
    return [replace(a, allocation_percent=pct) for a, pct in zip(accounts, split)]


def _with_equal_split(accounts: List[SavingsAccount]) -> List[SavingsAccount]:
    return [replace(a, allocation_percent=pct) for a, pct in zip(accounts, equal_split(len(accounts)))]


def add_savings_account(
    accounts: Sequence[SavingsAccount], account: SavingsAccount | None = None
) -> List[SavingsAccount]:
    return _with_equal_split([*accounts, account or new_savings_account()])


def remove_savings_account(accounts: Sequence[SavingsAccount], index: int) -> List[SavingsAccount]:
    """Drop one account and split the pool equally; the last account is kept."""
    if len(accounts) <= 1:
        return list(accounts)
    if not 0 <= index < len(accounts):
        raise IndexError(f"Account index {index} out of range")
    return _with_equal_split([a for i, a in enumerate(accounts) if i != index])
