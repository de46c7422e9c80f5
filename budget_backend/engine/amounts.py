"""Monthly amounts for income and expense lines.

All functions are pure and cheap; they run on every recompute.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..data_model import ExpenseCategory, IncomeSource, PercentageBase, coerce_number
from ..logger import get_logger

logger = get_logger(__name__)


def _range_midpoint(low, high) -> float:
    return (coerce_number(low) + coerce_number(high)) / 2


def resolve_income_amount(source: IncomeSource) -> float:
    """Effective monthly amount of an income line, after its optional deduction.

    A deduction of 0 % or less, or of 100 % or more, leaves the raw amount
    unchanged.
    """
    if source.type == "range":
        raw = _range_midpoint(source.min, source.max)
    else:
        raw = coerce_number(source.amount)
    pct = coerce_number(source.deduction_percent)
    if pct <= 0 or pct >= 100:
        return raw
    return raw * (1 - pct / 100)


def total_income(income_sources: Iterable[IncomeSource]) -> float:
    return sum(resolve_income_amount(source) for source in income_sources)


def resolve_percentage_base(
    percentage_of: PercentageBase | str | None,
    income_sources: Sequence[IncomeSource],
) -> float:
    """Amount a percentage expense is taken from.

    ``category`` sums the lines of one income group, ``source`` picks the first
    line matching group and name (0 when none does). Group names compare
    exactly; a line without a group belongs to "". Unparseable references
    resolve to total income and are logged.
    """
    if not isinstance(percentage_of, PercentageBase):
        percentage_of = PercentageBase.parse(percentage_of)

    if percentage_of.kind == "category":
        return total_income(s for s in income_sources if (s.group or "") == percentage_of.group)
    if percentage_of.kind == "source":
        for source in income_sources:
            if (source.group or "") == percentage_of.group and source.name == percentage_of.name:
                return resolve_income_amount(source)
        return 0.0
    if percentage_of.kind == "invalid":
        logger.warning("Unrecognized percentage base %r, using total income", percentage_of.raw)
    return total_income(income_sources)


def resolve_expense_amount(
    category: ExpenseCategory,
    total_income_amount: float,
    income_sources: Sequence[IncomeSource] | None = None,
) -> float:
    if category.type == "range":
        return _range_midpoint(category.min, category.max)
    if category.type == "percentage":
        if income_sources is not None:
            base = resolve_percentage_base(category.percentage_of, income_sources)
        else:
            base = total_income_amount
        return base * coerce_number(category.percentage) / 100
    return coerce_number(category.amount)


def total_expenses(
    expense_categories: Iterable[ExpenseCategory],
    income_sources: Sequence[IncomeSource],
) -> float:
    income = total_income(income_sources)
    return sum(resolve_expense_amount(cat, income, income_sources) for cat in expense_categories)


def disposable_income(
    income_sources: Sequence[IncomeSource],
    expense_categories: Iterable[ExpenseCategory],
) -> float:
    return total_income(income_sources) - total_expenses(expense_categories, income_sources)


def income_by_group(income_sources: Sequence[IncomeSource], group_names: List[str]) -> Dict[str, float]:
    """Per-group income totals; lines without a group count toward the first group."""
    default_group = group_names[0] if group_names else ""
    totals = {name: 0.0 for name in group_names}
    for source in income_sources:
        group = source.group if source.group is not None else default_group
        if group in totals:
            totals[group] += resolve_income_amount(source)
    return totals


def expenses_by_group(
    expense_categories: Sequence[ExpenseCategory],
    income_sources: Sequence[IncomeSource],
    group_names: List[str],
) -> Dict[str, float]:
    default_group = group_names[0] if group_names else ""
    income = total_income(income_sources)
    totals = {name: 0.0 for name in group_names}
    for category in expense_categories:
        group = category.group if category.group is not None else default_group
        if group in totals:
            totals[group] += resolve_expense_amount(category, income, income_sources)
    return totals
