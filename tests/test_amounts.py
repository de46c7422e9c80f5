import logging

import pytest

from budget_backend.data_model import ExpenseCategory, IncomeSource, PercentageBase
from budget_backend.engine.amounts import (
    disposable_income,
    expenses_by_group,
    income_by_group,
    resolve_expense_amount,
    resolve_income_amount,
    resolve_percentage_base,
    total_expenses,
    total_income,
)


def _sources():
    return [
        IncomeSource(name="Salaire", group="Revenus pro", amount=2500.0),
        IncomeSource(name="Freelance", group="Revenus pro", amount=1500.0),
        IncomeSource(name="Loyer perçu", group="Revenus perso", amount=800.0),
    ]


def test_range_income_uses_midpoint_then_deduction():
    source = IncomeSource(name="Freelance", type="range", min=2000.0, max=3000.0, deduction_percent=25.0)

    assert resolve_income_amount(source) == pytest.approx(1875.0)


@pytest.mark.parametrize("deduction", [None, 0.0, -5.0, 100.0, 150.0])
def test_out_of_range_deduction_keeps_raw_amount(deduction):
    source = IncomeSource(name="Salaire", amount=2000.0, deduction_percent=deduction)

    assert resolve_income_amount(source) == 2000.0


def test_missing_amounts_resolve_to_zero():
    assert resolve_income_amount(IncomeSource(name="Vide", type="range")) == 0.0
    assert resolve_income_amount(IncomeSource(name="Vide", amount=None)) == 0.0


def test_percentage_of_income_category():
    expense = ExpenseCategory(
        name="URSSAF",
        type="percentage",
        percentage=10.0,
        percentage_of=PercentageBase.parse("category:Revenus pro"),
    )
    sources = _sources()

    assert resolve_expense_amount(expense, total_income(sources), sources) == pytest.approx(400.0)


def test_percentage_of_single_income_line():
    sources = _sources()

    assert resolve_percentage_base(PercentageBase.source("Revenus pro", "Freelance"), sources) == 1500.0
    assert resolve_percentage_base("source:Revenus pro|Inconnu", sources) == 0.0


def test_unknown_category_sums_nothing():
    assert resolve_percentage_base("category:Autres", _sources()) == 0.0


def test_category_match_is_exact_and_case_sensitive():
    assert resolve_percentage_base("category:revenus pro", _sources()) == 0.0


def test_lines_without_group_match_empty_category():
    sources = [IncomeSource(name="Salaire", amount=1000.0)]

    assert resolve_percentage_base("category:", sources) == 1000.0
    assert resolve_percentage_base("source:Salaire", sources) == 1000.0


def test_malformed_reference_falls_back_to_total_and_is_logged(caplog):
    sources = _sources()

    with caplog.at_level(logging.WARNING, logger="budget_backend"):
        explicit = resolve_percentage_base("total", sources)
        assert not caplog.records
        fallback = resolve_percentage_base("salary-only", sources)

    assert explicit == fallback == pytest.approx(4800.0)
    assert any("salary-only" in record.getMessage() for record in caplog.records)


def test_percentage_without_sources_uses_given_total():
    expense = ExpenseCategory(name="Épargne", type="percentage", percentage=20.0)

    assert resolve_expense_amount(expense, 3000.0) == pytest.approx(600.0)


def test_fixed_and_range_expenses():
    assert resolve_expense_amount(ExpenseCategory(name="Loyer", amount=900.0), 0.0) == 900.0
    assert resolve_expense_amount(ExpenseCategory(name="Courses", type="range", min=300.0, max=500.0), 0.0) == 400.0


def test_disposable_income_is_income_minus_expenses():
    sources = _sources()
    expenses = [
        ExpenseCategory(name="Loyer", amount=1200.0),
        ExpenseCategory(name="URSSAF", type="percentage", percentage=10.0, percentage_of=PercentageBase.category("Revenus pro")),
    ]

    assert total_expenses(expenses, sources) == pytest.approx(1600.0)
    assert disposable_income(sources, expenses) == pytest.approx(3200.0)


def test_group_totals_default_to_first_group():
    sources = [IncomeSource(name="Salaire", amount=1000.0), IncomeSource(name="Bonus", group="Revenus pro", amount=200.0)]
    expenses = [ExpenseCategory(name="Loyer", amount=500.0), ExpenseCategory(name="Compta", group="Dépenses pro", amount=50.0)]

    assert income_by_group(sources, ["Revenus perso", "Revenus pro"]) == {"Revenus perso": 1000.0, "Revenus pro": 200.0}
    assert expenses_by_group(expenses, sources, ["Dépenses perso", "Dépenses pro"]) == {
        "Dépenses perso": 500.0,
        "Dépenses pro": 50.0,
    }
