import pytest

from budget_backend.config import PEA_CEILING, PEA_NET_COEFFICIENT
from budget_backend.data_model import PEAHolding
from budget_backend.engine.pea import (
    capped_pea_balance,
    holding_annual_dividend,
    month_ceiling_reached,
    monthly_dividend_amount,
    pea_balance,
    pea_projection,
    remaining_ceiling,
    total_annual_dividends,
    weighted_average_roe,
)


def test_account_already_at_ceiling_stays_flat():
    data = pea_projection(150000.0, 100.0, 50.0, 150000.0, 3, 5.0)

    assert [point["month"] for point in data] == [0, 1, 2, 3]
    for point in data:
        assert point["balance"] == 150000.0
        assert point["net_balance"] == 124200.0


def test_balance_capped_and_net_follows_gross():
    data = pea_projection(20000.0, 1000.0, 50.0, PEA_CEILING, 3, 7.0)
    reached = month_ceiling_reached(data, PEA_CEILING)

    assert reached is not None
    for point in data:
        assert point["balance"] <= PEA_CEILING
        assert point["net_balance"] == point["balance"] * PEA_NET_COEFFICIENT
    trailing = [point for point in data if point["month"] >= reached]
    assert [point["month"] for point in trailing] == [reached, reached + 1, reached + 2, reached + 3]
    assert all(point["balance"] == PEA_CEILING for point in trailing)


def test_last_step_is_clamped_to_ceiling():
    data = pea_projection(0.0, 3000.0, 0.0, 5000.0, 2, 0.0)

    assert [(p["month"], p["balance"]) for p in data] == [(0, 0.0), (1, 3000.0), (2, 5000.0), (3, 5000.0), (4, 5000.0)]
    assert month_ceiling_reached(data, 5000.0) == 2


def test_no_inflow_and_no_growth_gives_flat_placeholder():
    data = pea_projection(1000.0, 0.0, 0.0, PEA_CEILING, 24, 0.0)

    assert [(p["month"], p["balance"]) for p in data] == [(0, 1000.0), (12, 1000.0)]
    assert month_ceiling_reached(data, PEA_CEILING) is None


def test_iteration_cap_stops_series_without_extra_months():
    data = pea_projection(0.0, 1.0, 0.0, PEA_CEILING, 5, 0.0)

    assert len(data) == 601
    assert data[-1]["month"] == 600
    assert data[-1]["balance"] == pytest.approx(600.0)
    assert month_ceiling_reached(data, PEA_CEILING) is None


def test_roe_compounds_annually():
    data = pea_projection(1000.0, 0.0, 0.0, PEA_CEILING, 0, 10.0)

    assert data[12]["balance"] == pytest.approx(1100.0)
    assert data[24]["balance"] == pytest.approx(1210.0)


def test_initial_balance_above_ceiling_is_capped():
    data = pea_projection(200000.0, 0.0, 0.0, PEA_CEILING, 1, 0.0)

    assert [p["balance"] for p in data] == [PEA_CEILING, PEA_CEILING]


def test_weighted_average_roe():
    holdings = [
        PEAHolding(name="A", quantity=10, price=100.0, roe_percent=10.0),
        PEAHolding(name="B", quantity=30, price=100.0, roe_percent=20.0),
    ]

    assert weighted_average_roe(holdings) == pytest.approx(17.5)


def test_holdings_without_roe_do_not_dilute():
    holdings = [
        PEAHolding(name="A", quantity=10, price=100.0, roe_percent=10.0),
        PEAHolding(name="B", quantity=30, price=100.0, roe_percent=20.0),
    ]
    extra = [
        PEAHolding(name="C", quantity=50, price=100.0, roe_percent=0.0),
        PEAHolding(name="D", quantity=5, price=40.0),
        PEAHolding(name="E", quantity=0, price=40.0, roe_percent=90.0),
    ]

    assert weighted_average_roe(holdings + extra) == weighted_average_roe(holdings)
    assert weighted_average_roe(extra) == 0.0
    assert weighted_average_roe([]) == 0.0


def test_dividends():
    payer = PEAHolding(name="TotalEnergies", quantity=40, price=50.0, dividend_enabled=True, dividend_percent_per_year=3.0)
    growth = PEAHolding(name="ETF Monde", quantity=10, price=100.0)

    assert holding_annual_dividend(payer) == pytest.approx(60.0)
    assert holding_annual_dividend(growth) == 0.0
    assert total_annual_dividends([payer, growth]) == pytest.approx(60.0)
    assert monthly_dividend_amount([payer, growth]) == pytest.approx(5.0)


def test_balance_sums_both_collections_and_caps():
    actions = [PEAHolding(name="A", quantity=10, price=100.0)]
    etfs = [PEAHolding(name="ETF", quantity=3, price=50000.0)]

    balance = pea_balance(actions, etfs)

    assert balance == 151000.0
    assert capped_pea_balance(balance) == PEA_CEILING
    assert remaining_ceiling(balance) == 0.0
    assert remaining_ceiling(100000.0) == 50000.0
    assert capped_pea_balance(-5.0) == 0.0


def test_missing_numbers_count_as_zero():
    data = pea_projection(None, 100.0, None, 1000.0, None, None)

    assert data[0] == {"month": 0, "balance": 0.0, "net_balance": 0.0}
    assert data[1]["balance"] == 100.0
    assert month_ceiling_reached(data, 1000.0) == 10
    assert len(data) == 11
