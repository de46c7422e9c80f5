import pytest

from budget_backend.backend import create_app
from budget_backend.engine import state as state_module
from budget_backend.engine.state import ProfileState


@pytest.fixture
def client(tmp_path):
    app = create_app(ProfileState(str(tmp_path / "profiles.json")))
    app.config["TESTING"] = True
    return app.test_client()


def _seed(client):
    response = client.post(
        "/api/profiles/user-1/save",
        json={
            "income_sources": [{"name": "Salaire", "type": "fixed", "amount": 3000}],
            "expense_categories": [{"name": "Loyer", "type": "fixed", "amount": 1000}],
        },
    )
    assert response.status_code == 200


def test_healthcheck(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_schema_lists_editable_tables(client):
    schema = client.get("/api/schema").get_json()

    assert set(schema) == {"incomes", "expenses", "savings_accounts", "pea_actions", "pea_etfs"}


def test_unknown_profile_gets_defaults(client):
    profile = client.get("/api/profiles/nobody").get_json()

    assert profile["savings_accounts"][0]["name"] == "Sécurité"


def test_invalid_save_is_rejected_without_changes(client):
    _seed(client)

    response = client.post("/api/profiles/user-1/save", json={"monthly_income": 9000})

    assert response.status_code == 400
    assert "monthly_income" in response.get_json()["error"]
    profile = client.get("/api/profiles/user-1").get_json()
    assert profile["income_sources"][0]["amount"] == 3000.0


def test_summary(client):
    _seed(client)

    summary = client.get("/api/profiles/user-1/summary").get_json()

    assert summary["disposableIncome"] == 2000.0
    assert summary["savingsAccounts"][0]["goal"] == 6000.0
    assert summary["savingsAccounts"][0]["estimate"]["status"] == "reached"


def test_savings_projection_endpoint(client):
    _seed(client)

    payload = client.get("/api/profiles/user-1/savings/0/projection?smooth=1&freq=Y").get_json()

    assert payload["goalMonthFromSeries"] == payload["estimate"]["months"]
    assert payload["smooth"][1]["month"] == 0.1
    assert payload["freq"] == "Y"
    assert client.get("/api/profiles/user-1/savings/3/projection").status_code == 404


def test_pea_projection_endpoint(client):
    _seed(client)

    payload = client.get("/api/profiles/user-1/pea/projection").get_json()

    assert payload["monthlyContribution"] == 800.0
    assert payload["ceilingReachedMonth"] == 188
    assert payload["data"][0] == {"month": 0, "balance": 0.0, "net_balance": 0.0}


def test_placement_edit_keeps_total_at_100(client):
    response = client.post("/api/profiles/user-1/placements/0", json={"percentage": 75})

    assert response.get_json()["placement_allocation"] == [
        {"name": "Épargne", "percentage": 75.0},
        {"name": "PEA", "percentage": 25.0},
    ]
    assert client.post("/api/profiles/user-1/placements/5", json={"percentage": 1}).status_code == 404


def test_account_allocation_edit(client):
    client.post(
        "/api/profiles/user-1/save",
        json={"savings_accounts": [{"name": "Sécurité", "allocationPercent": 50}, {"name": "Projet", "allocationPercent": 50}]},
    )

    response = client.post("/api/profiles/user-1/savings/1/allocation", json={"allocationPercent": 30})

    assert [a["allocationPercent"] for a in response.get_json()["savings_accounts"]] == [70.0, 30.0]


def test_stateless_savings_projection(client):
    payload = client.post(
        "/api/projections/savings",
        json={"initialBalance": 0, "monthlyContribution": 500, "annualRatePercent": 3, "goal": 6000, "frequency": "monthly", "horizon": 12},
    ).get_json()

    assert payload["estimate"]["months"] == 12
    assert payload["data"][-1]["balance"] == 6083.19


def test_stateless_pea_projection(client):
    payload = client.post(
        "/api/projections/pea",
        json={
            "initialBalance": 150000,
            "monthlyContribution": 100,
            "monthlyDividendAmount": 50,
            "ceiling": 150000,
            "extraMonthsAfterGoal": 3,
            "annualRoePercent": 5,
        },
    ).get_json()

    assert len(payload["data"]) == 4
    assert all(point["net_balance"] == 124200.0 for point in payload["data"])
    assert payload["ceilingReachedMonth"] == 1


def test_failed_write_on_allocation_edits_returns_json_error(client, monkeypatch):
    def broken_save(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(state_module, "save_profiles", broken_save)

    placement = client.post("/api/profiles/user-1/placements/0", json={"percentage": 75})
    account = client.post("/api/profiles/user-1/savings/0/allocation", json={"allocationPercent": 50})

    for response in (placement, account):
        assert response.status_code == 500
        assert response.get_json() == {"error": "Profile could not be saved."}
    assert client.get("/api/profiles/user-1").get_json()["placement_allocation"][0]["percentage"] == 60.0
