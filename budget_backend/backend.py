"""REST backend for the budget dashboard."""

from __future__ import annotations

import math
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from .config import API_PORT, PEA_CEILING, PROFILE_STORAGE_PATH, SAVINGS_MAX_MONTHS
from .data_model import (
    ExpenseTableModel,
    HoldingTableModel,
    IncomeTableModel,
    SavingsAccountTableModel,
    coerce_number,
)
from .engine.allocation import update_account_allocation, update_placement_percentage
from .engine.pea import month_ceiling_reached, pea_projection
from .engine.savings import estimate_goal, month_goal_reached, projected_balance_series
from .engine.series import aggregate_period, expand_stair_steps, series_frame, to_display_series
from .engine.state import ProfileState
from .engine.summary import build_dashboard_summary
from .logger import get_logger

logger = get_logger(__name__)

TABLE_MODELS = [
    IncomeTableModel(),
    ExpenseTableModel(),
    SavingsAccountTableModel(),
    HoldingTableModel("pea_actions"),
    HoldingTableModel("pea_etfs"),
]


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _sanitize(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_sanitize(item) for item in value]
    if isinstance(value, float) and _is_nan(value):
        return None
    return value


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _truthy(value: str | None) -> bool:
    return str(value or "").strip().lower() in {"1", "true", "yes"}


def _series_payload(series: List[dict], freq: str | None, smooth: bool, scenario: str) -> Dict[str, Any]:
    """Display data for a raw projection series."""
    payload: Dict[str, Any] = {"data": to_display_series(series)}
    if smooth:
        payload["smooth"] = to_display_series(expand_stair_steps(series))
    if freq:
        frame = aggregate_period(series_frame(series, scenario), freq=freq)
        payload["freq"] = freq.upper()
        payload["periods"] = _sanitize_records(frame.to_dict(orient="records"))
    return payload


def create_app(profile_state: ProfileState | None = None) -> Flask:
    app = Flask(__name__)
    state = profile_state if profile_state is not None else ProfileState(PROFILE_STORAGE_PATH)

    @app.after_request
    def apply_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET,POST,DELETE,OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    def _store(profile_id: str, partial: dict):
        try:
            return state.update(profile_id, partial), None
        except OSError as exc:
            logger.error("Could not save profile %s: %s", profile_id, exc)
            return None, (jsonify({"error": "Profile could not be saved."}), 500)

    @app.get("/api/health")
    def healthcheck():
        return jsonify({"status": "ok"})

    @app.get("/api/schema")
    def get_schema():
        return jsonify({model.name: model.to_payload() for model in TABLE_MODELS})

    @app.get("/api/profiles/<profile_id>")
    def get_profile(profile_id: str):
        return jsonify(state.get(profile_id).to_dict())

    @app.post("/api/profiles/<profile_id>/save")
    def save_profile(profile_id: str):
        payload = request.get_json(silent=True)
        if payload is None:
            return jsonify({"error": "Request body must be JSON."}), 400
        try:
            profile, error = _store(profile_id, payload)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        if error:
            return error
        return jsonify({"ok": True, "profile": profile.to_dict()})

    @app.delete("/api/profiles/<profile_id>")
    def delete_profile(profile_id: str):
        state.delete(profile_id)
        return jsonify({"ok": True})

    @app.get("/api/profiles/<profile_id>/summary")
    def profile_summary(profile_id: str):
        summary = build_dashboard_summary(state.get(profile_id))
        for account in summary["savingsAccounts"]:
            account["series"] = to_display_series(account["series"])
        summary["pea"]["series"] = to_display_series(summary["pea"]["series"])
        return jsonify(_sanitize(summary))

    @app.get("/api/profiles/<profile_id>/savings/<int:index>/projection")
    def savings_account_projection(profile_id: str, index: int):
        summary = build_dashboard_summary(state.get(profile_id))
        accounts = summary["savingsAccounts"]
        if not 0 <= index < len(accounts):
            return jsonify({"error": "Savings account not found."}), 404
        account = accounts[index]
        payload = _series_payload(
            account["series"], request.args.get("freq"), _truthy(request.args.get("smooth")), account["name"]
        )
        payload.update(
            {
                "name": account["name"],
                "goal": account["goal"],
                "estimate": account["estimate"],
                "goalMonthFromSeries": month_goal_reached(account["series"], account["goal"] or 0.0),
            }
        )
        return jsonify(_sanitize(payload))

    @app.get("/api/profiles/<profile_id>/pea/projection")
    def pea_profile_projection(profile_id: str):
        pea = build_dashboard_summary(state.get(profile_id))["pea"]
        payload = _series_payload(pea["series"], request.args.get("freq"), _truthy(request.args.get("smooth")), "PEA")
        payload.update({key: value for key, value in pea.items() if key != "series"})
        return jsonify(_sanitize(payload))

    @app.post("/api/profiles/<profile_id>/placements/<int:index>")
    def edit_placement(profile_id: str, index: int):
        payload = request.get_json(silent=True) or {}
        profile = state.get(profile_id)
        if not 0 <= index < len(profile.placement_allocation):
            return jsonify({"error": "Placement not found."}), 404
        allocations = update_placement_percentage(
            profile.placement_allocation, index, coerce_number(payload.get("percentage"))
        )
        profile, error = _store(profile_id, {"placement_allocation": [a.to_dict() for a in allocations]})
        if error:
            return error
        return jsonify({"placement_allocation": [a.to_dict() for a in profile.placement_allocation]})

    @app.post("/api/profiles/<profile_id>/savings/<int:index>/allocation")
    def edit_account_allocation(profile_id: str, index: int):
        payload = request.get_json(silent=True) or {}
        profile = state.get(profile_id)
        if not 0 <= index < len(profile.savings_accounts):
            return jsonify({"error": "Savings account not found."}), 404
        accounts = update_account_allocation(
            profile.savings_accounts,
            index,
            coerce_number(_extract_payload_value(payload, "allocationPercent", "percentage")),
        )
        profile, error = _store(profile_id, {"savings_accounts": [a.to_dict() for a in accounts]})
        if error:
            return error
        return jsonify({"savings_accounts": [a.to_dict() for a in profile.savings_accounts]})

    @app.post("/api/projections/savings")
    def project_savings():
        payload = request.get_json(silent=True) or {}
        balance = coerce_number(_extract_payload_value(payload, "initialBalance", "balance"))
        contribution = coerce_number(payload.get("monthlyContribution"))
        rate = coerce_number(_extract_payload_value(payload, "annualRatePercent", "ratePercent"))
        goal = coerce_number(payload.get("goal"))
        frequency = str(_extract_payload_value(payload, "frequency", "interestFrequency", default="daily"))
        estimate = estimate_goal(balance, contribution, rate, goal, frequency)
        horizon = int(coerce_number(payload.get("horizon")) or 24)
        horizon = max(0, min(horizon, SAVINGS_MAX_MONTHS))
        series = projected_balance_series(balance, contribution, rate, frequency, horizon)
        result = _series_payload(series, payload.get("freq"), bool(payload.get("smooth")), "savings")
        result["estimate"] = estimate.to_dict()
        return jsonify(_sanitize(result))

    @app.post("/api/projections/pea")
    def project_pea():
        payload = request.get_json(silent=True) or {}
        ceiling = coerce_number(_extract_payload_value(payload, "ceiling", "plafond", default=PEA_CEILING))
        series = pea_projection(
            coerce_number(payload.get("initialBalance")),
            coerce_number(payload.get("monthlyContribution")),
            coerce_number(_extract_payload_value(payload, "monthlyDividendAmount", "monthlyDividend")),
            ceiling,
            int(coerce_number(payload.get("extraMonthsAfterGoal"))),
            coerce_number(payload.get("annualRoePercent")),
        )
        result = _series_payload(series, payload.get("freq"), bool(payload.get("smooth")), "PEA")
        result["ceilingReachedMonth"] = month_ceiling_reached(series, ceiling)
        return jsonify(_sanitize(result))

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=False, port=API_PORT)
