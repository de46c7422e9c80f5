"""Display stages for projection series.

Projectors return raw series at full precision; everything here derives
presentation data from them and never feeds back into a simulation.
"""
from __future__ import annotations

import math
from typing import List

import pandas as pd

from ..config import CHART_STEP, DISPLAY_DIGITS

BALANCE_FIELDS = ("balance", "net_balance")
REQUIRED_COLUMNS = {"Scenario", "MonthIndex", "CalendarYear", "MonthInYear"}


def to_display_series(series: List[dict], digits: int = DISPLAY_DIGITS) -> List[dict]:
    """Copy of ``series`` with balances rounded for display."""
    display = []
    for point in series:
        row = dict(point)
        for key in BALANCE_FIELDS:
            if key in row and row[key] is not None:
                row[key] = round(row[key], digits)
        display.append(row)
    return display


def expand_stair_steps(series: List[dict], step: float = CHART_STEP) -> List[dict]:
    """Points every ``step`` of a month for a smooth chart cursor.

    The value at a fractional month is the balance of the whole month below
    it, held until the next month (no interpolation).
    """
    if not series or step <= 0:
        return []
    max_month = series[-1]["month"]
    n_steps = int(math.floor(max_month / step + 1e-9))
    result = []
    for i in range(n_steps + 1):
        month = round(i * step, 10)
        idx = min(int(math.floor(month)), len(series) - 1)
        row = dict(series[idx])
        row["month"] = round(month, 2)
        result.append(row)
    return result


def series_frame(series: List[dict], scenario: str = "projection") -> pd.DataFrame:
    records = []
    for point in series:
        month = int(point["month"])
        records.append(
            {
                "Scenario": scenario,
                "MonthIndex": month,
                "CalendarYear": month // 12,
                "MonthInYear": (month % 12) + 1,
                "Balance": point["balance"],
                "NetBalance": point.get("net_balance"),
            }
        )
    return pd.DataFrame(records, columns=["Scenario", "MonthIndex", "CalendarYear", "MonthInYear", "Balance", "NetBalance"])


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values(["Scenario", "MonthIndex"]).copy()


def aggregate_period(df: pd.DataFrame, freq: str = "M") -> pd.DataFrame:
    """Aggregate a monthly projection frame to monthly/quarterly/yearly snapshots."""
    if df.empty:
        return df

    freq = (freq or "M").upper()
    df = _prepare(df)

    if freq == "Q":
        df["PeriodValue"] = df["MonthIndex"] // 3
        quarter = ((df["MonthInYear"] - 1) // 3 + 1).astype(int)
        df["Period"] = "Y" + df["CalendarYear"].astype(str) + " Q" + quarter.astype(str)
        return df.groupby(["Scenario", "PeriodValue"], as_index=False).last()

    if freq == "Y":
        df["PeriodValue"] = df["CalendarYear"]
        df["Period"] = "Y" + df["CalendarYear"].astype(str)
        return df.groupby(["Scenario", "PeriodValue"], as_index=False).last()

    df["PeriodValue"] = df["MonthIndex"]
    df["Period"] = df["MonthIndex"].astype(str)
    return df
