from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd


def coerce_number(value: Any) -> float:
    """Best-effort float conversion; missing, NaN or non-numeric input becomes 0.

    Strings accept a comma decimal separator ("12,5" -> 12.5).
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        text = value.strip().replace(" ", "").replace(",", ".")
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def optional_number(value: Any) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return coerce_number(value)


def optional_text(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass
class ColumnDefinition:
    """Lightweight schema descriptor used by table editors."""

    field: str
    label: str
    kind: str = "text"  # text | number | select
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    format: str | None = None
    help: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "label": self.label,
            "kind": self.kind,
            "default": self.default,
            "options": self.options or [],
            "min": self.min_value,
            "max": self.max_value,
            "step": self.step,
            "format": self.format,
            "help": self.help,
        }


@dataclass
class TableModel:
    """Container for a table schema plus default rows."""

    name: str
    columns: List[ColumnDefinition]
    default_rows: List[dict[str, Any]] = field(default_factory=list)

    def create_default_df(self) -> pd.DataFrame:
        if self.default_rows:
            return pd.DataFrame(self.default_rows, columns=[col.field for col in self.columns])
        seed = {col.field: col.default for col in self.columns}
        return pd.DataFrame([seed])

    def to_payload(self) -> dict[str, Any]:
        defaults = self.create_default_df().astype(object)
        defaults = defaults.where(pd.notna(defaults), None)
        return {
            "name": self.name,
            "columns": [col.to_payload() for col in self.columns],
            "defaults": defaults.to_dict("records"),
        }
