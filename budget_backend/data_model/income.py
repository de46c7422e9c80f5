from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Literal

from .base import ColumnDefinition, TableModel, coerce_number, optional_number, optional_text

INCOME_TYPES = ["fixed", "range"]
DEFAULT_INCOME_GROUP_NAMES = ["Revenus perso", "Revenus pro"]


@dataclass
class IncomeSource:
    name: str
    group: str | None = None
    type: Literal["fixed", "range"] = "fixed"
    amount: float = 0.0
    min: float | None = None
    max: float | None = None
    deduction_percent: float | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "IncomeSource":
        """Normalize a stored row; rows without a known ``type`` are fixed amounts."""
        source = cls(
            name=str(raw.get("name") or ""),
            group=optional_text(raw.get("group")),
            amount=coerce_number(raw.get("amount")),
            deduction_percent=optional_number(raw.get("deductionPercent")),
        )
        if raw.get("type") == "range":
            source.type = "range"
            source.min = optional_number(raw.get("min"))
            source.max = optional_number(raw.get("max"))
        elif raw.get("type") == "fixed":
            source.min = optional_number(raw.get("min"))
            source.max = optional_number(raw.get("max"))
        return source

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {"name": self.name, "type": self.type, "amount": self.amount}
        if self.group is not None:
            row["group"] = self.group
        if self.min is not None:
            row["min"] = self.min
        if self.max is not None:
            row["max"] = self.max
        if self.deduction_percent is not None:
            row["deductionPercent"] = self.deduction_percent
        return row


def default_income_sources() -> List[IncomeSource]:
    return [IncomeSource(name="Salaire", type="fixed", amount=0.0)]


class IncomeTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("name", "Libellé"),
            ColumnDefinition(
                "group",
                "Catégorie",
                kind="select",
                default=DEFAULT_INCOME_GROUP_NAMES[0],
                options=DEFAULT_INCOME_GROUP_NAMES,
            ),
            ColumnDefinition("type", "Type", kind="select", default="fixed", options=INCOME_TYPES),
            ColumnDefinition("amount", "Montant (€)", kind="number", default=0.0, min_value=0.0, step=50.0, format="%.2f"),
            ColumnDefinition("min", "Minimum (€)", kind="number", default=None, min_value=0.0, step=50.0, format="%.2f"),
            ColumnDefinition("max", "Maximum (€)", kind="number", default=None, min_value=0.0, step=50.0, format="%.2f"),
            ColumnDefinition(
                "deductionPercent",
                "Déduction (%)",
                kind="number",
                default=None,
                min_value=0.0,
                max_value=100.0,
                step=0.5,
                help="Ex. 25 pour les cotisations URSSAF",
            ),
        ]
        super().__init__("incomes", columns, [source.to_dict() for source in default_income_sources()])
