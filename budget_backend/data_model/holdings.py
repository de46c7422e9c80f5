from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import ColumnDefinition, TableModel, coerce_number, optional_number


@dataclass
class PEAHolding:
    """One equity or ETF line held in the PEA."""

    name: str
    quantity: float = 0.0
    price: float = 0.0
    dividend_enabled: bool = False
    dividend_percent_per_year: float | None = None
    roe_percent: float | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "PEAHolding":
        return cls(
            name=str(raw.get("name") or ""),
            quantity=coerce_number(raw.get("quantity")),
            price=coerce_number(raw.get("price")),
            dividend_enabled=bool(raw.get("dividendEnabled")),
            dividend_percent_per_year=optional_number(raw.get("dividendPercentPerYear")),
            roe_percent=optional_number(raw.get("roePercent")),
        )

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "dividendEnabled": self.dividend_enabled,
        }
        if self.dividend_percent_per_year is not None:
            row["dividendPercentPerYear"] = self.dividend_percent_per_year
        if self.roe_percent is not None:
            row["roePercent"] = self.roe_percent
        return row


class HoldingTableModel(TableModel):
    def __init__(self, name: str) -> None:
        columns = [
            ColumnDefinition("name", "Nom"),
            ColumnDefinition("quantity", "Quantité", kind="number", default=0.0, min_value=0.0, step=1.0),
            ColumnDefinition("price", "Prix (€)", kind="number", default=0.0, min_value=0.0, step=0.01, format="%.2f"),
            ColumnDefinition("dividendPercentPerYear", "Dividende (%/an)", kind="number", default=None, min_value=0.0, step=0.1),
            ColumnDefinition(
                "roePercent",
                "ROE (%/an)",
                kind="number",
                default=None,
                min_value=0.0,
                step=0.5,
                help="Croissance annuelle estimée, composée chaque année",
            ),
        ]
        super().__init__(name, columns)
