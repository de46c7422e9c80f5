from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Literal

from .base import ColumnDefinition, TableModel, coerce_number, optional_number, optional_text

EXPENSE_TYPES = ["fixed", "range", "percentage"]
DEFAULT_EXPENSE_GROUP_NAMES = ["Dépenses perso", "Dépenses pro"]

CATEGORY_PREFIX = "category:"
SOURCE_PREFIX = "source:"


@dataclass(frozen=True)
class PercentageBase:
    """What a percentage expense is computed against.

    ``total`` is all income, ``category`` one income group, ``source`` a single
    income line. ``invalid`` keeps an unparseable stored reference so it can
    be written back unchanged; it resolves like ``total``.
    """

    kind: Literal["total", "category", "source", "invalid"] = "total"
    group: str = ""
    name: str = ""
    raw: str | None = None

    @classmethod
    def total(cls) -> "PercentageBase":
        return cls("total")

    @classmethod
    def category(cls, group: str) -> "PercentageBase":
        return cls("category", group=group)

    @classmethod
    def source(cls, group: str, name: str) -> "PercentageBase":
        return cls("source", group=group, name=name)

    @classmethod
    def parse(cls, value: str | None) -> "PercentageBase":
        """Parse the stored ``percentageOf`` string."""
        if value is None or value == "" or value == "total":
            return cls.total()
        if value.startswith(CATEGORY_PREFIX):
            return cls.category(value[len(CATEGORY_PREFIX):])
        if value.startswith(SOURCE_PREFIX):
            rest = value[len(SOURCE_PREFIX):]
            group, sep, name = rest.partition("|")
            if not sep:
                return cls.source("", rest)
            return cls.source(group, name)
        return cls("invalid", raw=value)

    def to_string(self) -> str:
        if self.kind == "category":
            return f"{CATEGORY_PREFIX}{self.group}"
        if self.kind == "source":
            return f"{SOURCE_PREFIX}{self.group}|{self.name}"
        if self.kind == "invalid" and self.raw is not None:
            return self.raw
        return "total"


@dataclass
class ExpenseCategory:
    name: str
    group: str | None = None
    type: Literal["fixed", "range", "percentage"] = "fixed"
    amount: float = 0.0
    min: float | None = None
    max: float | None = None
    percentage: float | None = None
    percentage_of: PercentageBase = field(default_factory=PercentageBase.total)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ExpenseCategory":
        """Normalize a stored row; rows without a known ``type`` are fixed amounts."""
        category = cls(
            name=str(raw.get("name") or ""),
            group=optional_text(raw.get("group")),
            amount=coerce_number(raw.get("amount")),
        )
        if raw.get("type") in EXPENSE_TYPES:
            category.type = raw["type"]
            category.min = optional_number(raw.get("min"))
            category.max = optional_number(raw.get("max"))
            category.percentage = optional_number(raw.get("percentage"))
            percentage_of = raw.get("percentageOf")
            category.percentage_of = PercentageBase.parse(None if percentage_of is None else str(percentage_of))
        return category

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {"name": self.name, "type": self.type, "amount": self.amount}
        if self.group is not None:
            row["group"] = self.group
        if self.min is not None:
            row["min"] = self.min
        if self.max is not None:
            row["max"] = self.max
        if self.percentage is not None:
            row["percentage"] = self.percentage
        if self.type == "percentage":
            row["percentageOf"] = self.percentage_of.to_string()
        return row


def default_expense_categories() -> List[ExpenseCategory]:
    names = ["Loyer Logement", "Nourriture", "Transport", "Assurance Logement", "Facture EDF"]
    return [ExpenseCategory(name=name) for name in names]


class ExpenseTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("name", "Libellé"),
            ColumnDefinition(
                "group",
                "Catégorie",
                kind="select",
                default=DEFAULT_EXPENSE_GROUP_NAMES[0],
                options=DEFAULT_EXPENSE_GROUP_NAMES,
            ),
            ColumnDefinition("type", "Type", kind="select", default="fixed", options=EXPENSE_TYPES),
            ColumnDefinition("amount", "Montant (€)", kind="number", default=0.0, min_value=0.0, step=10.0, format="%.2f"),
            ColumnDefinition("min", "Minimum (€)", kind="number", default=None, min_value=0.0, step=10.0, format="%.2f"),
            ColumnDefinition("max", "Maximum (€)", kind="number", default=None, min_value=0.0, step=10.0, format="%.2f"),
            ColumnDefinition("percentage", "Pourcentage (%)", kind="number", default=None, min_value=0.0, max_value=100.0, step=0.5),
            ColumnDefinition(
                "percentageOf",
                "Base du pourcentage",
                kind="select",
                default="total",
                options=None,
                help="total, category:<catégorie> ou source:<catégorie>|<libellé>",
            ),
        ]
        super().__init__("expenses", columns, [category.to_dict() for category in default_expense_categories()])
