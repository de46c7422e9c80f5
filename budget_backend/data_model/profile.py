# data_model/profile.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .accounts import SavingsAccount, default_savings_accounts
from .expenses import DEFAULT_EXPENSE_GROUP_NAMES, ExpenseCategory, default_expense_categories
from .holdings import PEAHolding
from .income import DEFAULT_INCOME_GROUP_NAMES, IncomeSource, default_income_sources
from .placements import PlacementAllocation, default_placement_allocation

# Stored document key -> (attribute, row parser, default factory)
COLLECTION_FIELDS: Dict[str, tuple[str, Callable[[dict], Any], Callable[[], list]]] = {
    "income_sources": ("income_sources", IncomeSource.from_dict, default_income_sources),
    "expense_categories": ("expense_categories", ExpenseCategory.from_dict, default_expense_categories),
    "placement_allocation": ("placement_allocation", PlacementAllocation.from_dict, default_placement_allocation),
    "savings_accounts": ("savings_accounts", SavingsAccount.from_dict, default_savings_accounts),
    "pea_actions": ("pea_actions", PEAHolding.from_dict, list),
    "pea_etfs": ("pea_etfs", PEAHolding.from_dict, list),
}
GROUP_NAME_FIELDS: Dict[str, List[str]] = {
    "income_group_names": DEFAULT_INCOME_GROUP_NAMES,
    "expense_group_names": DEFAULT_EXPENSE_GROUP_NAMES,
}
PROFILE_KEYS = frozenset(COLLECTION_FIELDS) | frozenset(GROUP_NAME_FIELDS)


def _group_names(raw: Any, defaults: List[str]) -> List[str]:
    if isinstance(raw, list) and raw:
        return [str(name) for name in raw]
    return list(defaults)


@dataclass
class Profile:
    """A user's complete budget document, loaded and saved as one unit."""

    income_sources: List[IncomeSource] = field(default_factory=default_income_sources)
    income_group_names: List[str] = field(default_factory=lambda: list(DEFAULT_INCOME_GROUP_NAMES))
    expense_categories: List[ExpenseCategory] = field(default_factory=default_expense_categories)
    expense_group_names: List[str] = field(default_factory=lambda: list(DEFAULT_EXPENSE_GROUP_NAMES))
    placement_allocation: List[PlacementAllocation] = field(default_factory=default_placement_allocation)
    savings_accounts: List[SavingsAccount] = field(default_factory=default_savings_accounts)
    pea_actions: List[PEAHolding] = field(default_factory=list)
    pea_etfs: List[PEAHolding] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> "Profile":
        """Build a profile from a stored document, normalizing legacy rows.

        Missing or empty collections fall back to the defaults of a new profile.
        """
        raw = raw or {}
        values: Dict[str, Any] = {}
        for key, (attr, parse_row, default_factory) in COLLECTION_FIELDS.items():
            rows = raw.get(key)
            if isinstance(rows, list) and rows:
                values[attr] = [parse_row(row) for row in rows if isinstance(row, dict)]
            else:
                values[attr] = default_factory()
        for key, defaults in GROUP_NAME_FIELDS.items():
            values[key] = _group_names(raw.get(key), defaults)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for key, (attr, _, _) in COLLECTION_FIELDS.items():
            payload[key] = [item.to_dict() for item in getattr(self, attr)]
        for key in GROUP_NAME_FIELDS:
            payload[key] = list(getattr(self, key))
        return payload

    def all_holdings(self) -> List[PEAHolding]:
        return [*self.pea_actions, *self.pea_etfs]


def validate_update(partial: dict[str, Any]) -> dict[str, Any]:
    """Check a named partial update before it is merged into a stored document."""
    if not isinstance(partial, dict):
        raise ValueError("Profile update must be an object.")
    unknown = set(partial) - PROFILE_KEYS
    if unknown:
        raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
    for key, value in partial.items():
        if not isinstance(value, list):
            raise ValueError(f"Profile field '{key}' must be a list.")
        if key in COLLECTION_FIELDS and not all(isinstance(row, dict) for row in value):
            raise ValueError(f"Profile field '{key}' must contain objects.")
    return partial
