from .accounts import (
    SavingsAccount,
    SavingsAccountTableModel,
    default_savings_accounts,
    new_savings_account,
)
from .base import ColumnDefinition, TableModel, coerce_number
from .expenses import (
    DEFAULT_EXPENSE_GROUP_NAMES,
    ExpenseCategory,
    ExpenseTableModel,
    PercentageBase,
)
from .holdings import HoldingTableModel, PEAHolding
from .income import DEFAULT_INCOME_GROUP_NAMES, IncomeSource, IncomeTableModel
from .placements import PlacementAllocation
from .profile import PROFILE_KEYS, Profile, validate_update

__all__ = [
    "DEFAULT_EXPENSE_GROUP_NAMES",
    "DEFAULT_INCOME_GROUP_NAMES",
    "PROFILE_KEYS",
    "ColumnDefinition",
    "ExpenseCategory",
    "ExpenseTableModel",
    "HoldingTableModel",
    "IncomeSource",
    "IncomeTableModel",
    "PEAHolding",
    "PercentageBase",
    "PlacementAllocation",
    "Profile",
    "SavingsAccount",
    "SavingsAccountTableModel",
    "TableModel",
    "coerce_number",
    "default_savings_accounts",
    "new_savings_account",
    "validate_update",
]
