from .defaults import default_savings_accounts, new_savings_account
from .items import SavingsAccount
from .table import SavingsAccountTableModel

__all__ = [
    "SavingsAccount",
    "SavingsAccountTableModel",
    "default_savings_accounts",
    "new_savings_account",
]
