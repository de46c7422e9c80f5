from __future__ import annotations

from typing import List

from ...config import EMERGENCY_FUND_ACCOUNT_NAME
from .items import SavingsAccount


def default_savings_accounts() -> List[SavingsAccount]:
    return [
        SavingsAccount(
            name=EMERGENCY_FUND_ACCOUNT_NAME,
            rate_percent=3.75,
            interest_frequency="daily",
            allocation_percent=100.0,
            current_balance=0.0,
        )
    ]


def new_savings_account() -> SavingsAccount:
    return SavingsAccount(name="Nouveau compte", rate_percent=3.75, interest_frequency="daily")
