from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...config import DEFAULT_INTEREST_FREQUENCY, EMERGENCY_FUND_ACCOUNT_NAME, INTEREST_FREQUENCIES
from ..base import coerce_number, optional_number


@dataclass
class SavingsAccount:
    name: str
    rate_percent: float = 0.0
    interest_frequency: str = DEFAULT_INTEREST_FREQUENCY
    allocation_percent: float = 0.0
    current_balance: float = 0.0
    goal_amount: float | None = None

    def is_emergency_fund(self) -> bool:
        return self.name.strip() == EMERGENCY_FUND_ACCOUNT_NAME

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SavingsAccount":
        frequency = str(raw.get("interestFrequency") or DEFAULT_INTEREST_FREQUENCY)
        if frequency not in INTEREST_FREQUENCIES:
            frequency = DEFAULT_INTEREST_FREQUENCY
        return cls(
            name=str(raw.get("name") or ""),
            rate_percent=coerce_number(raw.get("ratePercent")),
            interest_frequency=frequency,
            allocation_percent=coerce_number(raw.get("allocationPercent")),
            current_balance=coerce_number(raw.get("currentBalance")),
            goal_amount=optional_number(raw.get("goalAmount")),
        )

    def to_dict(self) -> dict[str, Any]:
        row: dict[str, Any] = {
            "name": self.name,
            "ratePercent": self.rate_percent,
            "interestFrequency": self.interest_frequency,
            "allocationPercent": self.allocation_percent,
            "currentBalance": self.current_balance,
        }
        if self.goal_amount is not None:
            row["goalAmount"] = self.goal_amount
        return row
