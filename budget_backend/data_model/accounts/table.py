from __future__ import annotations

from ...config import DEFAULT_INTEREST_FREQUENCY, EMERGENCY_FUND_ACCOUNT_NAME, INTEREST_FREQUENCIES
from ..base import ColumnDefinition, TableModel
from .defaults import default_savings_accounts


class SavingsAccountTableModel(TableModel):
    """Schema + defaults for savings account rows."""

    def __init__(self) -> None:
        columns = [
            ColumnDefinition("name", "Nom du compte"),
            ColumnDefinition("ratePercent", "Taux annuel (%)", kind="number", default=0.0, min_value=0.0, step=0.05),
            ColumnDefinition(
                "interestFrequency",
                "Capitalisation",
                kind="select",
                default=DEFAULT_INTEREST_FREQUENCY,
                options=list(INTEREST_FREQUENCIES),
                help="Fréquence d'application des intérêts",
            ),
            ColumnDefinition(
                "allocationPercent",
                "Part du versement (%)",
                kind="number",
                default=0.0,
                min_value=0.0,
                max_value=100.0,
                step=1.0,
            ),
            ColumnDefinition("currentBalance", "Solde actuel (€)", kind="number", default=0.0, min_value=0.0, step=100.0, format="%.2f"),
            ColumnDefinition(
                "goalAmount",
                "Objectif (€)",
                kind="number",
                default=None,
                min_value=0.0,
                step=500.0,
                format="%.2f",
                help=f"Ignoré pour « {EMERGENCY_FUND_ACCOUNT_NAME} » : 6 mois de dépenses",
            ),
        ]
        super().__init__("savings_accounts", columns, [account.to_dict() for account in default_savings_accounts()])
