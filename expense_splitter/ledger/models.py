"""Mini README: Value objects and formatting helpers for the expense ledger.

Structure:
    * Expense - immutable record of a single payment.
    * format_balance_message - notification text for one participant.
    * format_balance_label - short label shown next to a name in balance lists.

Formatting always uses two decimal places. A balance of exactly zero reads as
"owes" because only strictly positive balances count as being owed, and never
renders as "-0.00".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class Expense:
    """A payment made by one participant on behalf of the whole group."""

    expense_id: str
    description: str
    amount: float
    payer: str

    def describe(self, currency_symbol: str) -> str:
        """Return the one-line summary used by expense listings."""

        return f"{self.description}: {currency_symbol}{self.amount:.2f} paid by {self.payer}"

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values."""

        return {
            "expense_id": self.expense_id,
            "description": self.description,
            "amount": self.amount,
            "payer": self.payer,
        }


def format_balance_message(participant: str, balance: float, currency_symbol: str) -> str:
    """Build the human-readable balance sentence handed to notifier gateways."""

    if balance > 0:
        return f"{participant} is owed {currency_symbol}{balance:.2f}"
    return f"{participant} owes {currency_symbol}{abs(balance):.2f}"


def format_balance_label(balance: float, currency_symbol: str) -> str:
    if balance > 0:
        return f"Owed {currency_symbol}{balance:.2f}"
    return f"Owes {currency_symbol}{abs(balance):.2f}"
