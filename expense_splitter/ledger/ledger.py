"""Mini README: In-memory ledger of shared expenses and derived balances.

Structure:
    * ExpenseLedger - participant set, expense list and balance computation.

The ledger is a plain mutable object. Callers re-query ``compute_balances``
after every mutation; nothing is cached. Each expense is split evenly across
the participants present *when balances are computed*, so adding or removing
a participant retroactively changes every historical share.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Union

from ..configuration import get_settings
from ..logging_utils import get_logger
from .errors import ReferentialIntegrityError, ValidationError
from .models import Expense, format_balance_label, format_balance_message

LOGGER = get_logger(__name__)

Amount = Union[int, float, str]


def _parse_amount(value: Amount) -> float:
    """Coerce numeric input, rejecting anything that is not strictly positive."""

    if isinstance(value, bool):
        raise ValidationError("Amount must be a positive number.")
    # float() tolerates digit separators that form input never carries.
    if isinstance(value, str) and "_" in value:
        raise ValidationError("Amount must be a positive number.")
    try:
        amount = float(value)
    except (TypeError, ValueError) as error:
        raise ValidationError("Amount must be a positive number.") from error
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError("Amount must be a positive number.")
    return amount


class ExpenseLedger:
    """Track a small group's shared expenses and compute net balances."""

    def __init__(
        self,
        participants: Optional[Iterable[str]] = None,
        *,
        currency_symbol: Optional[str] = None,
    ) -> None:
        self._participants: List[str] = []
        self._expenses: List[Expense] = []
        self._sequence = 0
        self.currency_symbol = currency_symbol or get_settings().currency_symbol
        if participants is None:
            self._seed_demo_participants()
        else:
            for name in participants:
                self.add_participant(name)
        LOGGER.debug("Expense ledger initialised with %s participants", len(self._participants))

    def _seed_demo_participants(self) -> None:
        """Populate the group from configuration when seeding is enabled."""

        settings = get_settings()
        if not settings.seed_demo_participants:
            return
        for name in settings.default_participants:
            self.add_participant(name)

    def _next_id(self) -> str:
        """Generate a monotonic expense identifier, never reused after a clear."""

        self._sequence += 1
        return f"exp_{self._sequence:04d}"

    def list_participants(self) -> List[str]:
        """Return participant names in insertion order."""

        return list(self._participants)

    def list_expenses(self) -> List[Expense]:
        """Return expenses in the order they were recorded."""

        return list(self._expenses)

    def get_expense(self, expense_id: str) -> Expense:
        for expense in self._expenses:
            if expense.expense_id == expense_id:
                return expense
        raise KeyError(f"Expense {expense_id} not found")

    def is_payer(self, name: str) -> bool:
        """Return whether any stored expense names ``name`` as its payer."""

        return any(expense.payer == name for expense in self._expenses)

    def add_participant(self, name: str) -> None:
        """Append a participant, rejecting empty or duplicate names."""

        if not name or name in self._participants:
            LOGGER.warning("Rejected participant %r: empty or duplicate", name)
            raise ValidationError("Participant name is empty or already exists.")
        self._participants.append(name)
        LOGGER.info("Added participant %s", name)

    def remove_participant(self, name: str) -> None:
        """Remove a participant unless an expense still lists them as payer."""

        if self.is_payer(name):
            LOGGER.warning("Refused to remove %s: referenced as payer", name)
            raise ReferentialIntegrityError(
                f"{name} is involved in an expense and cannot be removed."
            )
        if name not in self._participants:
            raise ValidationError(f"{name} is not in the participant list.")
        self._participants.remove(name)
        LOGGER.info("Removed participant %s", name)

    def add_expense(self, description: str, amount: Amount, payer: str) -> Expense:
        """Record an expense paid by a current participant."""

        if not description or not payer:
            raise ValidationError("Please fill all fields correctly.")
        parsed_amount = _parse_amount(amount)
        if payer not in self._participants:
            LOGGER.warning("Rejected expense %r: unknown payer %s", description, payer)
            raise ValidationError(f"{payer} is not in the participant list.")

        expense = Expense(
            expense_id=self._next_id(),
            description=description,
            amount=parsed_amount,
            payer=payer,
        )
        self._expenses.append(expense)
        LOGGER.info(
            "Recorded expense %s: %s paid by %s", expense.expense_id, parsed_amount, payer
        )
        return expense

    def clear_expenses(self) -> int:
        """Drop every expense, leaving participants untouched."""

        removed = len(self._expenses)
        self._expenses.clear()
        LOGGER.info("Cleared %s expenses", removed)
        return removed

    def compute_balances(self) -> Dict[str, float]:
        """Return each participant's net balance; positive means they are owed."""

        balances: Dict[str, float] = {name: 0.0 for name in self._participants}
        participant_count = len(self._participants)
        for expense in self._expenses:
            share = expense.amount / participant_count
            for name in self._participants:
                if name == expense.payer:
                    balances[name] += expense.amount - share
                else:
                    balances[name] -= share
        return balances

    def format_balance_message(self, participant: str, balance: float) -> str:
        """Format a balance sentence using this ledger's currency symbol."""

        return format_balance_message(participant, balance, self.currency_symbol)

    def export_snapshot(self) -> Dict[str, object]:
        """Export participants, expenses and balances for JSON responses."""

        balances = self.compute_balances()
        return {
            "currency_symbol": self.currency_symbol,
            "participants": self.list_participants(),
            "expenses": [
                {**expense.as_dict(), "summary": expense.describe(self.currency_symbol)}
                for expense in self._expenses
            ],
            "balances": [
                {
                    "participant": name,
                    "balance": balance,
                    "label": format_balance_label(balance, self.currency_symbol),
                    "message": self.format_balance_message(name, balance),
                }
                for name, balance in balances.items()
            ],
        }
