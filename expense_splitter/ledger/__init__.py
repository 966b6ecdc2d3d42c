"""Mini README: Expense ledger package.

Groups the in-memory ledger, its immutable expense records and the error
taxonomy raised when user input breaks a ledger rule. Import from here rather
than from the individual modules.
"""

from .errors import LedgerError, ReferentialIntegrityError, ValidationError
from .ledger import ExpenseLedger
from .models import Expense, format_balance_label, format_balance_message

__all__ = [
    "Expense",
    "ExpenseLedger",
    "LedgerError",
    "ReferentialIntegrityError",
    "ValidationError",
    "format_balance_label",
    "format_balance_message",
]
