"""Mini README: Error taxonomy raised by the expense ledger.

Both errors are recoverable: the interface reports them to the user as an
actionable message and the ledger state is left untouched.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for ledger rule violations."""


class ValidationError(LedgerError, ValueError):
    """Raised for missing or malformed user input."""


class ReferentialIntegrityError(LedgerError):
    """Raised when removing a participant that an expense still references."""
