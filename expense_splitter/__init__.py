"""Mini README: Core package initializer for the Expense Splitter service.

This module exposes convenience imports so callers can reach the ledger and
logging helpers without knowing the exact module structure. The file stays
lightweight so importing the package never pulls in the web stack.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
