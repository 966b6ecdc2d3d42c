"""Mini README: Interactive interfaces for Expense Splitter.

Exports the FastAPI application factory that powers the browser-based
control panel.
"""

from .web_app import create_application

__all__ = ["create_application"]
