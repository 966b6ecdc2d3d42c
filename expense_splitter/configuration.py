"""Mini README: Centralised configuration for Expense Splitter.

Structure:
    * SplitterSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read the currency symbol, notification title,
    default group and service ports. Values come from ``EXPENSE_SPLITTER_*``
    environment variables or a local ``.env`` file. The settings object is
    cached so validation only runs once per process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class SplitterSettings(BaseSettings):
    """Runtime configuration for the Expense Splitter service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles such as auto-reload.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied when the CLI starts the service.",
    )
    currency_symbol: str = Field(
        "₹",
        description="Symbol prefixed to every formatted amount.",
    )
    notification_title: str = Field(
        "Expense Splitter Reminder",
        description="Title attached to each balance notification.",
    )
    default_participants: List[str] = Field(
        default_factory=lambda: ["Ayush", "Harsh", "Laxmikant", "Mudassir"],
        description="Group seeded into a ledger created without explicit participants.",
    )
    seed_demo_participants: bool = Field(
        True,
        description="Disable to start ledgers with an empty group.",
    )
    notifier_gateway: str = Field(
        "log",
        description="Identifier of the registered gateway used for balance notifications.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web control panel to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web control panel exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "EXPENSE_SPLITTER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _known_log_level(cls, value: str) -> str:
        """Restrict the level to names understood by ``logging``."""

        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @validator("currency_symbol")
    def _require_symbol(cls, value: str) -> str:
        """Reject blank currency symbols which would render bare numbers."""

        if not value.strip():
            raise ValueError("Currency symbol must not be blank.")
        return value

    @validator("default_participants")
    def _unique_participants(cls, value: List[str]) -> List[str]:
        """Ensure the seeded group obeys the same rules as manual additions."""

        seen = set()
        for name in value:
            if not name:
                raise ValueError("Default participant names must not be empty.")
            if name in seen:
                raise ValueError(f"Duplicate default participant: {name}")
            seen.add(name)
        return value


@lru_cache()
def get_settings() -> SplitterSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SplitterSettings()
