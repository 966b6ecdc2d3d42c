"""Mini README: Logging notifier gateway.

Structure:
    * LoggingGateway - writes each notification to the log and keeps an outbox.

Stands in for a push notification service during development; the outbox
lets the web panel and tests inspect what would have been sent.
"""

from __future__ import annotations

from typing import List, Tuple

from ..base import NotifierGateway
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class LoggingGateway(NotifierGateway):
    """Gateway that logs notifications instead of pushing them to devices."""

    provider_name = "log"

    def __init__(self) -> None:
        super().__init__()
        self.outbox: List[Tuple[str, str]] = []

    def deliver(self, title: str, body: str) -> bool:
        LOGGER.info("Notification [%s]: %s", title, body)
        self.outbox.append((title, body))
        return True


REGISTRY.register(LoggingGateway)
