"""Mini README: Abstract notifier gateway and delivery result types.

Structure:
    * NotifierGateway - interface implemented by delivery backends.
    * DeliveryResult - outcome of one participant's notification.
    * NotificationReport - collected outcomes of a fan-out run.

A gateway signals failure either by returning ``False`` from ``deliver`` or
by raising. The dispatcher treats both the same way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class DeliveryResult:
    """Outcome of handing one participant's message to a gateway."""

    participant: str
    message: str
    delivered: bool
    error: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        return {
            "participant": self.participant,
            "message": self.message,
            "delivered": self.delivered,
            "error": self.error,
        }


@dataclass(slots=True)
class NotificationReport:
    """All delivery results produced by one notification run."""

    gateway: str
    title: str
    results: List[DeliveryResult] = field(default_factory=list)

    @property
    def delivered(self) -> List[DeliveryResult]:
        return [result for result in self.results if result.delivered]

    @property
    def failed(self) -> List[DeliveryResult]:
        return [result for result in self.results if not result.delivered]

    def as_dict(self) -> Dict[str, object]:
        """Export the report for JSON responses."""

        return {
            "gateway": self.gateway,
            "title": self.title,
            "delivered_count": len(self.delivered),
            "failed_count": len(self.failed),
            "results": [result.as_dict() for result in self.results],
        }


class NotifierGateway(ABC):
    """Base interface for notification delivery backends."""

    provider_name: str = "generic"

    def __init__(self) -> None:
        LOGGER.debug("Initialising %s notifier gateway", self.provider_name)

    @abstractmethod
    def deliver(self, title: str, body: str) -> bool:
        """Deliver a single message, returning whether it was accepted."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for UI displays."""

        return {"gateway": self.provider_name}
