"""Mini README: Balance notification subsystem.

``base`` defines the gateway interface and result types, ``registry`` maps
identifiers to gateway classes, ``providers`` holds the built-in gateways and
``dispatcher`` fans balance messages out to one gateway.
"""

from .base import DeliveryResult, NotificationReport, NotifierGateway
from .dispatcher import dispatch_balance_notifications
from .registry import GatewayRegistry, REGISTRY
from . import providers  # noqa: F401  # ensure built-in gateways register on import

__all__ = [
    "DeliveryResult",
    "GatewayRegistry",
    "NotificationReport",
    "NotifierGateway",
    "REGISTRY",
    "dispatch_balance_notifications",
]
