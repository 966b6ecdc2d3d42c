"""Mini README: Registry mapping gateway identifiers to implementations.

Structure:
    * GatewayRegistry - registration and instantiation of ``NotifierGateway``
      subclasses.

Built-in gateways register themselves on import of the ``providers``
package. Additional backends call ``REGISTRY.register`` the same way.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from .base import NotifierGateway
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class GatewayRegistry:
    """Simple registry for mapping gateway identifiers to classes."""

    def __init__(self) -> None:
        self._gateways: Dict[str, Type[NotifierGateway]] = {}

    def register(self, gateway: Type[NotifierGateway]) -> None:
        """Register a new gateway class with the registry."""

        identifier = gateway.provider_name.lower()
        LOGGER.debug("Registering notifier gateway '%s'", identifier)
        self._gateways[identifier] = gateway

    def available_gateways(self) -> Iterable[str]:
        """Return iterable of gateway identifiers for display."""

        return sorted(self._gateways.keys())

    def create(self, identifier: str) -> NotifierGateway:
        """Instantiate the gateway matching the identifier."""

        gateway_cls = self._gateways.get(identifier.lower())
        if not gateway_cls:
            raise KeyError(f"Unknown notifier gateway '{identifier}'")
        LOGGER.info("Creating notifier gateway '%s'", identifier)
        return gateway_cls()


REGISTRY = GatewayRegistry()
