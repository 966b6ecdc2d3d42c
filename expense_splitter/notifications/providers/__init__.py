"""Mini README: Concrete notifier gateway implementations.

New gateways subclass ``NotifierGateway`` and call ``REGISTRY.register`` at
import time so they become selectable through configuration.
"""

from .log_gateway import LoggingGateway

__all__ = ["LoggingGateway"]
