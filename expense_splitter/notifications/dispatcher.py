"""Mini README: Fan-out of balance notifications to a gateway.

Structure:
    * dispatch_balance_notifications - one delivery per participant.

Balances are computed once, then each participant's message is delivered in
its own attempt. A failed attempt is logged and recorded; it never stops the
remaining deliveries and never touches ledger state.
"""

from __future__ import annotations

from typing import Optional

from ..configuration import get_settings
from ..ledger import ExpenseLedger, format_balance_message
from ..logging_utils import get_logger
from .base import DeliveryResult, NotificationReport, NotifierGateway

LOGGER = get_logger(__name__)


def dispatch_balance_notifications(
    ledger: ExpenseLedger,
    gateway: NotifierGateway,
    *,
    title: Optional[str] = None,
    currency_symbol: Optional[str] = None,
) -> NotificationReport:
    """Send every participant their balance message through ``gateway``.

    ``currency_symbol`` overrides the ledger's own symbol for this run only.
    """

    title = title or get_settings().notification_title
    currency_symbol = currency_symbol or ledger.currency_symbol
    report = NotificationReport(gateway=gateway.provider_name, title=title)
    for participant, balance in ledger.compute_balances().items():
        message = format_balance_message(participant, balance, currency_symbol)
        try:
            delivered = bool(gateway.deliver(title, message))
        except Exception as exc:
            LOGGER.exception("Notification to %s failed via %s", participant, gateway.provider_name)
            report.results.append(
                DeliveryResult(participant=participant, message=message, delivered=False, error=str(exc))
            )
            continue
        if not delivered:
            LOGGER.warning("Gateway %s rejected notification to %s", gateway.provider_name, participant)
        report.results.append(
            DeliveryResult(
                participant=participant,
                message=message,
                delivered=delivered,
                error=None if delivered else "Gateway reported a delivery failure.",
            )
        )
    LOGGER.info(
        "Sent %s of %s balance notifications via %s",
        len(report.delivered),
        len(report.results),
        gateway.provider_name,
    )
    return report
