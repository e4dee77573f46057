"""
Logging Notification Service Implementation.

Writes order confirmations to the application log instead of a mailbox.
"""
import logging

from ecommerce.application.interfaces import INotificationService
from ecommerce.domain.entities.order import Order


logger = logging.getLogger(__name__)


class LoggingNotificationService(INotificationService):
    """Default confirmation channel when no external channel is configured."""

    async def send_order_confirmation(self, order: Order) -> None:
        total = order.total_value.amount if order.total_value else None
        logger.info(
            f"📧 Sending order confirmation e-mail for order with ID {order.order_id} "
            f"(customer: {order.customer_id}, total: {total})"
        )
