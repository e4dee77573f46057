"""
Mock Notification Service Implementation.

This simulates notifications for testing and demos.
"""
from typing import List
import logging

from ecommerce.application.interfaces import INotificationService
from ecommerce.domain.entities.order import Order


logger = logging.getLogger(__name__)


class MockNotificationService(INotificationService):
    """
    Mock implementation of notification service.

    Records confirmations instead of sending them.
    """

    def __init__(self):
        """Initialize mock notification service."""
        self.notifications_sent: List[dict] = []

    async def send_order_confirmation(self, order: Order) -> None:
        """
        Record an order confirmation.

        Args:
            order: Placed order
        """
        notification = {
            "type": "order_confirmation",
            "order_id": order.order_id,
            "customer_id": order.customer_id,
            "total": order.total_value.amount if order.total_value else None,
        }

        self.notifications_sent.append(notification)
        logger.info(f"🔔 ORDER CONFIRMATION recorded for order {order.order_id}")

    def get_notifications(self) -> List[dict]:
        """Get all sent notifications (for testing)."""
        return self.notifications_sent

    def clear(self) -> None:
        """Clear notifications (for testing)."""
        self.notifications_sent.clear()
