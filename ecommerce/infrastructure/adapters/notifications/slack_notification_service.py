"""
Slack Notification Service Implementation.

Sends order confirmations via Slack Webhook API.
"""
import logging

import aiohttp

from ecommerce.application.interfaces import INotificationService
from ecommerce.domain.entities.order import Order
from ecommerce.settings.modules.integrations_settings import SlackSettings


logger = logging.getLogger(__name__)


class SlackNotificationService(INotificationService):
    """
    Slack implementation of notification service.

    Posts one attachment per confirmation. HTTP errors are raised to the
    caller.
    """

    def __init__(self, settings: SlackSettings):
        """
        Initialize Slack notification service.

        Args:
            settings: Slack settings with webhook URL
        """
        self.settings = settings
        self.webhook_url = settings.webhook_url
        self.prefix = settings.prefix
        logger.info("SlackNotificationService initialized")

    async def send_order_confirmation(self, order: Order) -> None:
        """Send order confirmation via Slack."""
        await self._send_message(self.build_text(order), color="good")

    def build_text(self, order: Order) -> str:
        total = order.total_value.amount if order.total_value else "n/a"
        return (
            f"{self.prefix} ✅ *Order placed*\n"
            f"Order: `{order.order_id}`\n"
            f"Customer: `{order.customer_id}`\n"
            f"Total: {total}"
        )

    async def _send_message(self, text: str, color: str = "good") -> None:
        """
        Send message to Slack.

        Args:
            text: Message text
            color: Attachment color (good, warning, danger)
        """
        if not self.webhook_url:
            logger.warning("Slack webhook_url not configured, skipping notification")
            return

        payload = {
            "attachments": [
                {
                    "color": color,
                    "text": text,
                    "mrkdwn_in": ["text"],
                }
            ]
        }

        async with aiohttp.ClientSession() as session:
            async with session.post(self.webhook_url, json=payload) as response:
                response.raise_for_status()
                logger.info("Slack notification sent successfully")
