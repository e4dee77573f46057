"""
Event Bus Implementation (Infrastructure Layer).

Notifies subscribers in process and keeps a bounded history of recent events.
"""
from collections import deque
import inspect
import logging
from typing import Callable, Deque, List, Optional

from ecommerce.domain.event_bus import EventBus
from ecommerce.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 1000


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Remembers the most recent events (in publish order, oldest dropped first)
    - Notifies registered subscribers, sync or async
    - A failing subscriber is logged and does not affect the others
    """

    def __init__(self, history_size: int = DEFAULT_HISTORY_SIZE):
        """
        Initialize event bus with subscribers.

        Args:
            history_size: How many recent events to keep in `published`
        """
        self._subscribers: List[Callable[[DomainEvent], None]] = []
        self.published: Deque[DomainEvent] = deque(maxlen=history_size)

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        self.published.append(event)
        await self._notify_subscribers(event)

    def subscribe(self, handler: Callable[[DomainEvent], None]) -> None:
        """
        Subscribe to all domain events.

        Args:
            handler: Callback function that receives events
        """
        if handler not in self._subscribers:
            self._subscribers.append(handler)
            logger.info(f"Registered event subscriber: {handler.__name__}")

    def unsubscribe(self, handler: Callable[[DomainEvent], None]) -> None:
        """
        Unsubscribe from domain events.

        Args:
            handler: Callback function to remove
        """
        if handler in self._subscribers:
            self._subscribers.remove(handler)
            logger.info(f"Unregistered event subscriber: {handler.__name__}")

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify all subscribers about an event."""
        for subscriber in list(self._subscribers):
            try:
                if inspect.iscoroutinefunction(subscriber):
                    await subscriber(event)
                else:
                    subscriber(event)
            except Exception as e:
                logger.error(f"Subscriber {subscriber.__name__} failed: {e}", exc_info=True)


# Global event bus instance
_event_bus_instance: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """
    Get or create global event bus instance.

    Returns:
        Global event bus instance
    """
    global _event_bus_instance

    if _event_bus_instance is None:
        _event_bus_instance = InMemoryEventBus()

    return _event_bus_instance
