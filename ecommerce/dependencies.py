"""
Dependencies.

Wires OrderPlacementService to the adapters selected by settings.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from sqlalchemy.ext.asyncio import async_sessionmaker

from ecommerce.application.interfaces import IIdentityContext, INotificationService
from ecommerce.application.services.order_placement_service import OrderPlacementService
from ecommerce.data.repositories.order_repository_impl import SqlAlchemyOrderRepository
from ecommerce.domain.event_bus import EventBus
from ecommerce.infrastructure.adapters.notifications.logging_notification_service import (
    LoggingNotificationService,
)
from ecommerce.infrastructure.database.config import get_session_factory
from ecommerce.infrastructure.event_bus import get_event_bus
from ecommerce.infrastructure.logging import get_logger
from ecommerce.settings import AppSettings, get_app_settings


logger = get_logger("ecommerce", level=get_app_settings().log.level)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_notification_service: Optional[INotificationService] = None
_event_bus: Optional[EventBus] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def build_notification_service(settings: AppSettings) -> INotificationService:
    """Slack when enabled, otherwise confirmations go to the log."""
    if settings.slack.enabled:
        from ecommerce.infrastructure.adapters.notifications.slack_notification_service import (
            SlackNotificationService,
        )
        return SlackNotificationService(settings.slack)
    return LoggingNotificationService()


def build_event_bus(settings: AppSettings) -> EventBus:
    """Redis Streams when enabled, otherwise the process-wide in-memory bus."""
    if settings.redis.enabled:
        from ecommerce.infrastructure.bus.redis_stream_event_bus import RedisStreamEventBus
        return RedisStreamEventBus(
            redis_url=settings.redis.url,
            stream_name=settings.redis.stream_name,
            maxlen=settings.redis.maxlen,
        )
    return get_event_bus()


def get_notification_service() -> INotificationService:
    global _notification_service
    if _notification_service is None:
        _notification_service = build_notification_service(get_app_settings())
        logger.info(f"Created {type(_notification_service).__name__} instance")
    return _notification_service


def get_placement_event_bus() -> EventBus:
    global _event_bus
    if _event_bus is None:
        _event_bus = build_event_bus(get_app_settings())
        logger.info(f"Created {type(_event_bus).__name__} instance")
    return _event_bus


@asynccontextmanager
async def order_placement_service(
    identity_context: IIdentityContext,
    session_factory: Optional[async_sessionmaker] = None,
) -> AsyncIterator[OrderPlacementService]:
    """
    Yield an OrderPlacementService bound to a fresh database session.

    Usage:
        async with order_placement_service(identity) as service:
            await service.place_order(order_id)

    Args:
        identity_context: Authenticated caller of this request
        session_factory: Session factory (defaults to the global engine)
    """
    factory = session_factory or get_session_factory()
    async with factory() as session:
        yield OrderPlacementService(
            order_repository=SqlAlchemyOrderRepository(session),
            identity_context=identity_context,
            notification_service=get_notification_service(),
            event_bus=get_placement_event_bus(),
            vip_discount_rate=get_app_settings().placement.vip_discount_rate,
        )
