"""
Redis Streams Event Bus.

Publishes domain events to a Redis Stream for downstream consumers.
"""
import json
import logging
from typing import Dict, Optional

import redis.asyncio as aioredis

from ecommerce.domain.event_bus import EventBus
from ecommerce.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)


class RedisStreamEventBus(EventBus):
    """
    Publishes events to Redis Streams.

    Stream format: ecommerce:orders:events
    Message format: {
        "event_id": str,
        "event_type": str,
        "aggregate_id": str,
        "execution_id": str,  # empty when untraced
        "occurred_at": str,   # ISO format
        "data": str,          # JSON, Decimals as strings
    }
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        stream_name: str = "ecommerce:orders:events",
        maxlen: int = 10000,
        client: Optional[aioredis.Redis] = None,
    ):
        """
        Initialize Redis Stream event bus.

        Args:
            redis_url: Redis connection URL
            stream_name: Redis Stream name
            maxlen: Approximate number of messages kept in the stream
            client: Already-connected client (skips connect())
        """
        self.redis_url = redis_url
        self.stream_name = stream_name
        self.maxlen = maxlen
        self._redis_client = client

    async def connect(self) -> None:
        """Establish Redis connection."""
        if self._redis_client is None:
            self._redis_client = aioredis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
            await self._redis_client.ping()
            logger.info(f"✅ Connected to Redis: {self.redis_url}")

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._redis_client:
            await self._redis_client.aclose()
            self._redis_client = None
            logger.info("✅ Disconnected from Redis")

    @staticmethod
    def to_message(event: DomainEvent) -> Dict[str, str]:
        """Flatten an event into stream fields (Redis values are strings)."""
        payload = event.to_dict()
        return {
            "event_id": payload["event_id"],
            "event_type": payload["event_type"],
            "aggregate_id": payload["aggregate_id"],
            "execution_id": payload["execution_id"] or "",
            "occurred_at": payload["occurred_at"],
            "data": json.dumps(payload["data"]),
        }

    async def publish(self, event: DomainEvent) -> None:
        """
        XADD the event to the stream.

        Args:
            event: Domain event to publish
        """
        if self._redis_client is None:
            await self.connect()

        try:
            msg_id = await self._redis_client.xadd(
                self.stream_name,
                self.to_message(event),
                maxlen=self.maxlen,
                approximate=True,
            )
        except Exception as e:
            logger.error(f"Failed to publish to Redis Stream: {e}", exc_info=True)
            raise

        logger.info(
            f"✅ Published {event.event_type} event: "
            f"aggregate={event.aggregate_id}, msg_id={msg_id}"
        )

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.disconnect()
