"""Message bus infrastructure - Redis Streams integration."""
from .redis_stream_event_bus import RedisStreamEventBus

__all__ = ["RedisStreamEventBus"]
