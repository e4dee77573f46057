from __future__ import annotations

from typing import Optional

from pydantic_settings import SettingsConfigDict

from ecommerce.settings.base_settings import EcommerceBaseSettings


class SlackSettings(EcommerceBaseSettings):
    """
    Slack order confirmation settings.
    Loaded from SLACK_* environment variables or .env file.
    """

    model_config = SettingsConfigDict(env_prefix="SLACK_")

    enabled: bool = False
    webhook_url: Optional[str] = None
    prefix: str = "[ecommerce]"


class RedisSettings(EcommerceBaseSettings):
    """
    Redis Streams event bus settings.
    Loaded from REDIS_* environment variables or .env file.
    """

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    enabled: bool = False
    url: str = "redis://localhost:6379/0"
    stream_name: str = "ecommerce:orders:events"
    maxlen: int = 10000
