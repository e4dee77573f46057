from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from ecommerce.settings.modules.database_settings import DatabaseSettings
from ecommerce.settings.modules.integrations_settings import RedisSettings, SlackSettings
from ecommerce.settings.modules.logging_settings import LoggingSettings
from ecommerce.settings.modules.placement_settings import PlacementSettings


class IntegrationsSettings(BaseModel):
    """Aggregates integrations settings as nested objects."""

    model_config = ConfigDict(extra="ignore")

    slack: SlackSettings
    redis: RedisSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    placement: PlacementSettings
    database: DatabaseSettings
    integrations: IntegrationsSettings
    log: LoggingSettings

    @property
    def slack(self) -> SlackSettings:
        return self.integrations.slack

    @property
    def redis(self) -> RedisSettings:
        return self.integrations.redis


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        placement=PlacementSettings(),
        database=DatabaseSettings(),
        integrations=IntegrationsSettings(
            slack=SlackSettings(),
            redis=RedisSettings(),
        ),
        log=LoggingSettings(),
    )
