# Settings modules
from .app_settings import AppSettings, get_app_settings, IntegrationsSettings
from .database_settings import DatabaseSettings
from .logging_settings import LoggingSettings
from .placement_settings import PlacementSettings
from .integrations_settings import RedisSettings, SlackSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "IntegrationsSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "PlacementSettings",
    "RedisSettings",
    "SlackSettings",
]
