from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from ecommerce.settings.base_settings import EcommerceBaseSettings


class LoggingSettings(EcommerceBaseSettings):
    """
    Logging settings.
    Loaded from LOG_* environment variables or .env file.
    """

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
