from pydantic_settings import BaseSettings, SettingsConfigDict


class EcommerceBaseSettings(BaseSettings):
    """Shared .env loading for every settings section."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
