"""
Test settings loading from the environment.

Every section must load with defaults alone and pick up its exact
environment variable names.
"""
from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ecommerce.dependencies import build_event_bus, build_notification_service
from ecommerce.infrastructure.adapters.notifications.logging_notification_service import (
    LoggingNotificationService,
)
from ecommerce.infrastructure.adapters.notifications.slack_notification_service import (
    SlackNotificationService,
)
from ecommerce.infrastructure.bus import RedisStreamEventBus
from ecommerce.infrastructure.event_bus import InMemoryEventBus
from ecommerce.settings import AppSettings, IntegrationsSettings, get_app_settings
from ecommerce.settings.modules import (
    DatabaseSettings,
    LoggingSettings,
    PlacementSettings,
    RedisSettings,
    SlackSettings,
)


_ENV_KEYS = [
    "ORDER_VIP_DISCOUNT_RATE",
    "DB_DATABASE_URL",
    "SLACK_ENABLED",
    "SLACK_WEBHOOK_URL",
    "REDIS_ENABLED",
    "REDIS_STREAM_NAME",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


def _app_settings() -> AppSettings:
    return AppSettings(
        placement=PlacementSettings(),
        database=DatabaseSettings(),
        integrations=IntegrationsSettings(slack=SlackSettings(), redis=RedisSettings()),
        log=LoggingSettings(),
    )


def test_defaults_load_without_env():
    settings = get_app_settings()

    assert settings.placement.vip_discount_rate == Decimal("0.10")
    assert settings.slack.enabled is False
    assert settings.redis.enabled is False
    assert settings.log.level == "INFO"


def test_get_app_settings_is_cached():
    assert get_app_settings() is get_app_settings()


def test_env_variables_are_mapped(monkeypatch):
    monkeypatch.setenv("ORDER_VIP_DISCOUNT_RATE", "0.15")
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///orders.db")
    monkeypatch.setenv("SLACK_ENABLED", "true")
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.example/abc")
    monkeypatch.setenv("REDIS_STREAM_NAME", "orders:test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = get_app_settings()

    assert settings.placement.vip_discount_rate == Decimal("0.15")
    assert settings.database.database_url == "sqlite+aiosqlite:///orders.db"
    assert settings.slack.enabled is True
    assert settings.slack.webhook_url == "https://hooks.example/abc"
    assert settings.redis.stream_name == "orders:test"
    assert settings.log.level == "DEBUG"


def test_discount_rate_must_be_a_fraction(monkeypatch):
    monkeypatch.setenv("ORDER_VIP_DISCOUNT_RATE", "1.5")

    with pytest.raises(ValidationError):
        PlacementSettings()


def test_default_adapters():
    settings = _app_settings()

    assert isinstance(build_notification_service(settings), LoggingNotificationService)
    assert isinstance(build_event_bus(settings), InMemoryEventBus)


def test_enabled_integrations_select_external_adapters(monkeypatch):
    monkeypatch.setenv("SLACK_ENABLED", "true")
    monkeypatch.setenv("REDIS_ENABLED", "true")
    monkeypatch.setenv("REDIS_STREAM_NAME", "orders:test")
    settings = _app_settings()

    assert isinstance(build_notification_service(settings), SlackNotificationService)
    bus = build_event_bus(settings)
    assert isinstance(bus, RedisStreamEventBus)
    assert bus.stream_name == "orders:test"
