"""Tests for environment driven settings."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from choremarket.config import Settings, get_settings, reset_settings_cache
from choremarket.infrastructure.notifications import WebhookConfig
from choremarket.utils import from_storage, to_storage


@pytest.fixture()
def clean_settings(monkeypatch):
    for name in (
        "APP_TIMEZONE",
        "NOTIFICATION_WEBHOOK_URL",
        "NOTIFICATION_PROVIDER",
        "NOTIFICATION_MAX_ATTEMPTS",
        "NOTIFICATION_BACKOFF_MS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield monkeypatch
    reset_settings_cache()


def test_blank_webhook_disables_delivery(clean_settings):
    clean_settings.setenv("NOTIFICATION_WEBHOOK_URL", "   ")

    settings = get_settings()

    assert settings.notification_webhook_url is None
    assert WebhookConfig.from_settings(settings).is_configured is False


def test_webhook_must_be_http(clean_settings):
    with pytest.raises(ValidationError):
        Settings(notification_webhook_url="ftp://example.com/hook")


def test_webhook_config_from_environment(clean_settings):
    clean_settings.setenv("NOTIFICATION_WEBHOOK_URL", "https://hooks.example.com/n")
    clean_settings.setenv("NOTIFICATION_PROVIDER", "msg91")
    clean_settings.setenv("NOTIFICATION_MAX_ATTEMPTS", "5")
    clean_settings.setenv("NOTIFICATION_BACKOFF_MS", "100")

    config = WebhookConfig.from_settings(get_settings())

    assert config.url == "https://hooks.example.com/n"
    assert config.provider == "msg91"
    assert config.max_attempts == 5
    assert config.backoff_for(1) == pytest.approx(0.2)


def test_cors_origins_are_split(clean_settings):
    settings = Settings(cors_origins="http://a.test, http://b.test,")

    assert settings.cors_origin_list() == ["http://a.test", "http://b.test"]


def test_unknown_timezone_is_rejected():
    with pytest.raises(ValidationError):
        Settings(app_timezone="Mars/Olympus_Mons")


def test_storage_helpers_use_app_timezone(clean_settings):
    clean_settings.setenv("APP_TIMEZONE", "Asia/Kolkata")

    stored = to_storage(datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc))
    assert stored == datetime(2024, 1, 1, 5, 30)
    assert stored.tzinfo is None

    loaded = from_storage(stored)
    assert loaded.utcoffset().total_seconds() == 5.5 * 3600
    assert loaded == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    assert from_storage(None) is None
