"""Tests for settings defaults and derived values."""

import logging

from textbook_scanner.infrastructure.config.settings import (
    APISettings,
    CORSSettings,
    DatabaseSettings,
    EnvironmentOption,
    LoggingSettings,
    get_settings,
)


def test_environment_options():
    assert {option.value for option in EnvironmentOption} == {"production", "staging", "development"}
    assert get_settings().ENVIRONMENT == EnvironmentOption.DEVELOPMENT


def test_cors_origins_list_splits_and_strips():
    assert CORSSettings(CORS_ORIGINS=" https://a.example , ,https://b.example").CORS_ORIGINS_LIST == [
        "https://a.example",
        "https://b.example",
    ]
    assert CORSSettings(CORS_ORIGINS="").CORS_ORIGINS_LIST == ["*"]


def test_log_level_int_falls_back_to_info():
    assert LoggingSettings(LOG_LEVEL="debug").LOG_LEVEL_INT == logging.DEBUG
    assert LoggingSettings(LOG_LEVEL="chatty").LOG_LEVEL_INT == logging.INFO


def test_postgres_url_is_not_sqlite():
    settings = DatabaseSettings(DATABASE_URL="postgresql+asyncpg://scanner@db:5432/textbook_scanner")

    assert not settings.DATABASE_IS_SQLITE


def test_api_metadata_defaults():
    settings = get_settings()

    assert settings.API_PREFIX == "/api"
    assert settings.API_TITLE == APISettings().API_TITLE
    assert not hasattr(settings, "POSTGRES_SERVER")
    assert not hasattr(settings, "DEBUG")
