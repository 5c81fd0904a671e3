"""Tests for configuration management."""

import logging
from datetime import timedelta

import pytest

from network_registry.core.config import ConfigurationError, Settings, get_settings, reset_settings
from network_registry.core.logging import RequestIdFilter, configure_logging, get_request_id, set_request_id
from network_registry.utils.datetime_utils import TIMESTAMP_RESOLUTION, later_than, now, to_iso, truncate


class TestSettingsDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        settings = Settings()

        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.timezone == "UTC"
        assert settings.log_level == "INFO"
        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.mongo_database_name == "network_registry"
        assert settings.networks_collection == "networks"
        assert settings.mongo_min_pool_size == 1
        assert settings.mongo_max_pool_size == 10
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_leeway_seconds == 60
        assert settings.allowed_origins == []


class TestSettingsEnvVars:
    """Test environment variable loading."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("DB_NAME", "registry_test")
        monkeypatch.setenv("MONGO_MAX_POOL_SIZE", "50")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

        settings = Settings()

        assert settings.port == 9000
        assert settings.mongo_database_name == "registry_test"
        assert settings.mongo_max_pool_size == 50
        assert settings.allowed_origins == ["https://a.example", "https://b.example"]

    def test_get_settings_is_cached_until_reset(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        reset_settings()

        assert get_settings() is not first
        assert get_settings().log_level == "DEBUG"


class TestSettingsValidate:
    """Test startup checks."""

    def test_valid_settings_pass(self):
        Settings().validate()

    def test_missing_jwt_secret(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET")
        with pytest.raises(ConfigurationError, match="JWT secret is required"):
            Settings().validate()

    def test_short_jwt_secret(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "too-short")
        with pytest.raises(ConfigurationError, match="at least 32 characters"):
            Settings().validate()

    def test_empty_mongo_uri(self, monkeypatch):
        monkeypatch.setenv("MONGO_URI", "")
        with pytest.raises(ConfigurationError, match="Database URI is required"):
            Settings().validate()

    def test_inverted_pool_bounds(self, monkeypatch):
        monkeypatch.setenv("MONGO_MIN_POOL_SIZE", "20")
        monkeypatch.setenv("MONGO_MAX_POOL_SIZE", "5")
        with pytest.raises(ConfigurationError, match="cannot exceed"):
            Settings().validate()


class TestLogging:
    """Test logging setup."""

    def test_invalid_level_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging("LOUD")

    def test_request_id_filter(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        set_request_id("req-1")
        try:
            RequestIdFilter().filter(record)
            assert record.request_id == "req-1"
            assert get_request_id() == "req-1"
        finally:
            set_request_id(None)

        RequestIdFilter().filter(record)
        assert record.request_id == "-"


class TestDatetimeUtils:
    """Test timestamp helpers."""

    def test_now_is_utc_by_default(self):
        assert to_iso(now()).endswith("Z")

    def test_invalid_timezone_falls_back_to_utc(self, monkeypatch):
        monkeypatch.setenv("TIMEZONE", "Mars/Olympus_Mons")
        reset_settings()

        assert to_iso(now()).endswith("Z")

    def test_later_than_future_timestamp_is_strictly_later(self):
        future = now() + timedelta(days=1)
        assert later_than(future) > future

    def test_to_iso_none(self):
        assert to_iso(None) is None

    def test_now_has_millisecond_precision(self):
        assert now().microsecond % 1000 == 0

    def test_later_than_moves_by_whole_milliseconds(self):
        previous = now() + timedelta(hours=1, microseconds=999)
        assert later_than(previous) == truncate(previous) + TIMESTAMP_RESOLUTION
        assert later_than(previous).microsecond % 1000 == 0

    def test_truncate(self):
        value = now().replace(microsecond=123456)
        assert truncate(value).microsecond == 123000
