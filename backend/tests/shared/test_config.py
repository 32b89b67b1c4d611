"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings()
        assert settings.app_name == "BMS Hub API"
        assert settings.debug is False
        assert settings.port == 5000
        assert settings.host == "0.0.0.0"
        assert settings.app_version == "0.1.0"
        assert settings.log_level == "INFO"

    def test_loads_from_env(self):
        """Settings should load BMS_-prefixed environment variables."""
        with patch.dict(os.environ, {"BMS_DEBUG": "true", "BMS_PORT": "9000"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables should not leak into settings."""
        with patch.dict(os.environ, {"PORT": "9000"}):
            settings = Settings()
            assert settings.port == 5000

    def test_loads_store_config_from_env(self):
        with patch.dict(os.environ, {
            "BMS_SUPABASE_URL": "https://test.supabase.co",
            "BMS_SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings()
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"

    def test_identity_defaults(self):
        """Tokens are HS256 with the 'authenticated' audience unless configured."""
        settings = Settings()
        assert settings.jwt_algorithms == ["HS256"]
        assert settings.jwt_audience == "authenticated"
        assert settings.jwt_secret == ""

    def test_gateway_defaults(self):
        """Settlement checks are off unless enabled."""
        settings = Settings()
        assert settings.payment_currency == "usd"
        assert settings.verify_payments_with_gateway is False

    def test_enables_gateway_verification_from_env(self):
        with patch.dict(os.environ, {"BMS_VERIFY_PAYMENTS_WITH_GATEWAY": "true"}):
            assert Settings().verify_payments_with_gateway is True

    def test_cors_origins_is_list(self):
        settings = Settings()
        assert isinstance(settings.cors_origins, list)
        assert "http://localhost:5173" in settings.cors_origins


class TestGetSettings:
    def test_returns_cached_instance(self):
        """get_settings should return the same instance until cleared."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        first = get_settings()
        get_settings.cache_clear()
        with patch.dict(os.environ, {"BMS_LOG_LEVEL": "DEBUG"}):
            second = get_settings()
        assert second is not first
        assert second.log_level == "DEBUG"
