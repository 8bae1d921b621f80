"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from app.config.settings import Settings
from app.utils.redis_utils import get_redis_client, get_redis_url_masked


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None, environment="test")
        assert settings.http_port == 8080
        assert settings.rate_limit_enabled is True
        assert settings.report_counter_ttl_seconds == 30 * 24 * 3600

    def test_log_level_normalized(self) -> None:
        assert Settings(_env_file=None, environment="test", log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="test", log_level="verbose")

    def test_debug_forbidden_in_production(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="production", debug=True)

    def test_debug_allowed_outside_production(self) -> None:
        assert Settings(_env_file=None, environment="development", debug=True).debug is True

    def test_env_variables_loaded(self, monkeypatch) -> None:
        monkeypatch.setenv("HTTP_PORT", "9090")
        monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")
        settings = Settings(_env_file=None)
        assert settings.http_port == 9090
        assert settings.rate_limit_enabled is False

    def test_user_id_header_untrusted_by_default(self) -> None:
        assert Settings(_env_file=None, environment="test").trust_user_id_header is False


class TestRedisUrl:
    """Tests for Redis URL helpers."""

    def test_url_without_password(self) -> None:
        settings = Settings(_env_file=None, environment="test", redis_host="cache", redis_db=2)
        assert get_redis_url_masked(settings) == "redis://cache:6379/2"

    def test_masked_url_hides_password(self) -> None:
        settings = Settings(_env_file=None, environment="test", redis_password="s3cret")
        assert get_redis_url_masked(settings) == "redis://:****@localhost:6379/0"

    def test_client_uses_settings(self) -> None:
        settings = Settings(_env_file=None, environment="test", redis_host="cache", redis_db=2)
        client = get_redis_client(settings)
        kwargs = client.connection_pool.connection_kwargs
        assert kwargs["host"] == "cache"
        assert kwargs["db"] == 2
        assert kwargs["socket_timeout"] == settings.redis_socket_timeout
