"""Tests for configuration classes."""

import os
import pytest
from unittest.mock import patch


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_cors_default_origins(self):
        """Test that default CORS origins are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            from config import CORSConfig

            config = CORSConfig()

            assert config.allowed_origins == ["http://localhost:8000"]
            assert config.allow_methods == ("GET", "POST")

    def test_cors_parses_env_var(self):
        """Test that CORS origins are parsed and stripped."""
        env_origins = "  http://example.com  ,http://localhost:3000,"
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            from config import CORSConfig

            config = CORSConfig()

            assert config.allowed_origins == ["http://example.com", "http://localhost:3000"]


class TestRateLimitConfig:
    """Tests for RateLimitConfig class."""

    def test_rate_limit_defaults(self):
        """Test default rate limit values."""
        with patch.dict(os.environ, {}, clear=True):
            from config import RateLimitConfig

            config = RateLimitConfig()

            assert config.enabled is True
            assert config.requests_per_minute == 60

    def test_rate_limit_from_env(self):
        """Test rate limit configuration from environment."""
        with patch.dict(
            os.environ,
            {"RATE_LIMIT_ENABLED": "FALSE", "RATE_LIMIT_RPM": "120"},
        ):
            from config import RateLimitConfig

            config = RateLimitConfig()

            assert config.enabled is False
            assert config.requests_per_minute == 120
            assert config.limit == "120/minute"


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_config_defaults(self):
        """Test the exercise values."""
        from config import GameConfig

        config = GameConfig()

        assert config.first_card == 10
        assert config.second_card == 4
        assert config.age == 22

    def test_game_config_ignores_env(self):
        """Test that the exercise values are not read from the environment."""
        with patch.dict(os.environ, {"AGE": "5", "FIRST_CARD": "11"}):
            from config import GameConfig

            assert GameConfig().age == 22
            assert GameConfig().first_card == 10

    def test_game_config_frozen(self):
        """Test that GameConfig is frozen (immutable)."""
        from config import GameConfig

        config = GameConfig()

        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            config.age = 18


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_app_config_defaults(self):
        """Test default AppConfig values."""
        with patch.dict(os.environ, {}, clear=True):
            from config import AppConfig

            config = AppConfig()

            assert config.host == "0.0.0.0"
            assert config.port == 8000

    def test_app_config_from_env(self):
        """Test host and port from environment."""
        with patch.dict(os.environ, {"HOST": "127.0.0.1", "PORT": "9000"}):
            from config import AppConfig

            config = AppConfig()

            assert config.host == "127.0.0.1"
            assert config.port == 9000

    def test_app_config_has_nested_configs(self):
        """Test that AppConfig has nested configuration objects."""
        from config import AppConfig

        config = AppConfig()

        assert hasattr(config, "game")
        assert hasattr(config, "cors")
        assert hasattr(config, "rate_limit")
