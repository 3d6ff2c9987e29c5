"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class CORSConfig:
    """Origins allowed to call the API (``CORS_ORIGINS``, comma separated)."""

    allowed_origins: list[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:8000")
        )
    )
    allow_methods: tuple[str, ...] = ("GET", "POST")


@dataclass(frozen=True)
class RateLimitConfig:
    """Per-client request limit (``RATE_LIMIT_ENABLED``, ``RATE_LIMIT_RPM``)."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )

    @property
    def limit(self) -> str:
        """Limit string in slowapi notation."""
        return f"{self.requests_per_minute}/minute"


@dataclass(frozen=True)
class GameConfig:
    """Fixed values for the command-line exercise."""

    first_card: int = 10
    second_card: int = 4
    age: int = 22


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    game: GameConfig = field(default_factory=GameConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)


# Global configuration instance
config = AppConfig()
