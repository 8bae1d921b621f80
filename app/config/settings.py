"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = "logs/api.log"

    # HTTP server
    http_host: str = "0.0.0.0"
    http_port: int = Field(
        default=8080, ge=1, le=65535, description="HTTP API server port"
    )

    # Redis (shared rate limit and report counters)
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: str | None = None
    redis_db: int = 0
    redis_socket_timeout: float = Field(
        default=2.0, gt=0, description="Redis socket timeout in seconds"
    )

    # Rate limiting
    rate_limit_enabled: bool = True
    # Only enable behind a gateway that authenticates callers and sets X-User-Id
    trust_user_id_header: bool = False

    # Moderation
    report_counter_ttl_seconds: int = Field(
        default=30 * 24 * 3600,
        gt=0,
        description="How long pending report counts are retained"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a loguru level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f'Invalid LOG_LEVEL: {v}. Expected one of {", ".join(LOG_LEVELS)}'
            )
        return level

    @model_validator(mode='after')
    def validate_production(self) -> 'Settings':
        """Validate production-specific requirements."""
        if self.environment == 'production' and self.debug:
            raise ValueError(
                'DEBUG must be False in production environment. '
                'Set DEBUG=false in your .env file.'
            )
        return self


# Global settings instance
settings = Settings()
