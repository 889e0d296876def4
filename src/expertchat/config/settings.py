"""Application settings loaded from environment variables or a `.env` file.

All variables use the ``EXPERTCHAT_`` prefix, nested sections use ``__``:

    EXPERTCHAT_API__BASE_URL=https://chat.example.com/api
    EXPERTCHAT_API__TIMEOUT=10
    EXPERTCHAT_LOGGING__LOG_LEVEL=DEBUG
"""

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    """Backend API connection settings."""

    base_url: str = Field(
        default="http://localhost:3000",
        description="Base address every request path is appended to",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )
    # Hey future me - retry_attempts is ACCEPTED but INERT! The pipeline never retries.
    # Claims and message sends are not idempotent, so a blind retry could double-post.
    # If you ever wire it up, only retry transport failures on GET requests.
    retry_attempts: int = Field(
        default=3,
        ge=0,
        description="Configured retry count (not applied by the request pipeline)",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value.rstrip("/")


class LoggingSettings(BaseModel):
    """Logging output settings."""

    log_level: str = Field(default="INFO", description="Root log level")
    json_format: bool = Field(
        default=False, description="Emit JSON log lines instead of text"
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class Settings(BaseSettings):
    """Top-level settings object."""

    model_config = SettingsConfigDict(
        env_prefix="EXPERTCHAT_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="expertchat")
    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
