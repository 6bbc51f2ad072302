"""Observability configuration using pydantic-settings."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Observability settings loaded from OTEL_DECORATOR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OTEL_DECORATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Resource
    service_name: str = "unknown_service"
    service_version: str = "0.0.0"

    # Tracing
    tracing_enabled: bool = True
    otlp_endpoint: str | None = None  # e.g. "http://localhost:4318"
    console_export: bool = False  # Print spans to stdout (development)
    sample_rate: float = Field(default=1.0, ge=0.0, le=1.0)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept log level names in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
