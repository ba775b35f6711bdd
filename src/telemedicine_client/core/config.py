"""
Configuration management for the telemedicine client.

This module provides centralized configuration using Pydantic Settings
for environment-based configuration management.
"""

from typing import Optional

import logging
import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FleurySettings(BaseSettings):
    """Fleury telemedicine API configuration settings."""

    model_config = SettingsConfigDict(env_prefix="FLEURY_")

    base_url: str = Field(default="", description="Fleury API base URL")
    api_key: str = Field(default="", description="Fleury integration API key")
    client_id: str = Field(default="", description="Fleury integration client id")
    timezone: str = Field(
        default="America/Sao_Paulo",
        description="Timezone used for naive upstream dates and for 'today'",
    )
    timeout_seconds: float = Field(default=30.0, description="Per-request timeout")
    max_retries: int = Field(default=3, description="Retries for idempotent requests")
    max_slots_per_professional: int = Field(
        default=50, description="Upstream cap for slots returned per professional"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL scheme."""
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("Fleury base URL must start with 'http://' or 'https://'")
        return v

    @field_validator("max_slots_per_professional")
    @classmethod
    def validate_max_slots(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_slots_per_professional must be positive")
        return v


class CacheSettings(BaseSettings):
    """Cache backend configuration settings."""

    model_config = SettingsConfigDict(env_prefix="CACHE_")

    backend: str = Field(default="memory", description="Cache backend (memory, redis, none)")
    ttl_seconds: int = Field(default=300, description="Default time-to-live for cached entries")
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    key_prefix: str = Field(default="telemedicine:", description="Prefix for cache keys")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Validate cache backend."""
        valid_backends = ["memory", "redis", "none"]
        if v.lower() not in valid_backends:
            raise ValueError(f"Cache backend must be one of: {valid_backends}")
        return v.lower()

    @field_validator("ttl_seconds")
    @classmethod
    def validate_ttl(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Cache TTL cannot be negative")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(default="json", description="Log format (json or text)")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ["json", "text"]:
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()


class Settings(BaseSettings):
    """Main client settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    provider: str = Field(
        default="fleury",
        validation_alias="TELEMEDICINE_PROVIDER",
        description="Scheduled telemedicine provider (fleury or fake)",
    )

    # Sub-settings
    fleury: FleurySettings = Field(default_factory=FleurySettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        # Sub-settings read their own prefixed environment variables
        if "fleury" not in kwargs:
            self.fleury = FleurySettings()
        if "cache" not in kwargs:
            self.cache = CacheSettings()
        if "logging" not in kwargs:
            self.logging = LoggingSettings()

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        valid_providers = ["fleury", "fake"]
        if v.lower() not in valid_providers:
            raise ValueError(f"Provider must be one of: {valid_providers}")
        return v.lower()


# Global settings instance (loaded after attempting to read .env)
_settings: Optional[Settings] = None


def _load_env_file_if_available() -> None:
    """Best-effort load of .env by searching current and parent directories.

    Pydantic's env_file is resolved relative to the working directory only,
    which misses the file when the client runs from a nested folder.
    """
    from dotenv import load_dotenv

    cwd = Path(os.getcwd()).resolve()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / ".env"
        if candidate.exists():
            # Do not override already-set environment variables
            load_dotenv(dotenv_path=str(candidate), override=False)
            logging.getLogger(__name__).debug(f"Loaded environment from {candidate}")
            break


def get_settings() -> Settings:
    """Get client settings instance (lazy-init with .env discovery)."""
    global _settings
    if _settings is None:
        _load_env_file_if_available()
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
