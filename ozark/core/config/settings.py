# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for the LMS core.
Settings are loaded from environment variables with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings().

Example:
    >>> from ozark.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.storage.backend)
    'memory'
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Persistent key-value store configuration.

    Attributes:
        backend: Which store implementation holds the collections.
        directory: Directory used by the file backend.
        key_prefix: Prefix applied to every logical collection key.
    """

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        extra="ignore",
    )

    backend: Literal["memory", "file", "redis"] = "memory"
    directory: Path = Path(".ozark")
    key_prefix: str = "lms_"


class RedisSettings(BaseSettings):
    """Redis configuration for the redis store backend.

    Attributes:
        host: Redis server host.
        port: Redis server port.
        password: Redis password.
        database: Redis database number.
        socket_timeout: Socket timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="REDIS_",
        extra="ignore",
    )

    host: str = "localhost"
    port: int = 6379
    password: SecretStr | None = None
    database: int = 0
    socket_timeout: float = 5.0

    @property
    def url(self) -> str:
        """Build the Redis connection URL."""
        if self.password is None:
            return f"redis://{self.host}:{self.port}/{self.database}"
        pwd = self.password.get_secret_value()
        return f"redis://:{pwd}@{self.host}:{self.port}/{self.database}"


class DomainSettings(BaseSettings):
    """Policy switches for the mutation engine.

    Attributes:
        enforce_max_attempts: Reject submissions beyond an assignment's
            max_attempts.
        cascade_course_delete: Remove a deleted course's submissions too.
        seed_schedule_tasks: Seed the schedule with the demo task when the
            collection has never been written.
    """

    model_config = SettingsConfigDict(
        env_prefix="LMS_",
        extra="ignore",
    )

    enforce_max_attempts: bool = True
    cascade_course_delete: bool = False
    seed_schedule_tasks: bool = True


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, test, production).
        debug: Enable debug mode.
        log_level: Logging level.
        storage: Store backend settings.
        redis: Redis settings.
        domain: Mutation policy settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "test", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    storage: StorageSettings = Field(default_factory=StorageSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    domain: DomainSettings = Field(default_factory=DomainSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    """
    get_settings.cache_clear()
