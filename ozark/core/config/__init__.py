# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package.

- Settings: Pydantic-based settings loaded from environment variables
- Seed loader: YAML fixtures for collections that were never written

Example:
    >>> from ozark.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.domain.enforce_max_attempts
    True
"""

from ozark.core.config.seed import (
    FIXTURES_DIR,
    SeedLoadError,
    load_seed_collection,
    load_yaml,
)
from ozark.core.config.settings import (
    DomainSettings,
    RedisSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "StorageSettings",
    "RedisSettings",
    "DomainSettings",
    # Seeds
    "FIXTURES_DIR",
    "SeedLoadError",
    "load_seed_collection",
    "load_yaml",
]
