# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Persistent store adapter.

Backends (memory, JSON files, Redis) share the KeyValueStore contract;
CollectionRepository layers typed, all-or-nothing collection writes on top.

Example:
    from ozark.infrastructure.storage import create_store, CollectionRepository

    store = create_store(settings)
    repo = CollectionRepository(store)
    courses = repo.get(CollectionKey.COURSES)
"""

from typing import TYPE_CHECKING

from ozark.infrastructure.storage.base import CollectionKey, KeyValueStore, StorageError
from ozark.infrastructure.storage.file import JsonFileStore
from ozark.infrastructure.storage.memory import MemoryStore
from ozark.infrastructure.storage.redis_store import RedisStore
from ozark.infrastructure.storage.repository import CollectionRepository

if TYPE_CHECKING:
    from ozark.core.config.settings import Settings


def create_store(settings: "Settings") -> KeyValueStore:
    """Build the store backend selected by ``settings.storage.backend``.

    Raises:
        StorageError: If the Redis backend cannot connect.
    """
    storage = settings.storage
    if storage.backend == "file":
        return JsonFileStore(storage.directory, key_prefix=storage.key_prefix)
    if storage.backend == "redis":
        return RedisStore.from_settings(settings)
    return MemoryStore(key_prefix=storage.key_prefix)


__all__ = [
    "CollectionKey",
    "CollectionRepository",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "RedisStore",
    "StorageError",
    "create_store",
]
