# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Redis-backed store.

Wraps the synchronous redis-py client. Each collection is one string key
holding its JSON encoding, prefixed with the configured key prefix.

Example:
    from ozark.infrastructure.storage.redis_store import RedisStore

    store = RedisStore.from_settings(settings)
    store.save("courses", [])
    store.load("courses", [])
"""

from typing import TYPE_CHECKING, Any, Optional

from redis import Redis
from redis.exceptions import RedisError

from ozark.infrastructure.storage.base import KeyValueStore, StorageError

if TYPE_CHECKING:
    from ozark.core.config.settings import Settings


class RedisStore(KeyValueStore):
    """Store whose collections live in Redis string keys.

    Attributes:
        client: The redis-py client (``decode_responses=True``).
    """

    def __init__(self, client: Redis, key_prefix: str = "") -> None:
        super().__init__(key_prefix)
        self.client = client

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RedisStore":
        """Build a store from application settings.

        Raises:
            StorageError: If the server cannot be reached.
        """
        client = Redis.from_url(
            settings.redis.url,
            decode_responses=True,
            socket_timeout=settings.redis.socket_timeout,
        )
        try:
            client.ping()
        except RedisError as e:
            raise StorageError("Failed to connect to Redis", None, e) from e
        return cls(client, key_prefix=settings.storage.key_prefix)

    def load(self, key: str, default: Any = None) -> Any:
        try:
            raw: Optional[str] = self.client.get(self.physical_key(key))
        except RedisError as e:
            raise StorageError(f"Failed to get key: {key}", key, e) from e
        if raw is None:
            return default
        return self._decode(key, raw)

    def save(self, key: str, value: Any) -> None:
        encoded = self._encode(key, value)
        try:
            self.client.set(self.physical_key(key), encoded)
        except (RedisError, UnicodeError) as e:
            raise StorageError(f"Failed to set key: {key}", key, e) from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(self.physical_key(key))
        except RedisError as e:
            raise StorageError(f"Failed to delete key: {key}", key, e) from e
