# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-process store.

Values are kept as encoded JSON strings, so a value that a real backend
would reject fails here too, and callers never share mutable state with
the store.
"""

from typing import Any

from ozark.infrastructure.storage.base import KeyValueStore


class MemoryStore(KeyValueStore):
    """Dict-backed store, used for tests and session-scoped data."""

    def __init__(self, key_prefix: str = "") -> None:
        super().__init__(key_prefix)
        self._data: dict[str, str] = {}

    def load(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(self.physical_key(key))
        if raw is None:
            return default
        return self._decode(key, raw)

    def save(self, key: str, value: Any) -> None:
        self._data[self.physical_key(key)] = self._encode(key, value)

    def delete(self, key: str) -> None:
        self._data.pop(self.physical_key(key), None)

    def keys(self) -> list[str]:
        """Physical keys currently held, in insertion order."""
        return list(self._data)
