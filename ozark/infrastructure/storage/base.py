# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Key-value store contract.

A store holds whole JSON-serializable collections under named keys.
``save`` always overwrites the entire value; there are no partial writes
and no transactions. Backends report every failure as StorageError.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Optional


class CollectionKey:
    """Logical keys of the persisted collections."""

    USERS = "users"
    COURSES = "courses"
    SUBMISSIONS = "submissions"
    SCHEDULE_TASKS = "schedule_tasks"
    CURRENT_SESSION_USER = "current_session_user"


class StorageError(Exception):
    """Exception raised when a store read or write fails.

    Attributes:
        message: Human-readable error description.
        key: The logical key involved, if any.
        original_error: The underlying backend error.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.original_error = original_error

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class KeyValueStore(ABC):
    """Whole-value key-value store with a key prefix.

    Attributes:
        key_prefix: Prepended to every logical key by the backend.
    """

    def __init__(self, key_prefix: str = "") -> None:
        self.key_prefix = key_prefix

    def physical_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    @abstractmethod
    def load(self, key: str, default: Any = None) -> Any:
        """Return the decoded value stored under ``key``, or ``default``.

        Raises:
            StorageError: If the backend cannot be read or holds invalid JSON.
        """

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Overwrite the value stored under ``key``.

        Raises:
            StorageError: If the value cannot be encoded or written.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; removing a missing key is not an error.

        Raises:
            StorageError: If the backend cannot be written.
        """

    def _encode(self, key: str, value: Any) -> str:
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError("Value is not JSON serializable", key, e) from e

    def _decode(self, key: str, raw: str) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError("Stored value is not valid JSON", key, e) from e
