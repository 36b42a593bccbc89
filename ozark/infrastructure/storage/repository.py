# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Typed collection snapshots over a key-value store.

The repository loads each collection once, validates it into entity
models and hands out immutable snapshots (tuples). ``commit`` writes the
whole new collection and swaps the snapshot only after the store accepted
the write, so a failed save never leaves memory ahead of storage.
"""

import logging
from typing import Any, Callable, Iterable

from pydantic import TypeAdapter, ValidationError

from ozark.infrastructure.storage.base import CollectionKey, KeyValueStore, StorageError
from ozark.models import Course, ScheduleTask, Submission, User

logger = logging.getLogger(__name__)

SeedFactory = Callable[[], list[dict[str, Any]]]

COLLECTION_MODELS: dict[str, type] = {
    CollectionKey.USERS: User,
    CollectionKey.COURSES: Course,
    CollectionKey.SUBMISSIONS: Submission,
    CollectionKey.SCHEDULE_TASKS: ScheduleTask,
}


class CollectionRepository:
    """Snapshot cache and single write path for the persisted collections.

    Attributes:
        store: Backend holding the encoded collections.
    """

    def __init__(
        self,
        store: KeyValueStore,
        seeds: dict[str, SeedFactory] | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Key-value backend.
            seeds: Per-collection factories for the initial contents of a
                collection that has never been written. Seeded values are
                not persisted until the first commit.
        """
        self.store = store
        self._seeds = dict(seeds or {})
        self._snapshots: dict[str, tuple[Any, ...]] = {}
        self._loads: dict[str, int] = {}
        self._adapters = {
            key: TypeAdapter(list[model]) for key, model in COLLECTION_MODELS.items()
        }

    def _adapter(self, key: str) -> TypeAdapter:
        try:
            return self._adapters[key]
        except KeyError:
            raise KeyError(f"Unknown collection: {key}") from None

    def get(self, key: str) -> tuple[Any, ...]:
        """Current snapshot of a collection, loading it on first access.

        Raises:
            StorageError: If the stored value cannot be read or validated.
        """
        if key not in self._snapshots:
            self._snapshots[key] = self._load(key)
            self._loads[key] = self._loads.get(key, 0) + 1
        return self._snapshots[key]

    def load_count(self, key: str) -> int:
        """How many times ``key`` has been read from the store.

        Callers that derive state from a snapshot compare this number to
        notice that the collection was reloaded, e.g. after invalidate().
        """
        return self._loads.get(key, 0)

    def _load(self, key: str) -> tuple[Any, ...]:
        adapter = self._adapter(key)
        raw = self.store.load(key, None)
        if raw is None:
            seed = self._seeds.get(key)
            raw = seed() if seed is not None else []
            if raw:
                logger.info("Seeded collection %s with %d entries", key, len(raw))
        try:
            items = adapter.validate_python(raw)
        except ValidationError as e:
            raise StorageError(f"Stored collection '{key}' is malformed", key, e) from e
        return tuple(items)

    def commit(self, key: str, items: Iterable[Any]) -> tuple[Any, ...]:
        """Persist a whole collection, then make it the current snapshot.

        Args:
            key: Collection name.
            items: The complete new contents.

        Returns:
            The new snapshot.

        Raises:
            StorageError: If the write fails; the previous snapshot stays
                current.
        """
        snapshot = tuple(items)
        payload = self._adapter(key).dump_python(
            list(snapshot), mode="json", by_alias=True
        )
        self.store.save(key, payload)
        self._snapshots[key] = snapshot
        logger.debug("Committed %s (%d entries)", key, len(snapshot))
        return snapshot

    def invalidate(self, key: str | None = None) -> None:
        """Drop cached snapshots so the next read goes to the store."""
        if key is None:
            self._snapshots.clear()
        else:
            self._snapshots.pop(key, None)
