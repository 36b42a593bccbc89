# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Schedule board service.

This module provides the ScheduleService class for:
- Adding and bulk-deleting schedule tasks
- Posting text notes to a task's thread
- Posting image/file notes

Notes are append-only. A task keeps its thread until it is deleted.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, time
from typing import Callable

from ozark.domains.validation import require_text
from ozark.infrastructure.storage import CollectionKey, CollectionRepository
from ozark.models import Note, Priority, ScheduleTask
from ozark.utils.datetime import utc_now

logger = logging.getLogger(__name__)

IMAGE_NOTE_TEXT = "Sent an image"
FILE_NOTE_TEXT = "Sent a file: {name}"


class ScheduleServiceError(Exception):
    """Base exception for schedule service errors."""

    pass


class TaskNotFoundError(ScheduleServiceError):
    """Raised when no schedule task has the given id."""

    pass


class ScheduleService:
    """Service owning the schedule task collection."""

    def __init__(
        self,
        repository: CollectionRepository,
        id_factory: Callable[[], str],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.repository = repository
        self._new_id = id_factory
        self._clock = clock

    def list_tasks(self) -> tuple[ScheduleTask, ...]:
        return self.repository.get(CollectionKey.SCHEDULE_TASKS)

    def get_task(self, task_id: str) -> ScheduleTask:
        """Get a task by id.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        for task in self.list_tasks():
            if task.id == task_id:
                return task
        raise TaskNotFoundError(f"Schedule task {task_id} not found")

    def add_task(
        self,
        title: str,
        assigned_to: str,
        due_date: date,
        due_time: time | None = None,
        priority: Priority | str = Priority.MEDIUM,
    ) -> ScheduleTask:
        """Add a task with an empty note thread.

        Raises:
            RequiredFieldError: If title or assignee is blank.
            StorageError: If the collection cannot be saved.
        """
        task = ScheduleTask(
            id=self._new_id(),
            title=require_text(title, "title"),
            assigned_to=require_text(assigned_to, "assignedTo"),
            due_date=due_date,
            due_time=due_time,
            priority=Priority(priority),
        )
        self.repository.commit(
            CollectionKey.SCHEDULE_TASKS, (*self.list_tasks(), task)
        )

        logger.info("Added schedule task: id=%s, assigned_to=%s", task.id, task.assigned_to)
        return task

    def delete_tasks(self, task_ids: Iterable[str]) -> int:
        """Remove every task whose id is in ``task_ids``.

        Unknown ids are ignored.

        Returns:
            Number of tasks removed.
        """
        doomed = set(task_ids)
        tasks = self.list_tasks()
        kept = tuple(t for t in tasks if t.id not in doomed)
        removed = len(tasks) - len(kept)

        if removed:
            self.repository.commit(CollectionKey.SCHEDULE_TASKS, kept)
            logger.info("Deleted %d schedule tasks", removed)
        return removed

    def post_note(self, task_id: str, author: str, text: str) -> Note:
        """Append a text note to a task's thread.

        Raises:
            RequiredFieldError: If text is blank.
            TaskNotFoundError: If no task has this id.
        """
        note = Note(
            id=self._new_id(),
            author=author,
            text=require_text(text, "text"),
            sent_at=self._clock(),
        )
        return self._append_note(task_id, note)

    def attach_file(
        self,
        task_id: str,
        author: str,
        file_name: str,
        content_type: str,
        file_url: str | None = None,
    ) -> Note:
        """Append an image or file note to a task's thread.

        Args:
            task_id: Target task.
            author: Name shown on the note.
            file_name: Original file name.
            content_type: MIME type; ``image/*`` marks an image note.
            file_url: Where the file can be fetched, if anywhere.

        Raises:
            RequiredFieldError: If file_name is blank.
            TaskNotFoundError: If no task has this id.
        """
        name = require_text(file_name, "fileName")
        is_image = (content_type or "").lower().startswith("image/")
        note = Note(
            id=self._new_id(),
            author=author,
            text=IMAGE_NOTE_TEXT if is_image else FILE_NOTE_TEXT.format(name=name),
            sent_at=self._clock(),
            is_image=is_image,
            is_file=not is_image,
            file_name=name,
            file_url=file_url,
        )
        return self._append_note(task_id, note)

    def _append_note(self, task_id: str, note: Note) -> Note:
        task = self.get_task(task_id)
        updated = task.model_copy(update={"notes": (*task.notes, note)})
        self.repository.commit(
            CollectionKey.SCHEDULE_TASKS,
            (updated if t.id == task_id else t for t in self.list_tasks()),
        )

        logger.debug("Posted note %s on task %s", note.id, task_id)
        return note
