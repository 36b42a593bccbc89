# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Schedule board entities.

Schedule tasks are independent of courses. Their due date is persisted
under the key ``due`` (course items use ``dueDate``); in Python both are
exposed as ``due_date``.
"""

from datetime import date, datetime, time

from pydantic import Field

from ozark.models.common import EntityModel, Priority


class Note(EntityModel):
    """One message in a task's note thread. Never edited or deleted."""

    id: str
    author: str = Field(alias="user")
    text: str
    sent_at: datetime
    is_image: bool = False
    is_file: bool = False
    file_name: str | None = None
    file_url: str | None = None


class ScheduleTask(EntityModel):
    """A to-do on the schedule board with its note thread."""

    id: str
    title: str
    assigned_to: str
    due_date: date = Field(alias="due")
    due_time: time | None = None
    priority: Priority = Priority.MEDIUM
    notes: tuple[Note, ...] = ()

