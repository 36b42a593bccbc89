# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Schedule board domain package."""

from ozark.domains.schedule.search import filter_tasks
from ozark.domains.schedule.service import (
    FILE_NOTE_TEXT,
    IMAGE_NOTE_TEXT,
    ScheduleService,
    ScheduleServiceError,
    TaskNotFoundError,
)

__all__ = [
    "FILE_NOTE_TEXT",
    "IMAGE_NOTE_TEXT",
    "ScheduleService",
    "ScheduleServiceError",
    "TaskNotFoundError",
    "filter_tasks",
]
