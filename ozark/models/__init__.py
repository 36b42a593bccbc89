# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Entity and view models."""

from ozark.models.calendar import (
    MAX_DAY_MARKERS,
    CalendarDay,
    CalendarEvent,
    CalendarMonth,
    CustomEvent,
    EventKind,
)
from ozark.models.common import (
    MAX_SCORE,
    UNLIMITED,
    EntityModel,
    GradeType,
    ItemType,
    MaxAttempts,
    Priority,
    Role,
)
from ozark.models.course import (
    Assignment,
    AssignmentCreateRequest,
    Course,
    Grade,
    Item,
    Module,
    Question,
    Quiz,
    QuizCreateRequest,
)
from ozark.models.dashboard import TodoItem
from ozark.models.schedule import Note, ScheduleTask
from ozark.models.submission import Submission
from ozark.models.user import User

__all__ = [
    # Common
    "EntityModel",
    "MAX_SCORE",
    "UNLIMITED",
    "MaxAttempts",
    "Role",
    "ItemType",
    "GradeType",
    "Priority",
    # Entities
    "User",
    "Course",
    "Module",
    "Item",
    "Assignment",
    "Quiz",
    "Question",
    "Grade",
    "Submission",
    "ScheduleTask",
    "Note",
    # Requests
    "AssignmentCreateRequest",
    "QuizCreateRequest",
    # Views
    "CustomEvent",
    "CalendarEvent",
    "CalendarDay",
    "CalendarMonth",
    "EventKind",
    "MAX_DAY_MARKERS",
    "TodoItem",
]
