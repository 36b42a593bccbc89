# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard view models."""

from datetime import date, time

from ozark.models.common import EntityModel, GradeType


class TodoItem(EntityModel):
    """An assignment or quiz on the to-do list, with its course context."""

    item_id: str
    title: str
    kind: GradeType
    due_date: date
    due_time: time | None = None
    course_id: str
    course_name: str
    course_code: str
    course_color: str
