# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard aggregates.

Everything here is derived on demand from course snapshots; nothing is
cached or persisted.
"""

from ozark.domains.dashboard.calendar import CalendarView, build_calendar_month
from ozark.domains.dashboard.grades import grades_for_student, student_average
from ozark.domains.dashboard.todo import build_todo_list

__all__ = [
    "CalendarView",
    "build_calendar_month",
    "build_todo_list",
    "grades_for_student",
    "student_average",
]
