# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course domain package.

- Course creation, update, detail edits and deletion
- Modules, items, assignments and quizzes
- Assignment/quiz ownership index
"""

from ozark.domains.course.index import CourseItemIndex
from ozark.domains.course.service import (
    COURSE_COLORS,
    COURSE_ICONS,
    DEFAULT_TERM,
    AssignmentNotFoundError,
    CourseModuleNotFoundError,
    CourseNotFoundError,
    CourseService,
    CourseServiceError,
)

__all__ = [
    "COURSE_COLORS",
    "COURSE_ICONS",
    "DEFAULT_TERM",
    "AssignmentNotFoundError",
    "CourseItemIndex",
    "CourseModuleNotFoundError",
    "CourseNotFoundError",
    "CourseService",
    "CourseServiceError",
]
