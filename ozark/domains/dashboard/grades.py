# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Per-student grade views."""

from decimal import ROUND_HALF_UP, Decimal

from ozark.models import Course, Grade


def grades_for_student(course: Course, student_id: str) -> list[Grade]:
    return [g for g in course.grades if g.student_id == student_id]


def student_average(course: Course, student_id: str) -> int:
    """Mean of the student's scores in a course, rounded half up.

    Returns 0 when the student has no grades in the course.

    Example:
        >>> student_average(course, "s1")  # scores 80, 90, 70
        80
    """
    scores = [g.score for g in grades_for_student(course, student_id)]
    if not scores:
        return 0

    mean = Decimal(sum(scores)) / Decimal(len(scores))
    return int(mean.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
