# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard to-do list."""

from collections.abc import Iterable

from ozark.models import Course, GradeType, TodoItem


def build_todo_list(courses: Iterable[Course]) -> list[TodoItem]:
    """Every assignment and quiz across courses, earliest due date first.

    Items are gathered per course (assignments, then quizzes) in collection
    order; the sort is stable, so ties keep that order. Schedule tasks are
    not included.
    """
    items: list[TodoItem] = []
    for course in courses:
        context = {
            "course_id": course.id,
            "course_name": course.name,
            "course_code": course.code,
            "course_color": course.color,
        }
        for assignment in course.assignments:
            items.append(
                TodoItem(
                    item_id=assignment.id,
                    title=assignment.title,
                    kind=GradeType.ASSIGNMENT,
                    due_date=assignment.due_date,
                    due_time=assignment.due_time,
                    **context,
                )
            )
        for quiz in course.quizzes:
            items.append(
                TodoItem(
                    item_id=quiz.id,
                    title=quiz.title,
                    kind=GradeType.QUIZ,
                    due_date=quiz.due_date,
                    **context,
                )
            )

    items.sort(key=lambda item: item.due_date)
    return items
