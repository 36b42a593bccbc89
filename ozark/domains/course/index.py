# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Assignment/quiz id to owning-course index."""

from collections.abc import Iterable

from ozark.models import Course


class CourseItemIndex:
    """Maps every assignment and quiz id to the id of its course.

    Built from the course collection once, then updated by the course
    service on each mutation so owner lookups never scan all courses.
    When two courses share an item id the earlier course owns it.
    """

    def __init__(self, courses: Iterable[Course] = ()) -> None:
        self._owners: dict[str, str] = {}
        self.rebuild(courses)

    def rebuild(self, courses: Iterable[Course]) -> None:
        self._owners.clear()
        for course in courses:
            for item_id in course.gradable_ids():
                self._owners.setdefault(item_id, course.id)

    def reindex_course(self, course: Course) -> None:
        """Replace the entries of one course with its current items."""
        self.drop_course(course.id)
        for item_id in course.gradable_ids():
            self._owners.setdefault(item_id, course.id)

    def drop_course(self, course_id: str) -> None:
        self._owners = {
            item_id: owner
            for item_id, owner in self._owners.items()
            if owner != course_id
        }

    def owner_of(self, item_id: str) -> str | None:
        return self._owners.get(item_id)

    def __len__(self) -> int:
        return len(self._owners)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._owners
