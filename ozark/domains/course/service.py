# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course service for authoring courses and their content.

This module provides the CourseService class for:
- Course creation, whole-object update, detail edits and deletion
- Adding modules, module items, assignments and quizzes
- Resolving an assignment/quiz id to its owning course

A Course is an immutable aggregate. Every change builds a new Course value
and goes through update_course, which persists the whole collection.

Example:
    >>> course = course_service.create_course("Algebra", "MATH101", "Fall 2024")
    >>> course = course_service.add_module(course, "Week 1")
"""

import logging
import random
from typing import Callable

from ozark.core.config.settings import DomainSettings
from ozark.domains.course.index import CourseItemIndex
from ozark.domains.quiz.scoring import InvalidQuizError, validate_questions
from ozark.domains.validation import require_text
from ozark.infrastructure.storage import CollectionKey, CollectionRepository
from ozark.models import (
    Assignment,
    AssignmentCreateRequest,
    Course,
    Item,
    Module,
    Quiz,
    QuizCreateRequest,
)

logger = logging.getLogger(__name__)

COURSE_COLORS = (
    "bg-blue-500",
    "bg-emerald-500",
    "bg-rose-500",
    "bg-amber-500",
    "bg-purple-500",
    "bg-pink-500",
    "bg-indigo-500",
    "bg-teal-500",
    "bg-cyan-500",
)

COURSE_ICONS = ("💻", "📐", "📝", "🌍", "⚡", "🎨", "🔬", "📊", "🎵")

DEFAULT_TERM = "Fall 2024"


def _term_or_default(term: str | None) -> str:
    return (term or "").strip() or DEFAULT_TERM


class CourseServiceError(Exception):
    """Base exception for course service errors."""

    pass


class CourseNotFoundError(CourseServiceError):
    """Raised when no course has the given id."""

    pass


class CourseModuleNotFoundError(CourseServiceError):
    """Raised when a course has no module with the given id."""

    pass


class AssignmentNotFoundError(CourseServiceError):
    """Raised when no course owns the given assignment or quiz id."""

    pass


class CourseService:
    """Service owning the course collection.

    Attributes:
        repository: Collection snapshots and write path.
        index: Assignment/quiz id to course id index.
    """

    def __init__(
        self,
        repository: CollectionRepository,
        id_factory: Callable[[], str],
        settings: DomainSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize course service.

        Args:
            repository: Collection repository.
            id_factory: Produces fresh entity ids.
            settings: Mutation policy switches.
            rng: Source of randomness for the cosmetic color and icon.
        """
        self.repository = repository
        self._new_id = id_factory
        self._settings = settings or DomainSettings()
        self._rng = rng or random.Random()
        self.index = CourseItemIndex()
        self._indexed_load: int | None = None
        self.list_courses()

    def list_courses(self) -> tuple[Course, ...]:
        """Current courses snapshot.

        The item index is rebuilt whenever the repository has reloaded the
        collection since it was last built.
        """
        courses = self.repository.get(CollectionKey.COURSES)
        loaded = self.repository.load_count(CollectionKey.COURSES)
        if loaded != self._indexed_load:
            self.index.rebuild(courses)
            self._indexed_load = loaded
        return courses

    def get_course(self, course_id: str) -> Course:
        """Get a course by id.

        Raises:
            CourseNotFoundError: If no course has this id.
        """
        for course in self.list_courses():
            if course.id == course_id:
                return course
        raise CourseNotFoundError(f"Course {course_id} not found")

    def create_course(self, name: str, code: str, term: str = DEFAULT_TERM) -> Course:
        """Create an empty course with a random color and icon.

        Raises:
            RequiredFieldError: If name or code is blank.
            StorageError: If the collection cannot be saved.
        """
        course = Course(
            id=self._new_id(),
            name=require_text(name, "name"),
            code=require_text(code, "code"),
            term=_term_or_default(term),
            color=self._rng.choice(COURSE_COLORS),
            icon=self._rng.choice(COURSE_ICONS),
        )

        self.repository.commit(CollectionKey.COURSES, (*self.list_courses(), course))
        self.index.reindex_course(course)

        logger.info("Created course: id=%s, code=%s", course.id, course.code)
        return course

    def update_course(self, course: Course) -> Course:
        """Replace the stored course with the same id.

        The caller supplies the complete course value; there is no
        field-level merge.

        Raises:
            CourseNotFoundError: If no course has this id.
            StorageError: If the collection cannot be saved.
        """
        courses = self.list_courses()
        if not any(c.id == course.id for c in courses):
            raise CourseNotFoundError(f"Course {course.id} not found")

        self.repository.commit(
            CollectionKey.COURSES,
            (course if c.id == course.id else c for c in courses),
        )
        self.index.reindex_course(course)

        logger.debug("Updated course: id=%s", course.id)
        return course

    def edit_course_details(
        self,
        course_id: str,
        name: str,
        code: str,
        term: str,
    ) -> Course:
        """Change a course's name, code and term, keeping its content.

        A blank term falls back to the default term, as on creation.
        """
        course = self.get_course(course_id)
        updated = course.model_copy(
            update={
                "name": require_text(name, "name"),
                "code": require_text(code, "code"),
                "term": _term_or_default(term),
            }
        )
        return self.update_course(updated)

    def delete_course(self, course_id: str) -> Course:
        """Remove a course.

        The course's grades go with it. Submissions for its assignments are
        kept unless cascade_course_delete is enabled.

        Raises:
            CourseNotFoundError: If no course has this id.
            StorageError: If a collection cannot be saved.
        """
        course = self.get_course(course_id)

        self.repository.commit(
            CollectionKey.COURSES,
            (c for c in self.list_courses() if c.id != course_id),
        )
        self.index.drop_course(course_id)

        if self._settings.cascade_course_delete:
            self._drop_submissions(course)

        logger.info("Deleted course: id=%s, code=%s", course.id, course.code)
        return course

    def _drop_submissions(self, course: Course) -> None:
        owned = set(course.gradable_ids())
        submissions = self.repository.get(CollectionKey.SUBMISSIONS)
        kept = tuple(s for s in submissions if s.assignment_id not in owned)
        if len(kept) != len(submissions):
            self.repository.commit(CollectionKey.SUBMISSIONS, kept)
            logger.info(
                "Removed %d submissions of deleted course %s",
                len(submissions) - len(kept),
                course.id,
            )

    def add_module(self, course: Course, title: str) -> Course:
        module = Module(id=self._new_id(), title=require_text(title, "title"))
        return self.update_course(
            course.model_copy(update={"modules": (*course.modules, module)})
        )

    def add_item(self, course: Course, module_id: str, item: Item) -> Course:
        """Append a content item to one of the course's modules.

        Raises:
            CourseModuleNotFoundError: If the course has no such module.
        """
        require_text(item.title, "title")
        if not any(m.id == module_id for m in course.modules):
            raise CourseModuleNotFoundError(
                f"Module {module_id} not found in course {course.id}"
            )

        modules = tuple(
            m.model_copy(update={"items": (*m.items, item)}) if m.id == module_id else m
            for m in course.modules
        )
        return self.update_course(course.model_copy(update={"modules": modules}))

    def add_assignment(self, course: Course, data: AssignmentCreateRequest) -> Course:
        assignment = Assignment(
            id=self._new_id(),
            title=require_text(data.title, "title"),
            due_date=data.due_date,
            due_time=data.due_time,
            file_names=data.file_names,
            max_attempts=data.max_attempts,
        )
        updated = self.update_course(
            course.model_copy(update={"assignments": (*course.assignments, assignment)})
        )
        logger.info("Added assignment: id=%s, course=%s", assignment.id, course.id)
        return updated

    def add_quiz(self, course: Course, data: QuizCreateRequest) -> Course:
        """Append a quiz after checking its questions.

        Raises:
            InvalidQuizError: If any question is malformed or there are none.
        """
        title = require_text(data.title, "title")
        try:
            validate_questions(data.questions)
        except InvalidQuizError:
            logger.warning("Rejected quiz %r for course %s", title, course.id)
            raise

        quiz = Quiz(
            id=self._new_id(),
            title=title,
            due_date=data.due_date,
            max_attempts=data.max_attempts,
            questions=data.questions,
        )
        updated = self.update_course(
            course.model_copy(update={"quizzes": (*course.quizzes, quiz)})
        )
        logger.info(
            "Added quiz: id=%s, course=%s, questions=%d",
            quiz.id,
            course.id,
            len(quiz.questions),
        )
        return updated

    def find_owner(self, item_id: str) -> Course:
        """Course owning an assignment or quiz id.

        Raises:
            AssignmentNotFoundError: If no course owns the id.
        """
        self.list_courses()
        course_id = self.index.owner_of(item_id)
        if course_id is None:
            raise AssignmentNotFoundError(f"Assignment or quiz {item_id} not found")
        return self.get_course(course_id)

    def find_gradable(self, item_id: str) -> tuple[Course, Assignment | Quiz]:
        """Owning course and the assignment or quiz itself.

        Raises:
            AssignmentNotFoundError: If no course owns the id.
        """
        course = self.find_owner(item_id)
        item = course.find_gradable(item_id)
        if item is None:
            raise AssignmentNotFoundError(f"Assignment or quiz {item_id} not found")
        return course, item
