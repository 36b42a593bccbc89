# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the course service and the course-item index."""

import random
from datetime import date

import pytest

from ozark.core.config import DomainSettings
from ozark.domains.course import (
    COURSE_COLORS,
    COURSE_ICONS,
    AssignmentNotFoundError,
    CourseItemIndex,
    CourseModuleNotFoundError,
    CourseNotFoundError,
    CourseService,
)
from ozark.domains.quiz import InvalidQuizError
from ozark.domains.validation import RequiredFieldError
from ozark.infrastructure.storage import CollectionKey
from ozark.models import (
    UNLIMITED,
    AssignmentCreateRequest,
    Item,
    ItemType,
    Question,
    QuizCreateRequest,
    Submission,
)


class TestCourseServiceCreate:
    """Tests for course creation."""

    def test_create_course(self, course_service: CourseService) -> None:
        """Test a new course is empty with a palette color and icon."""
        course = course_service.create_course("Algebra", "MATH101", "Spring 2025")

        assert course.name == "Algebra"
        assert course.term == "Spring 2025"
        assert course.color in COURSE_COLORS
        assert course.icon in COURSE_ICONS
        assert course.modules == course.assignments == course.quizzes == course.grades == ()
        assert course_service.list_courses() == (course,)

    def test_default_term(self, course_service: CourseService) -> None:
        """Test a blank term falls back to the default."""
        course = course_service.create_course("Algebra", "MATH101", "")

        assert course.term == "Fall 2024"

    def test_color_is_seeded(self, repository, id_factory) -> None:
        """Test the same seed picks the same color and icon."""
        first = CourseService(repository, id_factory, rng=random.Random(3))
        second = CourseService(repository, id_factory, rng=random.Random(3))

        a = first.create_course("A", "A1")
        b = second.create_course("B", "B1")

        assert (a.color, a.icon) == (b.color, b.icon)

    def test_blank_name(self, course_service: CourseService) -> None:
        """Test a blank name is rejected."""
        with pytest.raises(RequiredFieldError) as exc_info:
            course_service.create_course("  ", "MATH101")

        assert exc_info.value.field == "name"


class TestCourseServiceUpdate:
    """Tests for update, edit and delete."""

    def test_update_replaces_whole_course(self, course_service, stored_course) -> None:
        """Test update substitutes the stored course by id."""
        renamed = stored_course.model_copy(update={"name": "Geometry"})

        course_service.update_course(renamed)

        assert course_service.get_course("c1").name == "Geometry"
        assert len(course_service.list_courses()) == 1

    def test_update_unknown_course(self, course_service, sample_course) -> None:
        """Test updating a course that was never stored fails."""
        with pytest.raises(CourseNotFoundError):
            course_service.update_course(sample_course)

    def test_edit_details_keeps_content(self, course_service, stored_course) -> None:
        """Test editing name, code and term keeps assignments."""
        updated = course_service.edit_course_details("c1", "Geometry", "MATH102", "Spring 2025")

        assert (updated.name, updated.code, updated.term) == ("Geometry", "MATH102", "Spring 2025")
        assert updated.assignments == stored_course.assignments

    def test_edit_blank_term_uses_default(self, course_service, stored_course) -> None:
        """Test a blank term on edit falls back to the default, as on creation."""
        updated = course_service.edit_course_details("c1", "Algebra", "MATH101", "  ")

        assert updated.term == "Fall 2024"

    def test_delete_keeps_submissions_by_default(
        self, course_service, stored_course, repository
    ) -> None:
        """Test deleting a course leaves its submissions in place."""
        repository.commit(
            CollectionKey.SUBMISSIONS,
            [Submission(assignment_id="a1", student_id="s1", submitted_on=date(2025, 2, 1))],
        )

        course_service.delete_course("c1")

        assert course_service.list_courses() == ()
        assert "a1" not in course_service.index
        assert len(repository.get(CollectionKey.SUBMISSIONS)) == 1

    def test_delete_cascades_when_enabled(
        self, repository, id_factory, sample_course
    ) -> None:
        """Test cascade_course_delete removes the course's submissions."""
        repository.commit(CollectionKey.COURSES, [sample_course])
        repository.commit(
            CollectionKey.SUBMISSIONS,
            [
                Submission(assignment_id="a1", student_id="s1", submitted_on=date(2025, 2, 1)),
                Submission(assignment_id="other", student_id="s1", submitted_on=date(2025, 2, 1)),
            ],
        )
        service = CourseService(
            repository, id_factory, settings=DomainSettings(cascade_course_delete=True)
        )

        service.delete_course("c1")

        remaining = repository.get(CollectionKey.SUBMISSIONS)
        assert [s.assignment_id for s in remaining] == ["other"]

    def test_delete_unknown_course(self, course_service) -> None:
        """Test deleting a missing course fails."""
        with pytest.raises(CourseNotFoundError):
            course_service.delete_course("missing")


class TestCourseServiceContent:
    """Tests for modules, items, assignments and quizzes."""

    def test_add_module_and_item(self, course_service: CourseService) -> None:
        """Test a module gets items appended in order."""
        course = course_service.create_course("Algebra", "MATH101")
        course = course_service.add_module(course, "Week 1")
        module_id = course.modules[0].id

        course = course_service.add_item(course, module_id, Item(title="Intro"))
        course = course_service.add_item(
            course, module_id, Item(title="Forum", type=ItemType.DISCUSSION)
        )

        stored = course_service.get_course(course.id)
        assert [i.title for i in stored.modules[0].items] == ["Intro", "Forum"]
        assert stored.modules[0].items[1].type is ItemType.DISCUSSION

    def test_add_item_unknown_module(self, course_service: CourseService) -> None:
        """Test adding to a missing module fails."""
        course = course_service.create_course("Algebra", "MATH101")

        with pytest.raises(CourseModuleNotFoundError):
            course_service.add_item(course, "missing", Item(title="Intro"))

    def test_assignment_typed_item_is_only_a_label(self, course_service) -> None:
        """Test an item of type assignment does not create an assignment."""
        course = course_service.create_course("Algebra", "MATH101")
        course = course_service.add_module(course, "Week 1")

        course = course_service.add_item(
            course, course.modules[0].id, Item(title="Essay", type=ItemType.ASSIGNMENT)
        )

        assert course.assignments == ()

    def test_add_assignment_indexes_owner(self, course_service: CourseService) -> None:
        """Test a new assignment is resolvable to its course."""
        course = course_service.create_course("Algebra", "MATH101")

        course = course_service.add_assignment(
            course,
            AssignmentCreateRequest(
                title="Essay 1", due_date=date(2025, 3, 1), max_attempts="Unlimited"
            ),
        )
        assignment = course.assignments[0]

        assert assignment.max_attempts == UNLIMITED
        assert course_service.find_owner(assignment.id).id == course.id

    def test_add_quiz(self, course_service, sample_questions) -> None:
        """Test a valid quiz is appended."""
        course = course_service.create_course("Algebra", "MATH101")

        course = course_service.add_quiz(
            course,
            QuizCreateRequest(
                title="Quiz 1", due_date=date(2025, 2, 15), questions=sample_questions
            ),
        )

        owner, quiz = course_service.find_gradable(course.quizzes[0].id)
        assert owner.id == course.id
        assert quiz.questions == sample_questions

    @pytest.mark.parametrize(
        "questions",
        [
            (),
            (Question(text="Q", options=("a", "b", "c"), correct=0),),
            (Question(text="Q", options=("a", "b", "c", ""), correct=0),),
            (Question(text="Q", options=("a", "b", "c", "d"), correct=4),),
            (Question(text=" ", options=("a", "b", "c", "d"), correct=0),),
        ],
    )
    def test_add_quiz_invalid(self, course_service, questions) -> None:
        """Test malformed quizzes are rejected and not stored."""
        course = course_service.create_course("Algebra", "MATH101")

        with pytest.raises(InvalidQuizError):
            course_service.add_quiz(
                course,
                QuizCreateRequest(title="Quiz", due_date=date(2025, 2, 15), questions=questions),
            )

        assert course_service.get_course(course.id).quizzes == ()

    def test_find_owner_unknown(self, course_service) -> None:
        """Test an unowned id raises AssignmentNotFoundError."""
        with pytest.raises(AssignmentNotFoundError):
            course_service.find_owner("missing")


class TestCourseItemIndex:
    """Tests for CourseItemIndex."""

    def test_rebuild(self, sample_course) -> None:
        """Test the index maps assignments and quizzes to the course."""
        index = CourseItemIndex([sample_course])

        assert index.owner_of("a1") == "c1"
        assert index.owner_of("q1") == "c1"
        assert len(index) == 2

    def test_earlier_course_wins_duplicate_id(self, sample_course) -> None:
        """Test a shared item id resolves to the first course."""
        twin = sample_course.model_copy(update={"id": "c2"})

        index = CourseItemIndex([sample_course, twin])

        assert index.owner_of("a1") == "c1"

    def test_reindex_drops_removed_items(self, sample_course) -> None:
        """Test reindexing a course forgets items it no longer has."""
        index = CourseItemIndex([sample_course])

        index.reindex_course(sample_course.model_copy(update={"quizzes": ()}))

        assert "q1" not in index
        assert "a1" in index
