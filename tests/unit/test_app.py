# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""End-to-end tests of the wired application on an in-memory store."""

import random
from datetime import date

import pytest

from ozark.app import create_app
from ozark.core.config import DomainSettings, Settings
from ozark.domains.dashboard import build_todo_list, student_average
from ozark.infrastructure.storage import CollectionKey, MemoryStore
from ozark.models import AssignmentCreateRequest, QuizCreateRequest


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def app(settings, memory_store, clock):
    return create_app(
        settings=settings,
        store=memory_store,
        clock=clock,
        rng=random.Random(1),
        configure_logging=False,
    )


class TestCreateApp:
    """Tests for application wiring."""

    def test_schedule_is_seeded(self, app, memory_store) -> None:
        """Test a fresh board shows the demo task without saving it."""
        tasks = app.schedule.list_tasks()

        assert [t.title for t in tasks] == ["Demo_task_1"]
        assert memory_store.load(CollectionKey.SCHEDULE_TASKS) is None

    def test_seed_can_be_disabled(self, memory_store, clock) -> None:
        """Test seed_schedule_tasks=False starts with an empty board."""
        settings = Settings(
            environment="test", domain=DomainSettings(seed_schedule_tasks=False)
        )

        app = create_app(settings=settings, store=memory_store, clock=clock, configure_logging=False)

        assert app.schedule.list_tasks() == ()

    def test_session_store_is_separate(self, app, memory_store) -> None:
        """Test the signed-in user is not written to the persistent store."""
        user = app.auth.create_user("ana", "x", "student")

        app.sessions.sign_in(user)

        assert memory_store.load(CollectionKey.CURRENT_SESSION_USER) is None
        assert isinstance(app.sessions.store, MemoryStore)

    def test_new_calendar_opens_on_current_month(self, app) -> None:
        """Test the calendar starts at the clock's month."""
        view = app.new_calendar()

        assert (view.year, view.month) == (2025, 2)


class TestCourseWorkflow:
    """A term in the life of one course."""

    def test_full_workflow(self, app, sample_questions) -> None:
        """Test authoring, submitting, grading and aggregating."""
        instructor = app.auth.create_user("mr_b", "pw", "instructor")
        student = app.auth.create_user("ana", "pw", "student")
        context = app.sessions.sign_in(instructor)

        course = app.courses.create_course("Algebra", "MATH101")
        course = app.courses.add_assignment(
            course,
            AssignmentCreateRequest(title="Essay", due_date=date(2025, 3, 1), max_attempts=1),
        )
        course = app.courses.add_quiz(
            course,
            QuizCreateRequest(title="Quiz", due_date=date(2025, 2, 15), questions=sample_questions),
        )
        context.open_course(course)
        essay, quiz = course.assignments[0], course.quizzes[0]

        app.submissions.submit_assignment(essay.id, student.id, text="draft")
        app.grading.grade_submission(essay.id, student.id, 90)
        app.grading.grade_quiz_attempt(quiz.id, student.id, {0: 2, 1: 0})

        stored = app.courses.get_course(course.id)
        assert student_average(stored, student.id) == 95
        assert [t.item_id for t in build_todo_list(app.courses.list_courses())] == [
            quiz.id,
            essay.id,
        ]
        assert context.selected_course_id == course.id
