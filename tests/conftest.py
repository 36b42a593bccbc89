# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across the unit tests:
- In-memory stores and the collection repository
- A fixed clock and deterministic id generator
- Wired services and sample courses
"""

import random
from collections.abc import Callable
from datetime import date, datetime, timezone

import pytest

from ozark.core.config import DomainSettings
from ozark.domains.auth import AuthService
from ozark.domains.course import CourseService
from ozark.domains.grading import GradingService
from ozark.domains.schedule import ScheduleService
from ozark.domains.submission import SubmissionService
from ozark.infrastructure.storage import CollectionRepository, MemoryStore
from ozark.models import Assignment, Course, Question, Quiz
from ozark.utils.ids import IdGenerator


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )


# =============================================================================
# Infrastructure Fixtures
# =============================================================================


FIXED_NOW = datetime(2025, 2, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Provide a clock frozen at 2025-02-10 09:30 UTC."""
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory() -> IdGenerator:
    """Provide an id generator pinned to the fixed clock."""
    return IdGenerator(clock=lambda: FIXED_NOW.timestamp())


@pytest.fixture
def memory_store() -> MemoryStore:
    """Provide an empty in-memory store with the default key prefix."""
    return MemoryStore(key_prefix="lms_")


@pytest.fixture
def repository(memory_store: MemoryStore) -> CollectionRepository:
    """Provide a repository over the in-memory store, without seeds."""
    return CollectionRepository(memory_store)


@pytest.fixture
def domain_settings() -> DomainSettings:
    """Provide default mutation policy settings."""
    return DomainSettings(
        enforce_max_attempts=True,
        cascade_course_delete=False,
        seed_schedule_tasks=False,
    )


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def auth_service(repository, id_factory) -> AuthService:
    return AuthService(repository, id_factory)


@pytest.fixture
def course_service(repository, id_factory, domain_settings) -> CourseService:
    return CourseService(
        repository, id_factory, settings=domain_settings, rng=random.Random(7)
    )


@pytest.fixture
def submission_service(repository, course_service, domain_settings, clock) -> SubmissionService:
    return SubmissionService(
        repository, course_service, settings=domain_settings, clock=clock
    )


@pytest.fixture
def grading_service(course_service, id_factory, clock) -> GradingService:
    return GradingService(course_service, id_factory, clock=clock)


@pytest.fixture
def schedule_service(repository, id_factory, clock) -> ScheduleService:
    return ScheduleService(repository, id_factory, clock=clock)


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_questions() -> tuple[Question, ...]:
    """Provide two valid questions; the correct options are 2 and 0."""
    return (
        Question(text="2 + 2?", options=("1", "2", "4", "8"), correct=2),
        Question(text="Capital of France?", options=("Paris", "Rome", "Oslo", "Bern"), correct=0),
    )


@pytest.fixture
def sample_course(sample_questions) -> Course:
    """Provide a course with one assignment and one quiz, not stored."""
    return Course(
        id="c1",
        name="Algebra",
        code="MATH101",
        term="Fall 2024",
        color="bg-blue-500",
        icon="📐",
        assignments=(
            Assignment(
                id="a1",
                title="Essay 1",
                due_date=date(2025, 3, 1),
                max_attempts=2,
            ),
        ),
        quizzes=(
            Quiz(
                id="q1",
                title="Quiz 1",
                due_date=date(2025, 2, 15),
                questions=sample_questions,
            ),
        ),
    )


@pytest.fixture
def stored_course(repository, sample_course, course_service) -> Course:
    """Store sample_course and index it in the course service."""
    repository.commit("courses", (sample_course,))
    course_service.index.rebuild(repository.get("courses"))
    return sample_course
