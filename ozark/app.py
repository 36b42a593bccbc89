# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application factory.

This module wires the store, the collection repository, the domain
services and the session manager into one LMSApp container.

Example:
    >>> app = create_app()
    >>> user = app.auth.create_user("ana", "x", "student")
    >>> context = app.sessions.sign_in(user)
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import Callable

from ozark.core.config import Settings, get_settings, load_seed_collection
from ozark.domains.auth import AuthService
from ozark.domains.course import CourseService
from ozark.domains.dashboard import CalendarView
from ozark.domains.grading import GradingService
from ozark.domains.schedule import ScheduleService
from ozark.domains.session import SessionManager
from ozark.domains.submission import SubmissionService
from ozark.infrastructure.storage import (
    CollectionKey,
    CollectionRepository,
    KeyValueStore,
    MemoryStore,
    create_store,
)
from ozark.utils.datetime import utc_now
from ozark.utils.ids import IdGenerator
from ozark.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class LMSApp:
    """Wired services sharing one repository and id generator."""

    settings: Settings
    repository: CollectionRepository
    auth: AuthService
    courses: CourseService
    submissions: SubmissionService
    grading: GradingService
    schedule: ScheduleService
    sessions: SessionManager
    clock: Callable[[], datetime]

    def new_calendar(self) -> CalendarView:
        """Calendar state starting at the current month."""
        return CalendarView.for_date(self.clock().date())


def create_app(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    session_store: KeyValueStore | None = None,
    clock: Callable[[], datetime] = utc_now,
    rng: random.Random | None = None,
    configure_logging: bool = True,
) -> LMSApp:
    """Create and wire the LMS core.

    Args:
        settings: Settings to use; defaults to get_settings().
        store: Persistent store; defaults to the configured backend.
        session_store: Store for the signed-in user; defaults to a fresh
            in-memory store, so a session ends with the process.
        clock: Source of the current time for dates and ids.
        rng: Randomness for course colors and icons.
        configure_logging: Set up structlog and the root logger.

    Returns:
        The wired application.

    Raises:
        StorageError: If the configured store cannot be opened.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    # =========================================================================
    # Storage
    # =========================================================================
    store = store if store is not None else create_store(settings)
    seeds = {}
    if settings.domain.seed_schedule_tasks:
        seeds[CollectionKey.SCHEDULE_TASKS] = partial(
            load_seed_collection, CollectionKey.SCHEDULE_TASKS
        )
    repository = CollectionRepository(store, seeds=seeds)

    # =========================================================================
    # Services
    # =========================================================================
    new_id = IdGenerator(clock=lambda: clock().timestamp())
    courses = CourseService(repository, new_id, settings=settings.domain, rng=rng)

    app = LMSApp(
        settings=settings,
        repository=repository,
        auth=AuthService(repository, new_id),
        courses=courses,
        submissions=SubmissionService(
            repository, courses, settings=settings.domain, clock=clock
        ),
        grading=GradingService(courses, new_id, clock=clock),
        schedule=ScheduleService(repository, new_id, clock=clock),
        sessions=SessionManager(
            session_store if session_store is not None else MemoryStore(key_prefix="lms_")
        ),
        clock=clock,
    )

    logger.info(
        "LMS core ready: environment=%s, storage=%s",
        settings.environment,
        settings.storage.backend,
    )
    return app
