# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session and view routing state.

A SessionContext is created per browsing session and passed explicitly to
whatever needs it. The SessionManager keeps the signed-in user in a
session-scoped store so a reload can restore it.

Example:
    >>> manager = SessionManager(MemoryStore())
    >>> context = manager.sign_in(user)
    >>> context.open_course(course)
    >>> context.active_tab
    <Tab.COURSES: 'courses'>
"""

import logging
from enum import Enum

from pydantic import ValidationError

from ozark.infrastructure.storage import CollectionKey, KeyValueStore, StorageError
from ozark.models import Assignment, Course, Item, Quiz, User
from ozark.utils.logging import bind_context, clear_context

logger = logging.getLogger(__name__)


class Tab(str, Enum):
    """Top-level navigation targets."""

    DASHBOARD = "dashboard"
    COURSES = "courses"
    CALENDAR = "calendar"
    SCHEDULE = "schedule"
    INBOX = "inbox"
    HELP = "help"


class SessionContext:
    """What the signed-in user is currently looking at.

    Attributes:
        user: The signed-in user.
        active_tab: Selected top-level tab.
        selected_course_id: Course opened in the courses tab, if any.
        active_item: Module item, assignment or quiz opened in that course.
    """

    def __init__(self, user: User) -> None:
        self.user = user
        self.active_tab = Tab.DASHBOARD
        self.selected_course_id: str | None = None
        self.active_item: Item | Assignment | Quiz | None = None

    @property
    def is_instructor(self) -> bool:
        return self.user.is_instructor

    def open_course(self, course: Course) -> None:
        self.selected_course_id = course.id
        self.active_item = None
        self.active_tab = Tab.COURSES

    def navigate_to_item(self, course: Course, item: Item | Assignment | Quiz) -> None:
        """Open a course with one of its items selected."""
        self.selected_course_id = course.id
        self.active_item = item
        self.active_tab = Tab.COURSES

    def reset_view(self) -> None:
        self.selected_course_id = None
        self.active_item = None
        self.active_tab = Tab.DASHBOARD

    def set_tab(self, tab: Tab | str) -> None:
        """Switch tabs; going to the dashboard also clears the course view."""
        tab = Tab(tab)
        if tab is Tab.DASHBOARD:
            self.reset_view()
        else:
            self.active_tab = tab


class SessionManager:
    """Signs users in and out of a session-scoped store.

    Attributes:
        store: Store whose lifetime matches the browsing session.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self.context: SessionContext | None = None

    def sign_in(self, user: User) -> SessionContext:
        """Remember ``user`` for this session and start a fresh view."""
        self.store.save(
            CollectionKey.CURRENT_SESSION_USER,
            user.model_dump(mode="json", by_alias=True),
        )
        self.context = SessionContext(user)
        bind_context(user_id=user.id, role=user.role.value)

        logger.info("Signed in: user=%s", user.id)
        return self.context

    def sign_out(self) -> None:
        self.store.delete(CollectionKey.CURRENT_SESSION_USER)
        if self.context is not None:
            logger.info("Signed out: user=%s", self.context.user.id)
        self.context = None
        clear_context()

    def restore(self) -> SessionContext | None:
        """Rebuild the context from the stored session user, if any.

        Raises:
            StorageError: If the stored user is unreadable.
        """
        raw = self.store.load(CollectionKey.CURRENT_SESSION_USER)
        if raw is None:
            self.context = None
            return None

        try:
            user = User.model_validate(raw)
        except ValidationError as e:
            raise StorageError(
                "Stored session user is malformed",
                CollectionKey.CURRENT_SESSION_USER,
                e,
            ) from e

        self.context = SessionContext(user)
        bind_context(user_id=user.id, role=user.role.value)
        return self.context
