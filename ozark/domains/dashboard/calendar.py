# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Calendar month index and the calendar browsing state.

The month index is rebuilt from scratch on every call; moving between
months never changes what a given month shows.

Example:
    >>> view = CalendarView(2026, 3)
    >>> view.add_event("Study group", date(2026, 3, 10))
    >>> month = view.current(courses)
    >>> [e.title for e in month.events_on(10)]
    ['Study group']
"""

import logging
from collections.abc import Iterable
from datetime import date, time

from ozark.domains.validation import require_text
from ozark.models import (
    CalendarDay,
    CalendarEvent,
    CalendarMonth,
    Course,
    CustomEvent,
    EventKind,
)
from ozark.utils.datetime import days_in_month, leading_blank_days, shift_month

logger = logging.getLogger(__name__)


def _course_events(courses: Iterable[Course]) -> Iterable[CalendarEvent]:
    for course in courses:
        for assignment in course.assignments:
            yield CalendarEvent(
                title=assignment.title,
                event_date=assignment.due_date,
                event_time=assignment.due_time,
                kind=EventKind.ASSIGNMENT,
                course_id=course.id,
                item_id=assignment.id,
            )
        for quiz in course.quizzes:
            yield CalendarEvent(
                title=quiz.title,
                event_date=quiz.due_date,
                kind=EventKind.QUIZ,
                course_id=course.id,
                item_id=quiz.id,
            )


def build_calendar_month(
    year: int,
    month: int,
    courses: Iterable[Course],
    custom_events: Iterable[CustomEvent] = (),
) -> CalendarMonth:
    """Index the events of one month by day number.

    Custom events come first on each day, in the order they were added,
    followed by assignments and quizzes in course order.

    Args:
        year: Displayed year.
        month: Displayed month, 1-12.
        courses: Courses whose assignments and quizzes are shown.
        custom_events: Session-only events.

    Returns:
        The month with day counts, grid offset and per-day events.
    """
    custom = (
        CalendarEvent(
            title=e.title,
            event_date=e.event_date,
            event_time=e.event_time,
            kind=e.type,
        )
        for e in custom_events
    )

    by_day: dict[int, list[CalendarEvent]] = {}
    for events in (custom, _course_events(courses)):
        for event in events:
            if event.event_date.year == year and event.event_date.month == month:
                by_day.setdefault(event.event_date.day, []).append(event)

    return CalendarMonth(
        year=year,
        month=month,
        days_in_month=days_in_month(year, month),
        leading_blanks=leading_blank_days(year, month),
        days={
            day: CalendarDay(day=day, events=tuple(events))
            for day, events in sorted(by_day.items())
        },
    )


class CalendarView:
    """Displayed month and custom events for one browsing session.

    Attributes:
        year: Displayed year.
        month: Displayed month, 1-12.
        custom_events: Events added during this session, never persisted.
    """

    def __init__(self, year: int, month: int) -> None:
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be 1-12, got {month}")
        self.year = year
        self.month = month
        self.custom_events: list[CustomEvent] = []

    @classmethod
    def for_date(cls, day: date) -> "CalendarView":
        return cls(day.year, day.month)

    def add_event(
        self,
        title: str,
        event_date: date,
        event_time: time | None = None,
    ) -> CustomEvent:
        """Add a custom event for the rest of the session.

        Raises:
            RequiredFieldError: If title is blank.
        """
        event = CustomEvent(
            title=require_text(title, "title"),
            event_date=event_date,
            event_time=event_time,
        )
        self.custom_events.append(event)
        logger.debug("Added calendar event on %s", event_date.isoformat())
        return event

    def next_month(self) -> None:
        self.year, self.month = shift_month(self.year, self.month, 1)

    def previous_month(self) -> None:
        self.year, self.month = shift_month(self.year, self.month, -1)

    def current(self, courses: Iterable[Course]) -> CalendarMonth:
        """Index the displayed month."""
        return build_calendar_month(self.year, self.month, courses, self.custom_events)
