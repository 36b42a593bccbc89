# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Calendar view models.

Custom events are calendar-only annotations that live for the browsing
session; they are never written to the store.
"""

from datetime import date, time
from enum import Enum

from pydantic import Field

from ozark.models.common import EntityModel

MAX_DAY_MARKERS = 3


class EventKind(str, Enum):
    """Origin of a calendar entry."""

    EVENT = "event"
    ASSIGNMENT = "assignment"
    QUIZ = "quiz"


class CustomEvent(EntityModel):
    """User-added calendar annotation, not tied to a course."""

    title: str
    event_date: date = Field(alias="date")
    event_time: time | None = Field(default=None, alias="time")
    type: EventKind = EventKind.EVENT


class CalendarEvent(EntityModel):
    """One entry on a calendar day."""

    title: str
    event_date: date
    event_time: time | None = None
    kind: EventKind
    course_id: str | None = None
    item_id: str | None = None


class CalendarDay(EntityModel):
    """Events falling on one day of the displayed month."""

    day: int
    events: tuple[CalendarEvent, ...]

    @property
    def markers(self) -> tuple[CalendarEvent, ...]:
        """The first few events, shown as dots on the day cell."""
        return self.events[:MAX_DAY_MARKERS]

    @property
    def has_overflow(self) -> bool:
        return len(self.events) > MAX_DAY_MARKERS


class CalendarMonth(EntityModel):
    """Date index for one displayed month."""

    year: int
    month: int
    days_in_month: int
    leading_blanks: int
    days: dict[int, CalendarDay] = Field(default_factory=dict)

    def events_on(self, day: int) -> tuple[CalendarEvent, ...]:
        """All events on ``day`` (empty when none)."""
        entry = self.days.get(day)
        return entry.events if entry else ()
