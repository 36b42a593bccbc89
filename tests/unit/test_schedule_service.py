# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the schedule board."""

from datetime import date, time

import pytest

from ozark.domains.schedule import (
    ScheduleService,
    TaskNotFoundError,
    filter_tasks,
)
from ozark.domains.validation import RequiredFieldError
from ozark.models import Priority


@pytest.fixture
def board(schedule_service: ScheduleService) -> ScheduleService:
    """Provide a schedule with two tasks."""
    schedule_service.add_task("Grade essays", "Luis", date(2026, 3, 26), time(23, 59), "High")
    schedule_service.add_task("Prepare slides", "Ifrad", date(2026, 3, 27))
    return schedule_service


class TestScheduleTasks:
    """Tests for adding and deleting tasks."""

    def test_add_task(self, schedule_service: ScheduleService) -> None:
        """Test a task is created with no notes."""
        task = schedule_service.add_task("Grade essays", "Luis", date(2026, 3, 26))

        assert task.priority is Priority.MEDIUM
        assert task.notes == ()
        assert schedule_service.get_task(task.id) == task

    def test_add_task_requires_assignee(self, schedule_service) -> None:
        """Test a blank assignee is rejected."""
        with pytest.raises(RequiredFieldError):
            schedule_service.add_task("Grade essays", "", date(2026, 3, 26))

    def test_delete_tasks(self, board: ScheduleService) -> None:
        """Test bulk delete removes only the given ids."""
        first, second = board.list_tasks()

        removed = board.delete_tasks([first.id, "missing"])

        assert removed == 1
        assert board.list_tasks() == (second,)

    def test_delete_nothing(self, board: ScheduleService) -> None:
        """Test deleting unknown ids is a no-op."""
        assert board.delete_tasks(["missing"]) == 0
        assert len(board.list_tasks()) == 2


class TestScheduleNotes:
    """Tests for the note thread."""

    def test_post_note(self, board: ScheduleService, clock) -> None:
        """Test notes are appended with the current time."""
        task = board.list_tasks()[0]

        board.post_note(task.id, "Luis", "Started")
        board.post_note(task.id, "Ifrad", "Done")

        notes = board.get_task(task.id).notes
        assert [(n.author, n.text) for n in notes] == [("Luis", "Started"), ("Ifrad", "Done")]
        assert notes[0].sent_at == clock()

    def test_blank_note_rejected(self, board: ScheduleService) -> None:
        """Test an empty note is not posted."""
        task = board.list_tasks()[0]

        with pytest.raises(RequiredFieldError):
            board.post_note(task.id, "Luis", "   ")

        assert board.get_task(task.id).notes == ()

    def test_note_on_unknown_task(self, board: ScheduleService) -> None:
        """Test posting to a missing task fails."""
        with pytest.raises(TaskNotFoundError):
            board.post_note("missing", "Luis", "Hello")

    def test_attach_image(self, board: ScheduleService) -> None:
        """Test an image upload becomes an image note."""
        task = board.list_tasks()[0]

        note = board.attach_file(task.id, "Luis", "photo.png", "image/png")

        assert note.text == "Sent an image"
        assert (note.is_image, note.is_file) == (True, False)
        assert note.file_name == "photo.png"

    def test_attach_file(self, board: ScheduleService) -> None:
        """Test any other upload becomes a file note."""
        task = board.list_tasks()[0]

        note = board.attach_file(
            task.id, "Luis", "notes.pdf", "application/pdf", file_url="blob:1"
        )

        assert note.text == "Sent a file: notes.pdf"
        assert (note.is_image, note.is_file) == (False, True)
        assert note.file_url == "blob:1"


class TestFilterTasks:
    """Tests for filter_tasks."""

    def test_matches_title_or_assignee(self, board: ScheduleService) -> None:
        """Test the query matches titles and assignees ignoring case."""
        tasks = board.list_tasks()

        assert [t.title for t in filter_tasks(tasks, "ESSAY")] == ["Grade essays"]
        assert [t.title for t in filter_tasks(tasks, "ifrad")] == ["Prepare slides"]

    def test_blank_query_returns_all(self, board: ScheduleService) -> None:
        """Test an empty query keeps every task in order."""
        tasks = board.list_tasks()

        assert filter_tasks(tasks, "") == list(tasks)
        assert filter_tasks(tasks, None) == list(tasks)

    def test_no_match(self, board: ScheduleService) -> None:
        """Test a query matching nothing gives an empty list."""
        assert filter_tasks(board.list_tasks(), "zzz") == []
