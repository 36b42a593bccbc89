# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pure submission queries."""

from collections.abc import Iterable

from ozark.models import Submission


def matching_submissions(
    submissions: Iterable[Submission],
    assignment_id: str,
    student_id: str,
) -> list[Submission]:
    """Submissions of one student for one assignment, oldest first."""
    return [
        s
        for s in submissions
        if s.assignment_id == assignment_id and s.student_id == student_id
    ]


def latest_submission(
    submissions: Iterable[Submission],
    assignment_id: str,
    student_id: str,
) -> Submission | None:
    """The most recently appended matching submission, if any."""
    matches = matching_submissions(submissions, assignment_id, student_id)
    return matches[-1] if matches else None


def submissions_for_assignment(
    submissions: Iterable[Submission],
    assignment_id: str,
) -> list[Submission]:
    """Every student's submissions for one assignment, in append order."""
    return [s for s in submissions if s.assignment_id == assignment_id]
