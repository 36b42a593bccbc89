# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Submission entity."""

from datetime import date

from pydantic import Field

from ozark.models.common import EntityModel


class Submission(EntityModel):
    """A student's submitted work for an assignment or quiz.

    Several submissions may exist for the same (assignment, student) pair;
    the last one appended is the current one.
    """

    assignment_id: str
    student_id: str
    text: str = ""
    file_names: tuple[str, ...] = ()
    submitted_on: date = Field(alias="date")
