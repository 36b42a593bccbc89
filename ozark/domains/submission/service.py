# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Submission service for student work.

Submissions are append-only; several may exist for the same student and
assignment. When attempt caps are enforced, a student cannot submit more
times than the assignment's max_attempts.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Callable

from ozark.core.config.settings import DomainSettings
from ozark.domains.course.service import CourseService
from ozark.domains.submission.lookup import (
    latest_submission,
    matching_submissions,
    submissions_for_assignment,
)
from ozark.infrastructure.storage import CollectionKey, CollectionRepository
from ozark.models import UNLIMITED, Submission
from ozark.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class SubmissionServiceError(Exception):
    """Base exception for submission service errors."""

    pass


class AttemptLimitReachedError(SubmissionServiceError):
    """Raised when a student has used every allowed attempt."""

    def __init__(self, assignment_id: str, max_attempts: int) -> None:
        self.assignment_id = assignment_id
        self.max_attempts = max_attempts
        super().__init__(
            f"Maximum of {max_attempts} attempts reached for {assignment_id}"
        )


class SubmissionService:
    """Service owning the submission collection."""

    def __init__(
        self,
        repository: CollectionRepository,
        course_service: CourseService,
        settings: DomainSettings | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.repository = repository
        self.courses = course_service
        self._settings = settings or DomainSettings()
        self._clock = clock

    def list_submissions(self) -> tuple[Submission, ...]:
        return self.repository.get(CollectionKey.SUBMISSIONS)

    def submit_assignment(
        self,
        assignment_id: str,
        student_id: str,
        text: str = "",
        file_names: Iterable[str] = (),
    ) -> Submission:
        """Append a submission dated today.

        Args:
            assignment_id: Assignment or quiz id.
            student_id: Submitting student.
            text: Free-text answer.
            file_names: Names of attached files.

        Returns:
            The new submission.

        Raises:
            AssignmentNotFoundError: If attempt caps are enforced and no
                course owns the id.
            AttemptLimitReachedError: If the student has no attempts left.
            StorageError: If the collection cannot be saved.
        """
        submissions = self.list_submissions()

        if self._settings.enforce_max_attempts:
            _, item = self.courses.find_gradable(assignment_id)
            if item.max_attempts != UNLIMITED:
                used = len(matching_submissions(submissions, assignment_id, student_id))
                if used >= item.max_attempts:
                    logger.warning(
                        "Submission rejected: student=%s, assignment=%s, attempts=%d",
                        student_id,
                        assignment_id,
                        used,
                    )
                    raise AttemptLimitReachedError(assignment_id, item.max_attempts)

        submission = Submission(
            assignment_id=assignment_id,
            student_id=student_id,
            text=text or "",
            file_names=tuple(file_names),
            submitted_on=self._clock().date(),
        )
        self.repository.commit(CollectionKey.SUBMISSIONS, (*submissions, submission))

        logger.info(
            "Submitted: student=%s, assignment=%s, files=%d",
            student_id,
            assignment_id,
            len(submission.file_names),
        )
        return submission

    def latest_for(self, assignment_id: str, student_id: str) -> Submission | None:
        return latest_submission(self.list_submissions(), assignment_id, student_id)

    def submissions_for(self, assignment_id: str) -> list[Submission]:
        return submissions_for_assignment(self.list_submissions(), assignment_id)
