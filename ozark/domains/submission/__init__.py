# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Submission domain package."""

from ozark.domains.submission.lookup import (
    latest_submission,
    matching_submissions,
    submissions_for_assignment,
)
from ozark.domains.submission.service import (
    AttemptLimitReachedError,
    SubmissionService,
    SubmissionServiceError,
)

__all__ = [
    "AttemptLimitReachedError",
    "SubmissionService",
    "SubmissionServiceError",
    "latest_submission",
    "matching_submissions",
    "submissions_for_assignment",
]
