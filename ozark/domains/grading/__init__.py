# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grading domain package."""

from ozark.domains.course.service import AssignmentNotFoundError
from ozark.domains.grading.service import (
    GradingService,
    GradingServiceError,
    InvalidScoreError,
)

__all__ = [
    "AssignmentNotFoundError",
    "GradingService",
    "GradingServiceError",
    "InvalidScoreError",
]
