# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quiz scoring."""

from ozark.domains.quiz.scoring import (
    OPTIONS_PER_QUESTION,
    InvalidQuizError,
    QuizError,
    score_quiz,
    validate_questions,
)

__all__ = [
    "OPTIONS_PER_QUESTION",
    "InvalidQuizError",
    "QuizError",
    "score_quiz",
    "validate_questions",
]
