# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quiz validation and scoring.

Scoring is a pure function: the same quiz and answers always give the
same integer percentage.

Example:
    >>> score_quiz(quiz, {0: 2, 1: 0})
    50
"""

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal

from ozark.models import Question, Quiz

OPTIONS_PER_QUESTION = 4


class QuizError(Exception):
    """Base exception for quiz errors."""

    pass


class InvalidQuizError(QuizError):
    """Raised when a quiz is malformed or cannot be scored."""

    pass


def validate_questions(questions: Iterable[Question]) -> None:
    """Check that a quiz's questions can be published.

    Every question needs non-blank text, exactly four non-blank options and
    a correct-option index in range.

    Raises:
        InvalidQuizError: On the first offending question.
    """
    checked = 0
    for number, question in enumerate(questions, start=1):
        checked += 1
        if not question.text.strip():
            raise InvalidQuizError(f"Question {number} has no text")
        if len(question.options) != OPTIONS_PER_QUESTION:
            raise InvalidQuizError(
                f"Question {number} must have {OPTIONS_PER_QUESTION} options, "
                f"got {len(question.options)}"
            )
        if any(not option.strip() for option in question.options):
            raise InvalidQuizError(f"Question {number} has a blank option")
        if not 0 <= question.correct < OPTIONS_PER_QUESTION:
            raise InvalidQuizError(
                f"Question {number} correct option {question.correct} is out of range"
            )

    if checked == 0:
        raise InvalidQuizError("Quiz must have at least one question")


def score_quiz(quiz: Quiz, answers: Mapping[int, int]) -> int:
    """Percentage of correctly answered questions, rounded half up.

    Args:
        quiz: The quiz taken.
        answers: Selected option index per question index. Unanswered
            questions are simply absent.

    Returns:
        Integer score in 0-100.

    Raises:
        InvalidQuizError: If the quiz has no questions.
    """
    total = len(quiz.questions)
    if total == 0:
        raise InvalidQuizError(f"Quiz {quiz.id} has no questions to score")

    selected = {int(index): option for index, option in answers.items()}
    correct = sum(
        1
        for index, question in enumerate(quiz.questions)
        if selected.get(index) == question.correct
    )

    percentage = Decimal(correct * 100) / Decimal(total)
    return int(percentage.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
