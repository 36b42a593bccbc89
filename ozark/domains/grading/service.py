# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grading service.

Grades are embedded in the course that owns the assignment or quiz. A
student has at most one grade per assignment/quiz: recording a new grade
replaces the previous one.

Example:
    >>> grade = grading_service.grade_submission("1700000000001", "s1", 92)
    >>> grade.title
    'Essay 1'
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Callable

from ozark.domains.course.service import AssignmentNotFoundError, CourseService
from ozark.domains.quiz.scoring import score_quiz
from ozark.models import MAX_SCORE, Grade, GradeType, Quiz
from ozark.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class GradingServiceError(Exception):
    """Base exception for grading service errors."""

    pass


class InvalidScoreError(GradingServiceError, ValueError):
    """Raised when a score is outside 0-100."""

    pass


class GradingService:
    """Service recording grades on their owning course."""

    def __init__(
        self,
        course_service: CourseService,
        id_factory: Callable[[], str],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.courses = course_service
        self._new_id = id_factory
        self._clock = clock

    def record_grade(self, grade: Grade) -> Grade:
        """Store a grade, replacing any earlier grade for the same pair.

        Args:
            grade: Grade to record. Its assignment_id must belong to a course.

        Returns:
            The recorded grade.

        Raises:
            AssignmentNotFoundError: If no course owns the assignment/quiz.
            StorageError: If the course collection cannot be saved.
        """
        course = self.courses.find_owner(grade.assignment_id)

        kept = tuple(
            g
            for g in course.grades
            if not (
                g.assignment_id == grade.assignment_id
                and g.student_id == grade.student_id
            )
        )
        replaced = len(kept) != len(course.grades)

        self.courses.update_course(
            course.model_copy(update={"grades": (*kept, grade)})
        )

        logger.info(
            "%s grade: student=%s, item=%s, score=%d",
            "Replaced" if replaced else "Recorded",
            grade.student_id,
            grade.assignment_id,
            grade.score,
        )
        return grade

    def grade_submission(self, assignment_id: str, student_id: str, score: int) -> Grade:
        """Grade a student's work on an assignment or quiz.

        Raises:
            InvalidScoreError: If score is not an integer within 0-100.
            AssignmentNotFoundError: If no course owns the id.
        """
        # bool is an int subclass
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidScoreError(f"Score must be a whole number, got {score!r}")
        if not 0 <= score <= MAX_SCORE:
            raise InvalidScoreError(f"Score {score} is outside 0-{MAX_SCORE}")

        _, item = self.courses.find_gradable(assignment_id)
        grade = Grade(
            id=self._new_id(),
            assignment_id=assignment_id,
            student_id=student_id,
            title=item.title,
            score=score,
            graded_on=self._clock().date(),
            type=item.kind,
        )
        return self.record_grade(grade)

    def grade_quiz_attempt(
        self,
        quiz_id: str,
        student_id: str,
        answers: Mapping[int, int],
    ) -> Grade:
        """Score a quiz attempt and record it as the student's quiz grade.

        Raises:
            AssignmentNotFoundError: If no course owns a quiz with this id.
            InvalidQuizError: If the quiz has no questions.
        """
        _, item = self.courses.find_gradable(quiz_id)
        if not isinstance(item, Quiz):
            raise AssignmentNotFoundError(f"Quiz {quiz_id} not found")

        grade = Grade(
            id=self._new_id(),
            assignment_id=quiz_id,
            student_id=student_id,
            title=item.title,
            score=score_quiz(item, answers),
            graded_on=self._clock().date(),
            type=GradeType.QUIZ,
        )
        return self.record_grade(grade)
