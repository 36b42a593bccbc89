# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course aggregate and its nested entities.

A Course embeds its modules, assignments, quizzes and grades. The whole
aggregate is replaced on every change, so nested sequences are tuples and
every model is frozen; build new values with ``model_copy(update=...)``.
"""

from datetime import date, time

from pydantic import Field

from ozark.models.common import (
    MAX_SCORE,
    UNLIMITED,
    EntityModel,
    GradeType,
    ItemType,
    MaxAttempts,
)


class Item(EntityModel):
    """Descriptive content entry inside a module.

    An item of type ``assignment`` or ``quiz`` is only a label; it does not
    create a gradable record.
    """

    title: str
    type: ItemType = ItemType.PAGE


class Module(EntityModel):
    """Ordered content folder within a course."""

    id: str
    title: str
    items: tuple[Item, ...] = ()


class Question(EntityModel):
    """Multiple-choice question with four options."""

    text: str
    options: tuple[str, ...]
    correct: int = 0


class Assignment(EntityModel):
    """Gradable assignment owned by one course."""

    id: str
    title: str
    due_date: date
    due_time: time | None = None
    file_names: tuple[str, ...] = Field(default=(), alias="files")
    max_attempts: MaxAttempts = UNLIMITED

    @property
    def kind(self) -> GradeType:
        return GradeType.ASSIGNMENT


class Quiz(EntityModel):
    """Multiple-choice quiz owned by one course."""

    id: str
    title: str
    due_date: date
    max_attempts: MaxAttempts = UNLIMITED
    questions: tuple[Question, ...] = ()

    @property
    def kind(self) -> GradeType:
        return GradeType.QUIZ


class Grade(EntityModel):
    """Recorded score of one student on one assignment or quiz.

    ``title`` is a copy of the assignment/quiz title at grading time.
    """

    id: str
    assignment_id: str
    student_id: str
    title: str
    score: int = Field(ge=0, le=MAX_SCORE)
    max_score: int = MAX_SCORE
    graded_on: date = Field(alias="date")
    type: GradeType = GradeType.ASSIGNMENT


class Course(EntityModel):
    """Top-level container for modules, assignments, quizzes and grades."""

    id: str
    name: str
    code: str
    term: str
    color: str
    icon: str
    modules: tuple[Module, ...] = ()
    assignments: tuple[Assignment, ...] = ()
    quizzes: tuple[Quiz, ...] = ()
    grades: tuple[Grade, ...] = ()

    def gradable_ids(self) -> list[str]:
        """Ids of every assignment and quiz, assignments first."""
        return [a.id for a in self.assignments] + [q.id for q in self.quizzes]

    def find_gradable(self, item_id: str) -> Assignment | Quiz | None:
        """Look up an assignment, then a quiz, by id."""
        for assignment in self.assignments:
            if assignment.id == item_id:
                return assignment
        for quiz in self.quizzes:
            if quiz.id == item_id:
                return quiz
        return None


class AssignmentCreateRequest(EntityModel):
    """Input for adding an assignment to a course."""

    title: str
    due_date: date
    due_time: time | None = None
    file_names: tuple[str, ...] = ()
    max_attempts: MaxAttempts = UNLIMITED


class QuizCreateRequest(EntityModel):
    """Input for adding a quiz to a course.

    Questions are validated by the course service, not here, so that a
    malformed quiz is reported as an invalid quiz rather than a generic
    validation error.
    """

    title: str
    due_date: date
    max_attempts: MaxAttempts = UNLIMITED
    questions: tuple[Question, ...] = ()
