# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared model base, enums and field types.

Every entity is an immutable pydantic model. Attribute names are
snake_case; the persisted JSON uses camelCase keys, produced by the
alias generator and accepted back on load.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, PositiveInt
from pydantic.alias_generators import to_camel

MAX_SCORE = 100


class EntityModel(BaseModel):
    """Base class for all persisted entities."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Role(str, Enum):
    """User roles."""

    STUDENT = "student"
    INSTRUCTOR = "instructor"


class ItemType(str, Enum):
    """Kinds of module content items."""

    PAGE = "page"
    ASSIGNMENT = "assignment"
    QUIZ = "quiz"
    FILE = "file"
    DISCUSSION = "discussion"


class GradeType(str, Enum):
    """What a grade was recorded against."""

    ASSIGNMENT = "assignment"
    QUIZ = "quiz"


class Priority(str, Enum):
    """Schedule task priority."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


UNLIMITED = "unlimited"


def _normalize_attempts(value: Any) -> Any:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.lower() == UNLIMITED:
            return UNLIMITED
        if stripped.isdigit():
            return int(stripped)
    return value


MaxAttempts = Annotated[
    PositiveInt | Literal["unlimited"],
    BeforeValidator(_normalize_attempts),
]
"""Positive attempt cap, or ``"unlimited"`` (``"Unlimited"`` accepted)."""
