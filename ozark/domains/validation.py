# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Input checks shared by the domain services."""


class RequiredFieldError(ValueError):
    """Raised when a required field is missing or blank.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")


def require_text(value: str | None, field: str) -> str:
    """Return ``value`` stripped, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise RequiredFieldError(field)
    return value.strip()
