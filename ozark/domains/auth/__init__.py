# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Auth domain package: sign-up and sign-in."""

from ozark.domains.auth.service import (
    AuthService,
    AuthServiceError,
    DuplicateUsernameError,
    InvalidCredentialsError,
)

__all__ = [
    "AuthService",
    "AuthServiceError",
    "DuplicateUsernameError",
    "InvalidCredentialsError",
]
