# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication service for sign-up and sign-in.

Credentials are compared as plain values; this module provides no
password security.

Example:
    >>> user = auth_service.create_user("ana", "x", Role.STUDENT)
    >>> auth_service.authenticate("ana", "x") == user
    True
"""

import logging
from typing import Callable

from ozark.domains.validation import require_text
from ozark.infrastructure.storage import CollectionKey, CollectionRepository
from ozark.models import Role, User

logger = logging.getLogger(__name__)


class AuthServiceError(Exception):
    """Base exception for auth service errors."""

    pass


class DuplicateUsernameError(AuthServiceError):
    """Raised when signing up with a username that already exists."""

    pass


class InvalidCredentialsError(AuthServiceError):
    """Raised when no user matches the username and password."""

    pass


class AuthService:
    """Service owning the user collection."""

    def __init__(
        self,
        repository: CollectionRepository,
        id_factory: Callable[[], str],
    ) -> None:
        self.repository = repository
        self._new_id = id_factory

    def list_users(self) -> tuple[User, ...]:
        return self.repository.get(CollectionKey.USERS)

    def create_user(self, username: str, password: str, role: Role | str) -> User:
        """Sign up a new user.

        Args:
            username: Unique user name.
            password: Opaque comparison value.
            role: student or instructor.

        Returns:
            The created user.

        Raises:
            RequiredFieldError: If username or password is blank.
            DuplicateUsernameError: If the username is taken.
            StorageError: If the collection cannot be saved.
        """
        require_text(username, "username")
        require_text(password, "password")

        users = self.list_users()
        if any(u.username == username for u in users):
            logger.warning("Sign-up rejected, username taken: %s", username)
            raise DuplicateUsernameError(f"Username {username} already exists")

        user = User(id=self._new_id(), username=username, password=password, role=Role(role))
        self.repository.commit(CollectionKey.USERS, (*users, user))

        logger.info("Created user: id=%s, role=%s", user.id, user.role.value)
        return user

    def authenticate(self, username: str, password: str) -> User:
        """Find the user with exactly these credentials.

        Raises:
            InvalidCredentialsError: If no user matches.
        """
        for user in self.list_users():
            if user.username == username and user.password == password:
                return user

        logger.warning("Sign-in failed for username: %s", username)
        raise InvalidCredentialsError("Invalid credentials")
