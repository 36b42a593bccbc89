# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User entity."""

from ozark.models.common import EntityModel, Role


class User(EntityModel):
    """A signed-up user.

    The password is an opaque value compared as-is; users are immutable
    once created and never deleted.
    """

    id: str
    username: str
    password: str
    role: Role

    @property
    def is_instructor(self) -> bool:
        return self.role is Role.INSTRUCTOR
