# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session and view routing."""

from ozark.domains.session.context import SessionContext, SessionManager, Tab

__all__ = ["SessionContext", "SessionManager", "Tab"]
