"""Ozark LMS core.

Domain state layer for a single-user learning-management dashboard:
course authoring, submissions, grading, quiz scoring and the derived
dashboard views (to-do list, calendar, grade averages).

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
