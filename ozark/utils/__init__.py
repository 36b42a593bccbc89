# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers.

- logging: Structured logging with structlog
- datetime: Timezone-aware datetime and month-grid helpers
- ids: Timestamp id generation
"""

from ozark.utils.datetime import (
    days_in_month,
    leading_blank_days,
    shift_month,
    utc_now,
)
from ozark.utils.ids import IdGenerator
from ozark.utils.logging import bind_context, clear_context, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "days_in_month",
    "leading_blank_days",
    "shift_month",
    # Ids
    "IdGenerator",
]
