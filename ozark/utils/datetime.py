# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities.

All stored timestamps are timezone-aware UTC. Calendar dates (due dates,
submission dates) are plain ``datetime.date`` values.

Usage:
    from ozark.utils.datetime import utc_now, shift_month

    now = utc_now()
    year, month = shift_month(2026, 12, 1)
"""

import calendar
from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def leading_blank_days(year: int, month: int) -> int:
    """Empty cells before day 1 in a Sunday-first month grid.

    Example:
        >>> leading_blank_days(2026, 3)  # 1 March 2026 is a Sunday
        0
    """
    # date.weekday(): Monday=0 ... Sunday=6
    return (date(year, month, 1).weekday() + 1) % 7


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) cursor by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
