# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Schedule board search."""

from collections.abc import Iterable

from ozark.models import ScheduleTask


def filter_tasks(tasks: Iterable[ScheduleTask], query: str | None) -> list[ScheduleTask]:
    """Tasks whose title or assignee contains ``query``, ignoring case.

    A blank query matches every task. Order is preserved.
    """
    needle = (query or "").strip().casefold()
    if not needle:
        return list(tasks)
    return [
        task
        for task in tasks
        if needle in task.title.casefold() or needle in task.assigned_to.casefold()
    ]
