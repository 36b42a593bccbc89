# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Entity id generation.

Ids are creation timestamps in epoch milliseconds, rendered as strings.
Two ids requested within the same millisecond are still distinct: the
generator never hands out a value less than or equal to the previous one.
"""

import time
from typing import Callable


class IdGenerator:
    """Strictly increasing timestamp ids.

    Example:
        >>> ids = IdGenerator(clock=lambda: 1700000000.0)
        >>> ids.next_id(), ids.next_id()
        ('1700000000000', '1700000000001')
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def next_id(self) -> str:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)

    def __call__(self) -> str:
        return self.next_id()
