"""
Record id generation.

Ids are millisecond timestamps plus a small random offset, bumped past the
highest id seen so far so that ordering by id is ordering by creation.
"""

import secrets
import time
from typing import Callable, Iterable


class TimestampIdGenerator:
    """
    Generates unique, strictly increasing integer ids.
    """

    def __init__(self, clock: Callable[[], float] = time.time, jitter: int = 999):
        """
        Initialize the generator.

        Args:
            clock: Returns the current time in seconds
            jitter: Upper bound (exclusive) of the random offset added to the timestamp
        """
        self._clock = clock
        self._jitter = jitter
        self._last = 0

    def observe(self, ids: Iterable[int]) -> None:
        """Make sure future ids are greater than every id in `ids`."""
        for existing in ids:
            if existing > self._last:
                self._last = existing

    def next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        if self._jitter > 0:
            candidate += secrets.randbelow(self._jitter)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate
