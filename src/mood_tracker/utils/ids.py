"""Creation tokens for entries and medications."""

from datetime import datetime
from typing import Optional

from .clock import Clock, system_clock


class IdGenerator:
    """
    Millisecond timestamps forced to increase strictly.

    Two ids minted within the same millisecond, or after the clock steps
    backwards, still come out ordered and unique.
    """

    def __init__(self, clock: Clock = system_clock):
        self.clock = clock
        self._last = 0

    def next_id(self, now: Optional[datetime] = None) -> int:
        now = now or self.clock()
        candidate = int(now.timestamp() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last

    def observe(self, existing_id: int) -> None:
        """Never hand out an id at or below one already stored."""
        self._last = max(self._last, existing_id)
