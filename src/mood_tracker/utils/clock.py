"""Injectable wall-clock.

Everything that stamps or windows entries asks a ``Clock`` for the current
instant instead of calling ``datetime.now()`` directly, so tests can pin time.
"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()
