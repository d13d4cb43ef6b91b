"""Shared FastAPI dependencies."""

from typing import Optional

from ..services import MoodTracker

_tracker: Optional[MoodTracker] = None


async def get_tracker() -> MoodTracker:
    """The process-wide tracker, loaded on first use.

    Handlers and this dependency are ``async`` so every tracker call runs on
    the event loop thread, one at a time.
    """
    global _tracker
    if _tracker is None:
        _tracker = MoodTracker.open()
    return _tracker
