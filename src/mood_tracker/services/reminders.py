"""Reminder times and the notification toggle."""

import re
from typing import Optional

from loguru import logger

from ..clients.onesignal import Notifier, NullNotifier
from ..exceptions import EntryValidationError, ValidationReason
from .storage import NOTIFICATIONS_KEY, REMINDERS_KEY, LocalStore

TAG_KEY = "reminder_times"
TAG_DELIMITER = ","

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class ReminderSchedule:
    """
    Sorted, duplicate-free set of ``HH:MM`` reminder times.

    Whenever the set changes while notifications are enabled, the joined
    set is pushed to the notifier as a tag. Nothing is ever read back.
    """

    def __init__(
        self,
        store: LocalStore,
        notifier: Optional[Notifier] = None,
        default_times: Optional[list[str]] = None,
    ):
        self.store = store
        self.notifier = notifier or NullNotifier()
        self.default_times = sorted(set(default_times or []))
        self._times: list[str] = list(self.default_times)
        self._enabled = False

    @property
    def times(self) -> list[str]:
        return list(self._times)

    @property
    def notifications_enabled(self) -> bool:
        return self._enabled

    @property
    def tag_value(self) -> str:
        return TAG_DELIMITER.join(self._times)

    def add(self, reminder_time: str) -> bool:
        """Add a time. Empty and duplicate values are ignored (returns False)."""
        reminder_time = (reminder_time or "").strip()
        if not reminder_time or reminder_time in self._times:
            return False
        if not _TIME_RE.match(reminder_time):
            raise EntryValidationError(ValidationReason.INVALID_REMINDER_TIME, reminder_time)

        self._times = sorted([*self._times, reminder_time])
        self._changed()
        logger.info("Reminder added: {}", reminder_time)
        return True

    def remove(self, reminder_time: str) -> bool:
        if reminder_time not in self._times:
            return False
        self._times = [t for t in self._times if t != reminder_time]
        self._changed()
        logger.info("Reminder removed: {}", reminder_time)
        return True

    def enable(self) -> None:
        self._enabled = True
        self.store.save(NOTIFICATIONS_KEY, True)
        self.push()
        logger.info("Notifications enabled")

    def disable(self) -> None:
        self._enabled = False
        self.store.save(NOTIFICATIONS_KEY, False)
        logger.info("Notifications disabled")

    def push(self) -> bool:
        """Send the current tag to the notifier."""
        return self.notifier.add_tag(TAG_KEY, self.tag_value)

    def _changed(self) -> None:
        self.save()
        if self._enabled:
            self.push()

    # Persistence

    def load(self) -> None:
        times = self.store.load(REMINDERS_KEY)
        if isinstance(times, list) and all(isinstance(t, str) for t in times):
            self._times = sorted(set(times))
        else:
            if times is not None:
                logger.warning("Stored reminder times are malformed, using defaults")
            self._times = list(self.default_times)
        self._enabled = self.store.load(NOTIFICATIONS_KEY) is True

    def save(self) -> bool:
        return self.store.save(REMINDERS_KEY, self._times)
