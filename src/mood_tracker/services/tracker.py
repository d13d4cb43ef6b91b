"""The tracker: one owned object holding every collection."""

from typing import Optional

from loguru import logger

from ..clients.onesignal import Notifier, NullNotifier, OneSignalClient
from ..utils.clock import Clock, system_clock
from ..utils.config import Settings, get_settings
from .aggregation import AggregationEngine
from .entries import EntryStore
from .export import ExportFilter
from .medications import MedicationRegistry
from .reminders import ReminderSchedule
from .storage import LocalStore


class MoodTracker:
    """
    Wires storage, medications, entries, reminders and the read-side views.

    Build one per process and call ``load()`` once. Every mutation goes
    through the component that owns the data and is saved immediately.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[LocalStore] = None,
        clock: Clock = system_clock,
        notifier: Optional[Notifier] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or LocalStore(self.settings)
        self.clock = clock

        if notifier is None:
            client = OneSignalClient(self.settings)
            notifier = client if client.is_configured else NullNotifier()

        self.medications = MedicationRegistry(self.store, clock)
        self.entries = EntryStore(self.store, self.medications, clock)
        self.reminders = ReminderSchedule(
            self.store,
            notifier,
            default_times=self.settings.default_reminder_times,
        )
        self.aggregation = AggregationEngine(self.entries, clock)
        self.export = ExportFilter(self.entries, clock)

    @classmethod
    def open(cls, settings: Optional[Settings] = None, **kwargs) -> "MoodTracker":
        """Construct and load in one step."""
        tracker = cls(settings, **kwargs)
        tracker.load()
        return tracker

    def load(self) -> None:
        self.medications.load()
        self.entries.load()
        self.reminders.load()
        logger.debug(
            "Loaded {} entries and {} medications from {}",
            len(self.entries),
            len(self.medications.medications),
            self.store.db_path,
        )

    def save(self) -> None:
        self.medications.save()
        self.entries.save()
        self.reminders.save()

    def close(self) -> None:
        self.store.close()
        close_notifier = getattr(self.reminders.notifier, "close", None)
        if close_notifier is not None:
            close_notifier()

    def __enter__(self) -> "MoodTracker":
        return self

    def __exit__(self, *args) -> None:
        self.close()
