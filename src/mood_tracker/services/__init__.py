"""Business logic services."""

from .aggregation import AggregationEngine
from .entries import EntryStore
from .export import ExportFilter
from .medications import MedicationRegistry
from .reminders import ReminderSchedule
from .storage import LocalStore
from .tracker import MoodTracker

__all__ = [
    "LocalStore",
    "MedicationRegistry",
    "EntryStore",
    "AggregationEngine",
    "ExportFilter",
    "ReminderSchedule",
    "MoodTracker",
]
