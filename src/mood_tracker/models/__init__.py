"""Data models for the mood tracker."""

from .entry import RATING_FIELDS, MoodEntry, Ratings
from .medication import Medication
from .metrics import AggregatedDayMetric, TimeRange
from .report import ExportDay, ExportReport

__all__ = [
    "MoodEntry",
    "Ratings",
    "RATING_FIELDS",
    "Medication",
    "AggregatedDayMetric",
    "TimeRange",
    "ExportDay",
    "ExportReport",
]
