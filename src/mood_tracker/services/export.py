"""Date-bounded entry selection for printed reports."""

from datetime import date
from typing import Optional, Union

from ..models.entry import MoodEntry
from ..models.report import ExportDay, ExportReport
from ..utils.clock import Clock, system_clock
from .entries import EntryStore, as_date_str

DateBound = Optional[Union[date, str]]


class ExportFilter:
    """Selects and groups entries for the report renderer."""

    def __init__(self, entries: EntryStore, clock: Clock = system_clock):
        self.entries = entries
        self.clock = clock

    def filter_for_export(
        self,
        start_date: DateBound = None,
        end_date: DateBound = None,
    ) -> list[MoodEntry]:
        """
        Entries whose date falls within the inclusive bounds.

        Only ``date`` is compared; the time of day never matters. With no
        bounds every entry is returned. The store's order is kept as is.
        """
        start = as_date_str(start_date) if start_date else None
        end = as_date_str(end_date) if end_date else None

        if not start and not end:
            return self.entries.entries

        return [
            e for e in self.entries.entries
            if (not start or e.date >= start) and (not end or e.date <= end)
        ]

    @staticmethod
    def group_by_day(entries: list[MoodEntry]) -> list[ExportDay]:
        """Group entries by date: latest day first, each day earliest entry first."""
        by_date: dict[str, list[MoodEntry]] = {}
        for entry in entries:
            by_date.setdefault(entry.date, []).append(entry)

        days = []
        for day in sorted(by_date, reverse=True):
            day_entries = sorted(by_date[day], key=lambda e: e.time)
            morning = next((e for e in day_entries if e.has_morning_log), None)
            days.append(ExportDay(
                date=day,
                entries=day_entries,
                sleep=morning.sleep if morning else None,
                weight=morning.weight if morning else None,
            ))
        return days

    def build_report(
        self,
        start_date: DateBound = None,
        end_date: DateBound = None,
    ) -> ExportReport:
        """Everything the report renderer needs, including the header bounds."""
        entries = self.filter_for_export(start_date, end_date)
        return ExportReport(
            start_date=as_date_str(start_date) if start_date else None,
            end_date=as_date_str(end_date) if end_date else None,
            generated_at=self.clock(),
            days=self.group_by_day(entries),
        )
