"""Per-day trend aggregation over a lookback window."""

from typing import Optional, Union

import pandas as pd

from ..models.entry import RATING_FIELDS, MoodEntry
from ..models.metrics import AggregatedDayMetric, TimeRange
from ..utils.clock import Clock, system_clock
from .entries import EntryStore

MORNING_LOG_FIELDS = ("sleep", "weight")


class AggregationEngine:
    """
    Derives daily averages from the entry store for trend charts.

    The window is a rolling cutoff (``now - days``), not a calendar
    boundary: the ``day`` range covers the last 24 hours.
    """

    def __init__(self, entries: EntryStore, clock: Clock = system_clock):
        self.entries = entries
        self.clock = clock

    def build_dataframe(self, time_range: Union[TimeRange, str]) -> pd.DataFrame:
        """
        Entries inside the window as a DataFrame, one row per entry.

        Columns: date, timestamp, the five ratings, sleep, weight.
        """
        time_range = TimeRange(time_range)
        cutoff = self.clock() - time_range.window

        rows = [
            self._entry_to_row(e)
            for e in self.entries.entries
            if e.timestamp >= cutoff
        ]
        if not rows:
            return pd.DataFrame()

        df = pd.DataFrame(rows)
        for col in MORNING_LOG_FIELDS:
            df[col] = df[col].astype(float)
        return df

    def aggregate(self, time_range: Union[TimeRange, str]) -> list[AggregatedDayMetric]:
        """Mean ratings per day within ``time_range``, oldest day first."""
        df = self.build_dataframe(time_range)
        if df.empty:
            return []

        grouped = df.groupby("date", sort=True)
        means = grouped[list(RATING_FIELDS)].mean()
        # first() skips NaN, so this picks the one entry carrying the morning log
        morning = grouped[list(MORNING_LOG_FIELDS)].first()

        metrics = []
        for day, row in means.iterrows():
            metrics.append(AggregatedDayMetric(
                date=day,
                **{name: float(row[name]) for name in RATING_FIELDS},
                **{
                    name: _optional_float(morning.at[day, name])
                    for name in MORNING_LOG_FIELDS
                },
            ))
        return metrics

    def _entry_to_row(self, entry: MoodEntry) -> dict:
        row = {
            "date": entry.date,
            "timestamp": entry.timestamp,
            "sleep": entry.sleep,
            "weight": entry.weight,
        }
        for name in RATING_FIELDS:
            row[name] = getattr(entry, name)
        return row


def _optional_float(value) -> Optional[float]:
    if pd.isna(value):
        return None
    return float(value)
