"""Aggregated trend models."""

from datetime import date as date_type
from datetime import timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, computed_field


class TimeRange(str, Enum):
    """Lookback windows offered on the trends view."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"

    @property
    def days(self) -> int:
        return _WINDOW_DAYS[self]

    @property
    def window(self) -> timedelta:
        return timedelta(days=self.days)


_WINDOW_DAYS = {
    TimeRange.DAY: 1,
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
    TimeRange.YEAR: 365,
    TimeRange.ALL: 99999,
}


class AggregatedDayMetric(BaseModel):
    """One day's mean ratings plus its morning log."""

    date: str
    anxiety: float
    irritability: float
    depressed_mood: float
    elevated_mood: float
    energy: float
    sleep: Optional[float] = None
    weight: Optional[float] = None

    @computed_field
    @property
    def label(self) -> str:
        """Short axis label, e.g. ``Jan 5``."""
        day = date_type.fromisoformat(self.date)
        return f"{day.strftime('%b')} {day.day}"
