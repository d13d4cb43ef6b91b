"""Models handed to the report renderer."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .entry import MoodEntry


class ExportDay(BaseModel):
    """All of one day's entries, earliest first."""

    date: str
    entries: list[MoodEntry] = Field(default_factory=list)
    sleep: Optional[float] = None
    weight: Optional[float] = None


class ExportReport(BaseModel):
    """Date-bounded entries grouped by day, most recent day first."""

    start_date: Optional[str] = None
    end_date: Optional[str] = None
    generated_at: datetime
    days: list[ExportDay] = Field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return sum(len(day.entries) for day in self.days)

    @property
    def range_label(self) -> Optional[str]:
        """Header text for the date range, or None when unbounded."""
        if not self.start_date and not self.end_date:
            return None
        return f"{self.start_date or 'Start'} to {self.end_date or 'End'}"
