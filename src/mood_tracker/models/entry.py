"""Mood entry model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Rating attributes shared by Ratings, MoodEntry and AggregatedDayMetric
RATING_FIELDS = (
    "anxiety",
    "irritability",
    "depressed_mood",
    "elevated_mood",
    "energy",
)


class Ratings(BaseModel):
    """The five 1-10 ratings captured with every entry."""

    model_config = ConfigDict(populate_by_name=True)

    anxiety: int = Field(default=5, ge=1, le=10)
    irritability: int = Field(default=5, ge=1, le=10)
    depressed_mood: int = Field(default=5, ge=1, le=10, alias="depressedMood")
    elevated_mood: int = Field(default=5, ge=1, le=10, alias="elevatedMood")
    energy: int = Field(default=5, ge=1, le=10)


class MoodEntry(Ratings):
    """
    A single timestamped observation.

    ``sleep`` and ``weight`` form the day's morning log and are only ever set
    on the first entry recorded for ``date``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    date: str  # YYYY-MM-DD, local
    time: str  # HH:MM, local, zero-padded
    timestamp: datetime

    notes: str = ""
    medications: list[str] = Field(default_factory=list)  # names copied at creation

    # Morning log
    sleep: Optional[float] = Field(default=None, ge=0, le=24)
    weight: Optional[float] = Field(default=None, ge=0)

    @property
    def ratings(self) -> Ratings:
        return Ratings(**{name: getattr(self, name) for name in RATING_FIELDS})

    @property
    def has_morning_log(self) -> bool:
        return self.sleep is not None or self.weight is not None

    def summary(self) -> str:
        """One-line description used by the CLI."""
        parts = [
            f"{self.time}",
            f"Anx {self.anxiety}",
            f"Irr {self.irritability}",
            f"Dep {self.depressed_mood}",
            f"Elev {self.elevated_mood}",
            f"Energy {self.energy}",
        ]
        if self.medications:
            parts.append(f"Meds: {', '.join(self.medications)}")
        return " | ".join(parts)
