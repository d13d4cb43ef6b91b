"""Entry store: creation, ordering and per-day lookup of mood entries."""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ..exceptions import EntryValidationError, ValidationReason
from ..models.entry import MoodEntry, Ratings
from ..utils.clock import Clock, system_clock
from ..utils.ids import IdGenerator
from .medications import MedicationRegistry
from .storage import ENTRIES_KEY, LocalStore

_entry_list = TypeAdapter(list[MoodEntry])


def as_date_str(value: Union[date, str]) -> str:
    """Normalise a date or ISO date string to ``YYYY-MM-DD``."""
    if isinstance(value, date):
        return value.isoformat()
    return value


class EntryStore:
    """
    Owns every MoodEntry for the lifetime of the process.

    Entries are kept newest first and never edited or deleted. The first
    entry of each calendar day is the only one allowed to carry the
    morning log (sleep and weight).
    """

    def __init__(
        self,
        store: LocalStore,
        medications: MedicationRegistry,
        clock: Clock = system_clock,
    ):
        self.store = store
        self.medications = medications
        self.clock = clock
        self.ids = IdGenerator(clock)
        self._entries: list[MoodEntry] = []

    @property
    def entries(self) -> list[MoodEntry]:
        """All entries, newest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_first_entry_today(self, now: Optional[datetime] = None) -> bool:
        """True when nothing has been logged yet on the calendar day of ``now``."""
        now = now or self.clock()
        today = now.date().isoformat()
        return not any(e.date == today for e in self._entries)

    def add_entry(
        self,
        ratings: Ratings,
        notes: str = "",
        selected_medication_ids: Optional[Iterable[int]] = None,
        sleep: Optional[float] = None,
        weight: Optional[float] = None,
    ) -> MoodEntry:
        """
        Record a new entry stamped with the current time.

        ``selected_medication_ids`` defaults to the registry's current
        selection; unknown ids are dropped. Sleep and weight are kept only
        for the day's first entry and discarded otherwise. On success the
        selection is cleared and the collection is persisted.

        Raises EntryValidationError (before any change) for sleep outside
        0-24 hours or a negative weight.
        """
        if sleep is not None and not 0 <= sleep <= 24:
            raise EntryValidationError(ValidationReason.SLEEP_OUT_OF_RANGE, str(sleep))
        if weight is not None and weight < 0:
            raise EntryValidationError(ValidationReason.NEGATIVE_WEIGHT, str(weight))

        if selected_medication_ids is None:
            selected_medication_ids = self.medications.selected_ids

        now = self.clock()
        first_today = self.is_first_entry_today(now)

        entry = MoodEntry(
            id=self.ids.next_id(now),
            date=now.date().isoformat(),
            time=now.strftime("%H:%M"),
            timestamp=now,
            notes=(notes or "").strip(),
            medications=self.medications.resolve_names(selected_medication_ids),
            sleep=sleep if first_today else None,
            weight=weight if first_today else None,
            **ratings.model_dump(),
        )

        # sorted() is stable, so equal timestamps keep insertion order
        self._entries = sorted(
            [*self._entries, entry],
            key=lambda e: e.timestamp,
            reverse=True,
        )
        self.save()
        self.medications.clear_selection()

        logger.info(
            "Entry saved for {} at {}{}",
            entry.date,
            entry.time,
            " with morning log" if first_today else "",
        )
        return entry

    def entries_for_date(self, day: Union[date, str]) -> list[MoodEntry]:
        """A day's entries, earliest first."""
        day = as_date_str(day)
        return sorted(
            (e for e in self._entries if e.date == day),
            key=lambda e: e.time,
        )

    def dates_with_entries(self) -> list[str]:
        """Distinct dates that have entries, most recent first."""
        return sorted({e.date for e in self._entries}, reverse=True)

    # Persistence

    def load(self) -> None:
        raw = self.store.load(ENTRIES_KEY)
        if raw is None:
            self._entries = []
            return
        try:
            entries = _entry_list.validate_python(raw)
        except ValidationError:
            logger.exception("Stored entries are malformed, starting empty")
            self._entries = []
            return

        self._entries = sorted(entries, key=lambda e: e.timestamp, reverse=True)
        for entry in self._entries:
            self.ids.observe(entry.id)
        logger.debug("Loaded {} entries", len(self._entries))

    def save(self) -> bool:
        return self.store.save(
            ENTRIES_KEY,
            _entry_list.dump_python(self._entries, mode="json", by_alias=True),
        )
