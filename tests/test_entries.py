"""Tests for the entry store."""

from datetime import datetime, timezone

import pytest

from mood_tracker.exceptions import EntryValidationError, ValidationReason
from mood_tracker.models import Ratings
from mood_tracker.services.storage import ENTRIES_KEY


class TestMorningLog:
    """Sleep and weight belong to the day's first entry only."""

    def test_first_entry_keeps_sleep_and_weight(self, tracker):
        entry = tracker.entries.add_entry(Ratings(), sleep=7.5, weight=70.2)
        assert entry.sleep == 7.5
        assert entry.weight == 70.2

    def test_later_entries_discard_sleep_and_weight(self, tracker, clock):
        tracker.entries.add_entry(Ratings(), sleep=7.5, weight=70.2)
        clock.advance(hours=4)
        second = tracker.entries.add_entry(Ratings(), sleep=9, weight=80)
        assert second.sleep is None
        assert second.weight is None

    def test_first_entry_without_values(self, tracker, clock):
        """The morning slot is used up even if nothing was filled in."""
        first = tracker.entries.add_entry(Ratings())
        clock.advance(hours=1)
        second = tracker.entries.add_entry(Ratings(), sleep=8)
        assert first.sleep is None
        assert second.sleep is None

    def test_new_day_gets_new_morning_log(self, tracker, clock):
        tracker.entries.add_entry(Ratings(), sleep=7)
        clock.advance(days=1)
        entry = tracker.entries.add_entry(Ratings(), sleep=6)
        assert entry.sleep == 6

    def test_first_entry_after_midnight_keeps_morning_log(self, tracker):
        """The first-of-day check uses the same instant the entry is stamped with."""
        tracker.entries.add_entry(Ratings())
        readings = iter([
            datetime(2024, 1, 15, 23, 59, 59, 999000, tzinfo=timezone.utc),
            datetime(2024, 1, 16, 0, 0, tzinfo=timezone.utc),
        ])
        tracker.entries.clock = lambda: next(readings)

        entry = tracker.entries.add_entry(Ratings(), sleep=7, weight=70)

        assert entry.date == "2024-01-15"
        assert entry.sleep is None

        next_day = tracker.entries.add_entry(Ratings(), sleep=7, weight=70)

        assert next_day.date == "2024-01-16"
        assert next_day.sleep == 7
        assert next_day.weight == 70

    def test_is_first_entry_today_follows_clock(self, tracker, clock):
        assert tracker.entries.is_first_entry_today() is True
        tracker.entries.add_entry(Ratings())
        assert tracker.entries.is_first_entry_today() is False
        clock.advance(days=1)
        assert tracker.entries.is_first_entry_today() is True

    def test_at_most_one_morning_log_per_day(self, tracker, clock):
        for hour in range(5):
            tracker.entries.add_entry(Ratings(), sleep=float(hour), weight=60.0)
            clock.advance(hours=1)

        day_entries = tracker.entries.entries_for_date("2024-01-15")
        with_log = [e for e in day_entries if e.has_morning_log]
        assert len(with_log) == 1
        assert with_log[0] is day_entries[0]


class TestValidation:
    """Invalid sleep or weight is rejected without side effects."""

    @pytest.mark.parametrize("sleep", [-1, 25, 24.01])
    def test_sleep_out_of_range(self, tracker, sleep):
        with pytest.raises(EntryValidationError) as exc_info:
            tracker.entries.add_entry(Ratings(), sleep=sleep)
        assert exc_info.value.reason is ValidationReason.SLEEP_OUT_OF_RANGE

    @pytest.mark.parametrize("sleep", [0, 24])
    def test_sleep_bounds_accepted(self, tracker, sleep):
        entry = tracker.entries.add_entry(Ratings(), sleep=sleep)
        assert entry.sleep == sleep

    def test_negative_weight(self, tracker):
        with pytest.raises(EntryValidationError) as exc_info:
            tracker.entries.add_entry(Ratings(), weight=-0.1)
        assert exc_info.value.reason is ValidationReason.NEGATIVE_WEIGHT

    def test_zero_weight_accepted(self, tracker):
        assert tracker.entries.add_entry(Ratings(), weight=0).weight == 0

    def test_rejected_entry_changes_nothing(self, tracker, store):
        medication = tracker.medications.add("Lithium")
        tracker.medications.select(medication.id)

        with pytest.raises(EntryValidationError):
            tracker.entries.add_entry(Ratings(), sleep=30)

        assert len(tracker.entries) == 0
        assert store.load(ENTRIES_KEY) is None
        assert tracker.medications.selected_ids == [medication.id]

    def test_values_validated_even_when_not_first(self, tracker, clock):
        """A bad value is still an error on later entries."""
        tracker.entries.add_entry(Ratings())
        clock.advance(minutes=5)
        with pytest.raises(EntryValidationError):
            tracker.entries.add_entry(Ratings(), weight=-5)


class TestEntryCreation:
    """Tests for the fields stamped on a new entry."""

    def test_date_time_and_timestamp_from_clock(self, tracker, clock):
        clock.set(datetime(2024, 3, 9, 7, 5, 42, tzinfo=timezone.utc))
        entry = tracker.entries.add_entry(Ratings(anxiety=3, energy=9), notes="  ok  ")

        assert entry.date == "2024-03-09"
        assert entry.time == "07:05"
        assert entry.timestamp == clock.now
        assert entry.anxiety == 3
        assert entry.energy == 9
        assert entry.notes == "ok"

    def test_ids_increase(self, tracker, clock):
        first = tracker.entries.add_entry(Ratings())
        second = tracker.entries.add_entry(Ratings())
        assert second.id > first.id

    def test_medication_names_in_selection_order(self, tracker):
        a = tracker.medications.add("A")
        b = tracker.medications.add("B")
        entry = tracker.entries.add_entry(Ratings(), selected_medication_ids=[b.id, 404, a.id])
        assert entry.medications == ["B", "A"]

    def test_uses_and_clears_registry_selection(self, tracker):
        medication = tracker.medications.add("Lithium")
        tracker.medications.toggle(medication.id)

        entry = tracker.entries.add_entry(Ratings())

        assert entry.medications == ["Lithium"]
        assert tracker.medications.selected_ids == []

    def test_explicit_ids_also_clear_selection(self, tracker):
        medication = tracker.medications.add("Lithium")
        tracker.medications.select(medication.id)
        entry = tracker.entries.add_entry(Ratings(), selected_medication_ids=[])
        assert entry.medications == []
        assert tracker.medications.selected_ids == []


class TestOrdering:
    """Tests for collection order and per-day views."""

    def _add_at(self, tracker, clock, when, **ratings):
        clock.set(when)
        return tracker.entries.add_entry(Ratings(**ratings))

    def test_collection_newest_first(self, tracker, clock):
        self._add_at(tracker, clock, datetime(2024, 1, 2, 9, tzinfo=timezone.utc))
        self._add_at(tracker, clock, datetime(2024, 1, 1, 9, tzinfo=timezone.utc))
        self._add_at(tracker, clock, datetime(2024, 1, 3, 9, tzinfo=timezone.utc))

        timestamps = [e.timestamp for e in tracker.entries.entries]
        assert timestamps == sorted(timestamps, reverse=True)
        assert tracker.entries.entries[0].date == "2024-01-03"

    def test_entries_for_date_ascending_by_time(self, tracker, clock):
        self._add_at(tracker, clock, datetime(2024, 1, 1, 19, 0, tzinfo=timezone.utc), anxiety=3)
        self._add_at(tracker, clock, datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc), anxiety=1)
        self._add_at(tracker, clock, datetime(2024, 1, 1, 14, 0, tzinfo=timezone.utc), anxiety=2)
        self._add_at(tracker, clock, datetime(2024, 1, 2, 8, 0, tzinfo=timezone.utc), anxiety=9)

        day = tracker.entries.entries_for_date("2024-01-01")
        assert [e.time for e in day] == ["09:30", "14:00", "19:00"]
        assert [e.anxiety for e in day] == [1, 2, 3]

    def test_entries_for_date_accepts_date(self, tracker, clock):
        self._add_at(tracker, clock, datetime(2024, 1, 1, 9, tzinfo=timezone.utc))
        assert len(tracker.entries.entries_for_date(datetime(2024, 1, 1).date())) == 1

    def test_entries_for_unknown_date(self, tracker):
        assert tracker.entries.entries_for_date("2023-12-31") == []

    def test_dates_with_entries_descending(self, tracker, clock):
        self._add_at(tracker, clock, datetime(2024, 1, 2, 9, tzinfo=timezone.utc))
        self._add_at(tracker, clock, datetime(2024, 1, 2, 12, tzinfo=timezone.utc))
        self._add_at(tracker, clock, datetime(2023, 12, 30, 9, tzinfo=timezone.utc))
        self._add_at(tracker, clock, datetime(2024, 1, 10, 9, tzinfo=timezone.utc))

        assert tracker.entries.dates_with_entries() == ["2024-01-10", "2024-01-02", "2023-12-30"]


class TestPersistence:
    """Entries survive a restart."""

    def test_saved_after_every_add(self, tracker, store):
        tracker.entries.add_entry(Ratings(depressed_mood=7))
        stored = store.load(ENTRIES_KEY)
        assert len(stored) == 1
        assert stored[0]["depressedMood"] == 7

    def test_reload(self, tracker, clock, reopen):
        tracker.entries.add_entry(Ratings(anxiety=2), sleep=6.5)
        clock.advance(hours=2)
        tracker.entries.add_entry(Ratings(anxiety=8))

        fresh = reopen(tracker)

        assert [e.anxiety for e in fresh.entries.entries] == [8, 2]
        assert fresh.entries.entries[1].sleep == 6.5
        assert fresh.entries.is_first_entry_today() is False

    def test_malformed_store_loads_empty(self, tracker, store, reopen):
        store.save(ENTRIES_KEY, [{"id": "nope"}])
        fresh = reopen(tracker)
        assert fresh.entries.entries == []
