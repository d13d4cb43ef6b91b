"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from mood_tracker.services import LocalStore, MoodTracker
from mood_tracker.utils.config import Settings


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)

    def set(self, when: datetime) -> None:
        self.now = when


class RecordingNotifier:
    """Notifier that remembers every tag it was sent."""

    def __init__(self):
        self.tags: list[tuple[str, str]] = []

    def add_tag(self, key: str, value: str) -> bool:
        self.tags.append((key, value))
        return True


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 15, 8, 0, tzinfo=timezone.utc))


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(_env_file=None, data_dir=tmp_path / "data")


@pytest.fixture()
def store(settings):
    with LocalStore(settings) as local_store:
        yield local_store


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def tracker(settings, store, clock, notifier) -> MoodTracker:
    tracker = MoodTracker(settings, store=store, clock=clock, notifier=notifier)
    tracker.load()
    return tracker


def _reopen(tracker: MoodTracker) -> MoodTracker:
    """A fresh tracker reading the same data file."""
    tracker.close()
    fresh = MoodTracker(
        tracker.settings,
        store=LocalStore(tracker.settings),
        clock=tracker.clock,
        notifier=tracker.reminders.notifier,
    )
    fresh.load()
    return fresh


@pytest.fixture()
def reopen():
    return _reopen
