"""Tests for the TinyDB-backed LocalStore."""

import json

from mood_tracker.services import LocalStore
from mood_tracker.services.storage import ENTRIES_KEY, MEDICATIONS_KEY


class TestLocalStore:
    """Tests for LocalStore load and save."""

    def test_load_missing_key_returns_none(self, store):
        assert store.load(ENTRIES_KEY) is None

    def test_save_then_load(self, store):
        assert store.save(MEDICATIONS_KEY, [{"id": 1, "name": "Lithium"}]) is True
        assert store.load(MEDICATIONS_KEY) == [{"id": 1, "name": "Lithium"}]

    def test_save_overwrites_key(self, store):
        store.save(ENTRIES_KEY, [1])
        store.save(ENTRIES_KEY, [1, 2])
        assert store.load(ENTRIES_KEY) == [1, 2]
        assert len(store.db.table(LocalStore.TABLE)) == 1

    def test_persists_across_instances(self, settings):
        with LocalStore(settings) as first:
            first.save(ENTRIES_KEY, ["a"])
        with LocalStore(settings) as second:
            assert second.load(ENTRIES_KEY) == ["a"]

    def test_creates_data_dir(self, settings):
        with LocalStore(settings) as local_store:
            local_store.save(ENTRIES_KEY, [])
        assert settings.db_path.exists()

    def test_writes_plain_json(self, settings):
        with LocalStore(settings) as local_store:
            local_store.save(MEDICATIONS_KEY, [{"id": 1, "name": "Lithium"}])
        data = json.loads(settings.db_path.read_text())
        assert "collections" in data


class TestCorruptFile:
    """A damaged data file must not take the app down."""

    def test_corrupt_file_loads_as_absent_and_is_backed_up(self, settings):
        settings.data_dir.mkdir(parents=True)
        settings.db_path.write_text("not valid json {{{{", encoding="utf-8")

        with LocalStore(settings) as local_store:
            assert local_store.load(ENTRIES_KEY) is None
            backups = list(settings.data_dir.glob("*.corrupt-*.json"))
            assert len(backups) == 1
            assert backups[0].read_text(encoding="utf-8") == "not valid json {{{{"

    def test_saves_work_after_corruption(self, settings):
        settings.data_dir.mkdir(parents=True)
        settings.db_path.write_text("garbage", encoding="utf-8")

        with LocalStore(settings) as local_store:
            local_store.load(ENTRIES_KEY)
            assert local_store.save(ENTRIES_KEY, [1]) is True
            assert local_store.load(ENTRIES_KEY) == [1]
