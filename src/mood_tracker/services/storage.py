"""Local key/value persistence using TinyDB."""

import time
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from tinydb import Query, TinyDB

from ..utils.config import Settings, get_settings

ENTRIES_KEY = "moodTrackerEntries"
MEDICATIONS_KEY = "moodTrackerMeds"
REMINDERS_KEY = "moodTrackerReminders"
NOTIFICATIONS_KEY = "moodTrackerNotifications"


class LocalStore:
    """
    Durable key/value store for the tracker's collections.

    Each key is one TinyDB document holding a JSON-serialisable value. Load
    and save never raise: failures are logged and reported through the
    return value so the in-memory state stays usable.
    """

    TABLE = "collections"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db_path: Optional[Path] = None,
    ):
        self.settings = settings or get_settings()
        self._db_path = db_path
        self._db: Optional[TinyDB] = None

    @property
    def db_path(self) -> Path:
        """Path to the database file."""
        path = self._db_path or self.settings.db_path
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def db(self) -> TinyDB:
        """Get the TinyDB instance."""
        if self._db is None:
            self._db = TinyDB(self.db_path)
        return self._db

    def load(self, key: str) -> Optional[Any]:
        """Return the stored value for ``key``, or None if absent or unreadable."""
        Record = Query()
        try:
            doc = self.db.table(self.TABLE).get(Record.key == key)
        except ValueError:
            logger.exception("Corrupt data file {}, starting empty", self.db_path)
            self._quarantine()
            return None
        except OSError:
            logger.exception("Could not read {} from {}", key, self.db_path)
            return None

        if doc is None:
            return None
        return doc.get("value")

    def save(self, key: str, value: Any) -> bool:
        """Write ``value`` under ``key``. Returns False if the write failed."""
        Record = Query()
        try:
            self.db.table(self.TABLE).upsert(
                {"key": key, "value": value},
                Record.key == key,
            )
        except (OSError, ValueError, TypeError):
            logger.exception("Could not save {} to {}", key, self.db_path)
            return False
        logger.debug("Saved {}", key)
        return True

    def _quarantine(self) -> None:
        """Move an unparseable data file aside so later saves can succeed."""
        self.close()
        path = self.db_path
        backup = path.with_suffix(f".corrupt-{int(time.time())}.json")
        try:
            path.replace(backup)
        except OSError:
            logger.exception("Could not back up corrupt file {}", path)
            return
        logger.warning("Backed up corrupt data file to {}", backup)

    def close(self) -> None:
        """Close the database connection."""
        if self._db:
            self._db.close()
            self._db = None

    def __enter__(self) -> "LocalStore":
        return self

    def __exit__(self, *args) -> None:
        self.close()
