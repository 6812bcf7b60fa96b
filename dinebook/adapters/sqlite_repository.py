"""
SQLite adapter for ReservationRepository.

A tiny key-value table: the serialised collection is one row under a fixed
key.  Use ":memory:" for tests, a file path for production.
"""

import sqlite3
from datetime import datetime, timezone

from dinebook.domain.errors import PersistenceWriteFailed
from dinebook.domain.repository import ReservationRepository

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key         TEXT PRIMARY KEY,
    value       TEXT NOT NULL,
    updated_at  TEXT NOT NULL
);
"""

DEFAULT_KEY = "reservations"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SqliteReservationRepository(ReservationRepository):

    def __init__(self, db_path: str = "data/reservations.db", key: str = DEFAULT_KEY):
        self._key = key
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)

    def read(self) -> str | None:
        row = self._conn.execute(
            "SELECT value FROM kv_store WHERE key = ?", (self._key,)
        ).fetchone()
        if not row:
            return None
        return row["value"]

    def write(self, payload: str) -> None:
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT OR REPLACE INTO kv_store (key, value, updated_at)"
                    " VALUES (?, ?, ?)",
                    (self._key, payload, _now()),
                )
        except (sqlite3.Error, UnicodeError) as exc:
            raise PersistenceWriteFailed(f"could not write key {self._key!r}: {exc}") from exc

    def close(self) -> None:
        self._conn.close()
