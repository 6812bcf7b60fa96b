"""
File adapter for ReservationRepository.

The whole collection lives in one JSON file.  Writes go to a temp file in
the same directory which then replaces the target, so a crash mid-write
leaves the previous file intact.
"""

import os
import tempfile
from pathlib import Path

from dinebook.domain.errors import PersistenceWriteFailed
from dinebook.domain.repository import ReservationRepository


class JsonFileReservationRepository(ReservationRepository):

    def __init__(self, path: str = "data/reservations.json"):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str | None:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, payload: str) -> None:
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except (OSError, UnicodeError) as exc:
            raise PersistenceWriteFailed(f"could not write {self._path}: {exc}") from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
