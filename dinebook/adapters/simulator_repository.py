"""
In-memory ReservationRepository for testing — no files, no database.
"""

from dinebook.domain.errors import PersistenceWriteFailed
from dinebook.domain.repository import ReservationRepository


class InMemoryReservationRepository(ReservationRepository):
    """
    Test helpers:
        fail_writes  — when True, write() raises PersistenceWriteFailed
        writes       — number of successful writes so far
    """

    def __init__(self, payload: str | None = None):
        self._payload = payload
        self.fail_writes = False
        self.writes = 0

    def read(self) -> str | None:
        return self._payload

    def write(self, payload: str) -> None:
        if self.fail_writes:
            raise PersistenceWriteFailed("simulated write failure")
        self._payload = payload
        self.writes += 1
