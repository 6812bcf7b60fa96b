"""
ReservationStore — the admitted reservations and the hourly capacity rule.

Flow of admit():
  1. Count admitted reservations sharing the exact slot key
  2. Reject with CapacityExceeded when the slot is full
  3. Append, then rewrite the whole collection through the repository
  4. If the write fails, drop the append again and raise PersistenceWriteFailed

Steps 1–4 run under one lock per store, so two callers can never both see
the same pre-admission count.
"""

import logging
import threading
from collections import Counter

from dinebook.domain import codec
from dinebook.domain.errors import CapacityExceeded, PersistenceCorrupt, PersistenceWriteFailed
from dinebook.domain.repository import ReservationRepository
from dinebook.domain.reservation import Reservation

log = logging.getLogger(__name__)

RESERVATION_LIMIT_PER_HOUR = 10


class ReservationStore:
    """
    Owns the ordered list of admitted reservations.

    Build it with ReservationStore.load(); dispose of it with close().
    """

    def __init__(
        self,
        repository: ReservationRepository,
        reservations: list[Reservation],
        limit_per_hour: int = RESERVATION_LIMIT_PER_HOUR,
    ):
        if isinstance(limit_per_hour, bool) or not isinstance(limit_per_hour, int) or limit_per_hour < 1:
            raise ValueError(f"limit_per_hour must be a positive integer, got {limit_per_hour!r}")
        self._repository = repository
        self._reservations = reservations
        self._limit = limit_per_hour
        self._lock = threading.Lock()

    @classmethod
    def load(
        cls,
        repository: ReservationRepository,
        limit_per_hour: int = RESERVATION_LIMIT_PER_HOUR,
    ) -> "ReservationStore":
        """Read the persisted collection. Corrupt data raises PersistenceCorrupt."""
        payload = repository.read()
        if payload is None:
            reservations = []
        else:
            try:
                reservations = codec.decode(payload)
            except PersistenceCorrupt as exc:
                log.error("Stored reservations are corrupt: %s", exc)
                raise
        store = cls(repository, reservations, limit_per_hour)
        for time, count in Counter(r.time for r in reservations).items():
            if count > store.limit_per_hour:
                log.warning(
                    "slot=%s holds %d reservations, over the limit of %d; no new admissions there",
                    time, count, store.limit_per_hour,
                )
        log.info("Loaded %d reservation(s), limit=%d per slot", len(reservations), store.limit_per_hour)
        return store

    @property
    def limit_per_hour(self) -> int:
        return self._limit

    def reservations_at(self, time: str) -> list[Reservation]:
        return [r for r in self._reservations if r.time == time]

    def admit(self, reservation: Reservation) -> None:
        """
        Admit a reservation into its slot and persist the collection.

        Only dish-assigned reservations can be admitted.  Raises
        CapacityExceeded if the slot is full, PersistenceWriteFailed if the
        durable write fails for any reason.  In both cases nothing changes.
        """
        with self._lock:
            if reservation.state != "dish-assigned":
                raise ValueError(
                    f"only dish-assigned reservations can be admitted, got {reservation.state!r}"
                )

            taken = len(self.reservations_at(reservation.time))
            if taken >= self._limit:
                log.info(
                    "slot=%s full (%d/%d) — rejected %s",
                    reservation.time, taken, self._limit, reservation.client_name,
                )
                raise CapacityExceeded(reservation.time, self._limit)

            self._reservations.append(reservation)
            try:
                self._repository.write(codec.encode(self._reservations))
            except Exception as exc:
                self._reservations.pop()
                log.error("slot=%s write failed, admission rolled back: %s", reservation.time, exc)
                if isinstance(exc, PersistenceWriteFailed):
                    raise
                raise PersistenceWriteFailed(f"could not persist reservations: {exc}") from exc

            reservation.admitted = True

        log.info(
            "slot=%s admitted %s (%d guests, %d dishes) — %d/%d",
            reservation.time, reservation.client_name, reservation.num_of_guests,
            reservation.total_dishes, taken + 1, self._limit,
        )

    def list(self) -> list[Reservation]:
        return list(self._reservations)

    def close(self) -> None:
        self._repository.close()
