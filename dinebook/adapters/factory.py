import os

from dinebook.domain.repository import ReservationRepository
from dinebook.domain.store import RESERVATION_LIMIT_PER_HOUR


def create_repository(backend: str | None = None, path: str | None = None) -> ReservationRepository:
    """
    Factory: create the persistence adapter based on config.

    The backend can be passed explicitly or read from the
    RESERVATIONS_BACKEND env var ("json", "sqlite" or "memory").
    Defaults to "json".  The location comes from RESERVATIONS_PATH.
    """
    backend = backend or os.environ.get("RESERVATIONS_BACKEND", "json")
    path = path or os.environ.get("RESERVATIONS_PATH")

    if backend == "json":
        from .json_file_repository import JsonFileReservationRepository

        return JsonFileReservationRepository(path or "data/reservations.json")

    if backend == "sqlite":
        from .sqlite_repository import SqliteReservationRepository

        db_path = path or "data/reservations.db"
        if db_path != ":memory:":
            os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        return SqliteReservationRepository(db_path)

    if backend == "memory":
        from .simulator_repository import InMemoryReservationRepository

        return InMemoryReservationRepository()

    raise ValueError(f"Unknown reservations backend: {backend!r}")


def limit_per_hour_from_env() -> int:
    """Read RESERVATION_LIMIT_PER_HOUR; must be a positive integer."""
    raw = os.environ.get("RESERVATION_LIMIT_PER_HOUR")
    if raw is None or raw == "":
        return RESERVATION_LIMIT_PER_HOUR
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"RESERVATION_LIMIT_PER_HOUR must be an integer, got {raw!r}") from None
    if limit < 1:
        raise ValueError(f"RESERVATION_LIMIT_PER_HOUR must be positive, got {limit}")
    return limit
