"""
Reservation errors.

Every failure the core can report is an exception here.  None of them
mutate state: the caller decides what to tell the client.
"""


class ReservationError(Exception):
    """Base class for all reservation errors."""


class RejectedTooManyDishes(ReservationError):
    """More dishes were requested than there are guests."""

    def __init__(self, requested: int, num_of_guests: int):
        super().__init__(
            f"{requested} dishes requested for {num_of_guests} guest(s)"
        )
        self.requested = requested
        self.num_of_guests = num_of_guests


class CapacityExceeded(ReservationError):
    """The time slot already holds the maximum number of reservations."""

    def __init__(self, time: str, limit: int):
        super().__init__(f"slot {time!r} is full ({limit} reservations)")
        self.time = time
        self.limit = limit


class PersistenceCorrupt(ReservationError):
    """The persisted collection cannot be read back as reservations."""


class PersistenceWriteFailed(ReservationError):
    """The durable write of the collection did not complete."""
