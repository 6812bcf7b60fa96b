"""
ReservationRepository port — where the serialised reservation list lives.

The store never talks to files or databases directly.  It hands a fully
encoded collection to write() and reads it back with read().
"""

from abc import ABC, abstractmethod


class ReservationRepository(ABC):
    """
    Port: one serialised collection under a fixed key or path.

    write() replaces the whole collection.  It either completes or raises
    PersistenceWriteFailed, in which case the previous payload is still
    what read() returns.
    """

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored payload, or None if nothing was ever written."""
        ...

    @abstractmethod
    def write(self, payload: str) -> None:
        """Atomically replace the stored payload."""
        ...

    def close(self) -> None:
        """Release any underlying resource. Default: nothing to release."""
