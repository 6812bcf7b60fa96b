"""
Booking flow.

Wires the reservation entity and the store together the way the booking
form uses them:

  1. start():   client fills name, guests, time → draft reservation
  2. confirm(): client picks dish quantities → dishes assigned → admitted

Errors from the core are turned into a BookingResult so the shell only has
to pick a message; nothing here prints or prompts.
"""

import logging
from dataclasses import dataclass
from typing import Literal

from dinebook.domain.errors import CapacityExceeded, PersistenceWriteFailed, RejectedTooManyDishes
from dinebook.domain.reservation import DishLine, Reservation
from dinebook.domain.store import ReservationStore

log = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "No hay reservas en la lista de hoy."


@dataclass
class BookingResult:
    action: Literal[
        "incomplete",         # name, guests or time missing
        "invalid_guests",     # guest count is not a positive integer
        "draft_created",      # draft reservation ready for dish selection
        "no_dishes",          # every quantity was zero
        "too_many_dishes",    # more dishes than guests
        "capacity_exceeded",  # slot already full
        "write_failed",       # durable write failed, nothing admitted
        "already_admitted",   # reservation was admitted earlier
        "admitted",           # reservation stored
    ]
    details: str = ""
    reservation: Reservation | None = None


def selection_to_dishes(selection: dict[str, int]) -> list[DishLine]:
    """Keep the dishes with a positive quantity, in selection order."""
    return [DishLine(name=name, quantity=qty) for name, qty in selection.items() if qty > 0]


def check_selection(
    selection: dict[str, int], num_of_guests: int
) -> Literal["too_many", "incomplete", "ready"]:
    """
    Live gate for the dish form.

    "too_many" once the total passes the party size, "ready" only when it
    matches it exactly.
    """
    total = sum(qty for qty in selection.values() if qty > 0)
    if total > num_of_guests:
        return "too_many"
    if total < num_of_guests:
        return "incomplete"
    return "ready"


class BookingService:

    def __init__(self, store: ReservationStore):
        self._store = store

    @property
    def store(self) -> ReservationStore:
        return self._store

    def start(self, client_name: str, num_of_guests: int | str, time: str) -> BookingResult:
        """Create a draft reservation from the booking form fields."""
        if not client_name or num_of_guests in (None, "") or not time:
            return BookingResult(
                action="incomplete",
                details="Por favor, completa todos los campos de la reserva.",
            )
        try:
            reservation = Reservation.create(client_name, num_of_guests, time)
        except ValueError as exc:
            return BookingResult(action="invalid_guests", details=str(exc))

        log.debug("draft created for %s at %s", client_name, time)
        return BookingResult(
            action="draft_created",
            details=f"Máximo de platos: {reservation.num_of_guests}",
            reservation=reservation,
        )

    def confirm(self, reservation: Reservation, selection: dict[str, int]) -> BookingResult:
        """Assign the selected dishes and submit the reservation to the store."""
        if reservation.admitted:
            return self._already_admitted(reservation)

        dishes = selection_to_dishes(selection)
        if not dishes:
            return BookingResult(
                action="no_dishes",
                details="Por favor, selecciona al menos un plato.",
                reservation=reservation,
            )

        try:
            reservation.assign_dishes(dishes)
        except RejectedTooManyDishes as exc:
            log.info("%s: %s", reservation.client_name, exc)
            return BookingResult(
                action="too_many_dishes",
                details="No puedes pedir más platos que el número de invitados.",
                reservation=reservation,
            )
        except ValueError:
            # admitted by another caller since the check above
            return self._already_admitted(reservation)

        try:
            self._store.admit(reservation)
        except CapacityExceeded as exc:
            return BookingResult(
                action="capacity_exceeded",
                details=(
                    f"Se ha alcanzado el límite de {exc.limit} reservas "
                    f"para la hora {exc.time}."
                ),
                reservation=reservation,
            )
        except PersistenceWriteFailed as exc:
            return BookingResult(action="write_failed", details=str(exc), reservation=reservation)
        except ValueError:
            return self._already_admitted(reservation)

        return BookingResult(action="admitted", details=reservation.describe(), reservation=reservation)

    @staticmethod
    def _already_admitted(reservation: Reservation) -> BookingResult:
        return BookingResult(
            action="already_admitted",
            details="Esta reserva ya fue aceptada.",
            reservation=reservation,
        )

    def list_reservations(self) -> list[str]:
        reservations = self._store.list()
        if not reservations:
            return [EMPTY_LIST_MESSAGE]
        return [r.describe() for r in reservations]
