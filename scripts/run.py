"""
Interactive console for taking restaurant reservations.

Asks for name, number of guests and time, shows the menu, reads one
quantity per dish and submits the reservation.

Usage:
    python scripts/run.py

Environment variables (all optional):
    RESERVATION_LIMIT_PER_HOUR  - max reservations per time slot (default: 10)
    RESERVATIONS_BACKEND        - "json", "sqlite" or "memory" (default: json)
    RESERVATIONS_PATH           - storage path (default: data/reservations.json)
    MENU_SOURCE                 - "file" or "http" (default: file)
    MENU_PATH                   - menu file (default: data/menu.json)
    MENU_URL                    - menu URL when MENU_SOURCE=http
"""

import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dinebook.adapters.factory import create_repository, limit_per_hour_from_env
from dinebook.booking import BookingService, check_selection
from dinebook.domain.errors import PersistenceCorrupt
from dinebook.domain.reservation import Reservation
from dinebook.domain.store import ReservationStore
from dinebook.menu.factory import create_menu_catalog
from dinebook.menu.ports import MenuItem, MenuUnavailable

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def _read_quantity(prompt: str) -> int:
    while True:
        raw = input(prompt).strip() or "0"
        try:
            qty = int(raw)
        except ValueError:
            print("  Introduce un número entero.")
            continue
        if qty < 0:
            print("  La cantidad no puede ser negativa.")
            continue
        return qty


def _select_dishes(menu: list[MenuItem], reservation: Reservation) -> dict[str, int] | None:
    """Read a quantity per dish until the total matches the party size."""
    while True:
        print(f"\nMenú — elige {reservation.num_of_guests} plato(s):")
        selection: dict[str, int] = {}
        for item in menu:
            selection[item.name] = _read_quantity(f"  {item.name} - ${item.price:g}: ")

        status = check_selection(selection, reservation.num_of_guests)
        if status == "ready":
            return selection
        if status == "too_many":
            print("Demasiados platos: no puedes pedir más platos que el número de invitados.")
        else:
            print(f"Debes elegir exactamente {reservation.num_of_guests} plato(s).")
        if input("¿Intentar de nuevo? [s/N] ").strip().lower() != "s":
            return None


def new_reservation(service: BookingService, menu: list[MenuItem]) -> None:
    started = service.start(
        input("Nombre del cliente: ").strip(),
        input("Número de invitados: ").strip(),
        input("Hora (HH:MM): ").strip(),
    )
    if started.action == "incomplete":
        print(f"Campos incompletos: {started.details}")
        return
    if started.action == "invalid_guests":
        print(f"Número de invitados no válido: {started.details}")
        return

    reservation = started.reservation
    selection = _select_dishes(menu, reservation)
    if selection is None:
        print("Reserva descartada.")
        return

    result = service.confirm(reservation, selection)
    if result.action == "admitted":
        print(f"\nReserva aceptada.\n  {result.details}\n")
    else:
        print(f"\nNo se pudo reservar ({result.action}): {result.details}\n")


def show_reservations(service: BookingService) -> None:
    print()
    for line in service.list_reservations():
        print(f"  {line}")
    print()


def main() -> None:
    try:
        store = ReservationStore.load(create_repository(), limit_per_hour_from_env())
    except PersistenceCorrupt as exc:
        print(f"ERROR: stored reservations are corrupt: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        menu = create_menu_catalog().load()
    except MenuUnavailable as exc:
        log.error("Error cargando el menú: %s", exc)
        print("No se pudo cargar el menú. Por favor, intente nuevamente.", file=sys.stderr)
        store.close()
        sys.exit(1)

    service = BookingService(store)
    show_reservations(service)

    try:
        while True:
            cmd = input("[n]ueva reserva, [l]istar, [q]salir: ").strip().lower()
            if cmd == "n":
                new_reservation(service, menu)
            elif cmd == "l":
                show_reservations(service)
            elif cmd == "q":
                break
    finally:
        store.close()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        log.info("Console stopped.")
