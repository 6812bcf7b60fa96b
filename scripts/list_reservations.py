#!/usr/bin/env python3
"""
List admitted reservations.

Usage (from project root):
    python scripts/list_reservations.py            # every reservation
    python scripts/list_reservations.py 18:00      # only the 18:00 slot
"""

import logging
import os
import sys

# Allow running as `python scripts/list_reservations.py` from project root.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dinebook.adapters.factory import create_repository, limit_per_hour_from_env
from dinebook.booking import EMPTY_LIST_MESSAGE
from dinebook.domain.errors import PersistenceCorrupt
from dinebook.domain.store import ReservationStore

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def main() -> None:
    try:
        store = ReservationStore.load(create_repository(), limit_per_hour_from_env())
    except PersistenceCorrupt as exc:
        print(f"ERROR: stored reservations are corrupt: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        if len(sys.argv) >= 2:
            slot = sys.argv[1]
            reservations = store.reservations_at(slot)
            print(f"\nSlot {slot}: {len(reservations)}/{store.limit_per_hour}")
        else:
            reservations = store.list()

        if not reservations:
            print(EMPTY_LIST_MESSAGE)
            return

        print(f"\n{'#':>3}  {'Hora':<6}  {'Inv.':>4}  Cliente")
        print("-" * 60)
        for i, r in enumerate(reservations, start=1):
            print(f"{i:>3}  {r.time:<6}  {r.num_of_guests:>4}  {r.client_name}")
            print(f"     {r.describe()}")
        print()
    finally:
        store.close()


if __name__ == "__main__":
    main()
