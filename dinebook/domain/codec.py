"""
JSON codec for the persisted reservation list.

Wire format (one JSON array, order = admission order):

    [{"clientName": "Ana", "numOfGuests": 2, "time": "18:00",
      "dishes": [{"name": "Taco", "quantity": 1}]}]

numOfGuests is written as an integer.  Older payloads saved straight from
the booking form carry it as a string ("2"); both are accepted on read.
"""

import json

from dinebook.domain.errors import PersistenceCorrupt
from dinebook.domain.reservation import DishLine, Reservation, parse_num_of_guests


def encode(reservations: list[Reservation]) -> str:
    return json.dumps(
        [
            {
                "clientName": r.client_name,
                "numOfGuests": r.num_of_guests,
                "time": r.time,
                "dishes": [{"name": d.name, "quantity": d.quantity} for d in r.dishes],
            }
            for r in reservations
        ],
        ensure_ascii=False,
    )


def decode(payload: str) -> list[Reservation]:
    """Parse a stored payload. Anything that is not a valid list raises PersistenceCorrupt."""
    try:
        records = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise PersistenceCorrupt(f"stored reservations are not valid JSON: {exc}") from exc

    if not isinstance(records, list):
        raise PersistenceCorrupt(
            f"stored reservations must be a list, got {type(records).__name__}"
        )

    reservations = []
    for index, record in enumerate(records):
        try:
            reservations.append(_decode_record(record))
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceCorrupt(f"record #{index} is invalid: {exc}") from exc
    return reservations


def _decode_record(record: dict) -> Reservation:
    if not isinstance(record, dict):
        raise TypeError(f"expected an object, got {type(record).__name__}")

    client_name = record["clientName"]
    time = record["time"]
    if not isinstance(client_name, str) or not client_name:
        raise ValueError("clientName must be a non-empty string")
    if not isinstance(time, str) or not time:
        raise ValueError("time must be a non-empty string")

    raw_dishes = record.get("dishes", [])
    if not isinstance(raw_dishes, list):
        raise TypeError("dishes must be a list")
    dishes = [DishLine(name=d["name"], quantity=d["quantity"]) for d in raw_dishes]

    num_of_guests = parse_num_of_guests(record["numOfGuests"])
    if sum(d.quantity for d in dishes) > num_of_guests:
        raise ValueError("more dishes than guests")

    return Reservation(
        client_name=client_name,
        num_of_guests=num_of_guests,
        time=time,
        dishes=dishes,
        admitted=True,
    )
