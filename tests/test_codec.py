"""
Codec tests: wire format and rejection of malformed payloads.
"""

import json

import pytest

from dinebook.domain import codec
from dinebook.domain.errors import PersistenceCorrupt
from dinebook.domain.reservation import DishLine, Reservation


def test_encode_uses_wire_field_names():
    r = Reservation.create("Ana", "2", "18:00")
    r.assign_dishes([DishLine("Taco", 1)])
    assert json.loads(codec.encode([r])) == [
        {
            "clientName": "Ana",
            "numOfGuests": 2,
            "time": "18:00",
            "dishes": [{"name": "Taco", "quantity": 1}],
        }
    ]


def test_encode_keeps_non_ascii_readable():
    r = Reservation.create("Begoña", 1, "13:00")
    assert "Begoña" in codec.encode([r])


def test_decode_empty_list():
    assert codec.decode("[]") == []


def test_decode_record_without_dishes_is_a_draft_shape():
    [r] = codec.decode('[{"clientName": "Ana", "numOfGuests": 2, "time": "18:00"}]')
    assert r.dishes == []
    assert r.admitted is True


def test_decode_preserves_order():
    payload = json.dumps([
        {"clientName": name, "numOfGuests": 1, "time": "18:00", "dishes": []}
        for name in ("c", "a", "b")
    ])
    assert [r.client_name for r in codec.decode(payload)] == ["c", "a", "b"]


@pytest.mark.parametrize(
    "record",
    [
        {"numOfGuests": 2, "time": "18:00"},
        {"clientName": "", "numOfGuests": 2, "time": "18:00"},
        {"clientName": "Ana", "numOfGuests": "two", "time": "18:00"},
        {"clientName": "Ana", "numOfGuests": 0, "time": "18:00"},
        {"clientName": "Ana", "numOfGuests": 2, "time": 1800},
        {"clientName": "Ana", "numOfGuests": 2, "time": "18:00", "dishes": "Taco"},
        {"clientName": "Ana", "numOfGuests": 2, "time": "18:00", "dishes": [{"name": "Taco"}]},
        {"clientName": "Ana", "numOfGuests": 2, "time": "18:00",
         "dishes": [{"name": "Taco", "quantity": 0}]},
        {"clientName": "Ana", "numOfGuests": 1, "time": "18:00",
         "dishes": [{"name": "Taco", "quantity": 2}]},
    ],
)
def test_invalid_record_is_corrupt(record):
    with pytest.raises(PersistenceCorrupt) as exc_info:
        codec.decode(json.dumps([record]))
    assert "record #0" in str(exc_info.value)


def test_invalid_json_is_corrupt():
    with pytest.raises(PersistenceCorrupt):
        codec.decode("[{")


def test_non_list_is_corrupt():
    with pytest.raises(PersistenceCorrupt):
        codec.decode('{"reservations": []}')
