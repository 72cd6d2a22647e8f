"""Response shaping tests: field order and ISO-8601 timestamps."""

from datetime import datetime, timedelta, timezone

from conftest import make_hotel
from services.response_shaper import (
    shape_hotel,
    shape_hotel_with_rooms,
    shape_hotels,
    to_iso_string,
)


def test_to_iso_string_matches_javascript_format():
    value = datetime(2024, 3, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)
    assert to_iso_string(value) == "2024-03-01T12:30:15.123Z"


def test_to_iso_string_converts_to_utc():
    value = datetime(2024, 3, 1, 9, 0, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert to_iso_string(value) == "2024-03-01T12:00:00.000Z"


def test_to_iso_string_treats_naive_as_utc():
    assert to_iso_string(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"


def test_hotel_summary_fields_and_order():
    body = shape_hotel(make_hotel(1)).model_dump()

    assert list(body) == ["id", "name", "image", "createdAt", "updatedAt"]
    assert body["createdAt"] == "2024-03-01T12:30:15.123Z"
    assert body["updatedAt"] == "2024-03-02T08:00:00.456Z"


def test_shape_hotels_keeps_order():
    summaries = shape_hotels([make_hotel(2), make_hotel(1)])
    assert [s.id for s in summaries] == [2, 1]


def test_hotel_with_rooms_shape():
    body = shape_hotel_with_rooms(make_hotel(1, rooms=1)).model_dump()

    assert list(body) == ["id", "name", "image", "createdAt", "updatedAt", "rooms"]
    assert body["rooms"] == [
        {
            "id": 101,
            "name": "Room 1",
            "capacity": 2,
            "hotelId": 1,
            "createdAt": "2024-03-01T12:30:15.123Z",
            "updatedAt": "2024-03-02T08:00:00.456Z",
        }
    ]


def test_hotel_without_rooms_has_empty_list():
    body = shape_hotel_with_rooms(make_hotel(1, rooms=0)).model_dump()
    assert body["rooms"] == []
