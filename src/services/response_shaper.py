"""Maps persisted hotel records to the API response shape."""

from datetime import datetime, timezone
from typing import Iterable, List

from models.hotel import Hotel, HotelSummary, HotelWithRooms, Room, RoomView


def to_iso_string(value: datetime) -> str:
    """Render like JavaScript's Date.toISOString(): UTC, milliseconds, Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def shape_room(room: Room) -> RoomView:
    return RoomView(
        id=room.id,
        name=room.name,
        capacity=room.capacity,
        hotelId=room.hotel_id,
        createdAt=to_iso_string(room.created_at),
        updatedAt=to_iso_string(room.updated_at),
    )


def shape_hotel(hotel: Hotel) -> HotelSummary:
    return HotelSummary(
        id=hotel.id,
        name=hotel.name,
        image=hotel.image,
        createdAt=to_iso_string(hotel.created_at),
        updatedAt=to_iso_string(hotel.updated_at),
    )


def shape_hotels(hotels: Iterable[Hotel]) -> List[HotelSummary]:
    return [shape_hotel(hotel) for hotel in hotels]


def shape_hotel_with_rooms(hotel: Hotel) -> HotelWithRooms:
    """Single-hotel form: the summary fields plus a nested rooms list."""
    summary = shape_hotel(hotel)
    return HotelWithRooms(
        **summary.model_dump(),
        rooms=[shape_room(room) for room in hotel.rooms],
    )
