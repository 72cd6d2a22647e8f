"""Hotel catalog records and their outward API views."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class Room(BaseModel):
    """Persisted room row."""

    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class Hotel(BaseModel):
    """Persisted hotel row, optionally carrying its rooms."""

    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime
    rooms: List[Room] = Field(default_factory=list)


class RoomView(BaseModel):
    """Room as returned to API consumers. Field order is part of the contract."""

    id: int
    name: str
    capacity: int
    hotelId: int
    createdAt: str
    updatedAt: str


class HotelSummary(BaseModel):
    """Hotel as listed by GET /hotels."""

    id: int
    name: str
    image: str
    createdAt: str
    updatedAt: str


class HotelWithRooms(HotelSummary):
    """Hotel as returned by GET /hotels/{hotelId}."""

    rooms: List[RoomView] = Field(default_factory=list)
