"""Pydantic models for persisted records and API payloads."""

from models.enrollment import Enrollment, Session, Ticket, TicketStatus, TicketType  # noqa: F401
from models.hotel import Hotel, HotelSummary, HotelWithRooms, Room, RoomView  # noqa: F401
