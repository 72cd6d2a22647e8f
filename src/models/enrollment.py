"""Enrollment, ticket and session records read during eligibility checks."""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class TicketStatus(str, Enum):
    """Ticket payment states as stored by the ticketing flow."""

    RESERVED = "RESERVED"
    PAID = "PAID"


class Enrollment(BaseModel):
    """A user's registration for the event."""

    id: int
    user_id: int
    name: Optional[str] = None


class TicketType(BaseModel):
    """Ticket category; decides whether hotel access is included."""

    id: int
    name: Optional[str] = None
    price: Optional[int] = None
    is_remote: bool
    includes_hotel: bool


class Ticket(BaseModel):
    """Admission record tied to one enrollment."""

    id: int
    enrollment_id: int
    ticket_type_id: int
    # Known states become TicketStatus; anything else is kept as the raw string.
    status: Union[TicketStatus, str] = Field(..., union_mode="left_to_right")
    ticket_type: TicketType

    @property
    def is_reserved(self) -> bool:
        return self.status == TicketStatus.RESERVED


class Session(BaseModel):
    """Login session issued alongside a JWT."""

    id: int
    user_id: int
    token: str
    created_at: Optional[datetime] = None
