"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import hotels` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")

from models.enrollment import Enrollment, Session, Ticket, TicketType  # noqa: E402
from models.hotel import Hotel, Room  # noqa: E402

CREATED_AT = datetime(2024, 3, 1, 12, 30, 15, 123000, tzinfo=timezone.utc)
UPDATED_AT = datetime(2024, 3, 2, 8, 0, 0, 456000, tzinfo=timezone.utc)


class StubEnrollmentRepository:
    """In-memory stand-in for EnrollmentRepository."""

    def __init__(self, enrollments: Optional[Dict[int, Enrollment]] = None, tickets=None):
        self.enrollments = enrollments or {}
        self.tickets: Dict[int, Ticket] = tickets or {}
        self.calls: List[str] = []

    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        self.calls.append("enrollment")
        return self.enrollments.get(user_id)

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        self.calls.append("ticket")
        return self.tickets.get(enrollment_id)


class StubCatalogRepository:
    """In-memory stand-in for CatalogRepository."""

    def __init__(self, hotels: Optional[List[Hotel]] = None):
        self.hotels = hotels or []

    async def list_hotels(self) -> List[Hotel]:
        return [hotel.model_copy(update={"rooms": []}) for hotel in self.hotels]

    async def find_hotel_with_rooms(self, hotel_id: int) -> Optional[Hotel]:
        return next((hotel for hotel in self.hotels if hotel.id == hotel_id), None)


class StubSessionRepository:
    """In-memory stand-in for SessionRepository."""

    def __init__(self, sessions: Optional[Dict[str, Session]] = None):
        self.sessions = sessions or {}

    async def find_session_by_token(self, token: str) -> Optional[Session]:
        return self.sessions.get(token)


def make_ticket(
    status: str = "PAID",
    is_remote: bool = False,
    includes_hotel: bool = True,
    enrollment_id: int = 10,
) -> Ticket:
    return Ticket(
        id=100,
        enrollment_id=enrollment_id,
        ticket_type_id=7,
        status=status,
        ticket_type=TicketType(
            id=7, name="Presencial", price=600, is_remote=is_remote, includes_hotel=includes_hotel
        ),
    )


def make_hotel(hotel_id: int = 1, rooms: int = 1) -> Hotel:
    return Hotel(
        id=hotel_id,
        name=f"Hotel {hotel_id}",
        image=f"https://img.example.com/{hotel_id}.png",
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
        rooms=[
            Room(
                id=hotel_id * 100 + n,
                name=f"Room {n}",
                capacity=2,
                hotel_id=hotel_id,
                created_at=CREATED_AT,
                updated_at=UPDATED_AT,
            )
            for n in range(1, rooms + 1)
        ],
    )


@pytest.fixture
def enrollment() -> Enrollment:
    return Enrollment(id=10, user_id=1, name="Ana Lima")


@pytest.fixture
def eligible_enrollment_repo(enrollment) -> StubEnrollmentRepository:
    return StubEnrollmentRepository({1: enrollment}, {10: make_ticket()})
