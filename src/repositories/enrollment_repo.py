"""Enrollment and ticket lookups used by the eligibility check."""

from typing import Optional

from models.enrollment import Enrollment, Ticket, TicketType
from repositories.postgres_repo import PostgresRepository


class EnrollmentRepository(PostgresRepository):
    """Read-only access to enrollments and tickets."""

    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        row = await self.fetch_one(
            """
            SELECT id, "userId" AS user_id, name
            FROM "Enrollment"
            WHERE "userId" = :user_id
            """,
            {"user_id": user_id},
        )
        return Enrollment.model_validate(row) if row else None

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        """Fetch the enrollment's ticket together with its type."""
        row = await self.fetch_one(
            """
            SELECT t.id, t."enrollmentId" AS enrollment_id,
                   t."ticketTypeId" AS ticket_type_id, t.status,
                   tt.name AS type_name, tt.price AS type_price,
                   tt."isRemote" AS is_remote, tt."includesHotel" AS includes_hotel
            FROM "Ticket" t
            JOIN "TicketType" tt ON tt.id = t."ticketTypeId"
            WHERE t."enrollmentId" = :enrollment_id
            """,
            {"enrollment_id": enrollment_id},
        )
        if not row:
            return None
        return Ticket(
            id=row["id"],
            enrollment_id=row["enrollment_id"],
            ticket_type_id=row["ticket_type_id"],
            status=str(row["status"]),
            ticket_type=TicketType(
                id=row["ticket_type_id"],
                name=row.get("type_name"),
                price=row.get("type_price"),
                is_remote=row["is_remote"],
                includes_hotel=row["includes_hotel"],
            ),
        )
