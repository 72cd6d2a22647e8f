"""
Hotel eligibility check.

A user may browse hotels only with an enrollment, a ticket for it, and a
ticket that is paid, in person and includes lodging. Existence checks run
before entitlement checks so a user without a ticket sees 404, never 402.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from models.enrollment import Enrollment, Ticket
from utils.error_handling import NotFoundError, PaymentRequiredError
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class EligibilityResult:
    """Records that satisfied the check, handed back for reuse."""

    enrollment: Enrollment
    ticket: Ticket


def disqualification_reason(ticket: Ticket) -> Optional[str]:
    """Return why the ticket does not grant hotel access, or None."""
    if ticket.is_reserved:
        return "ticket_not_paid"
    if ticket.ticket_type.is_remote:
        return "ticket_is_remote"
    if not ticket.ticket_type.includes_hotel:
        return "hotel_not_included"
    return None


class EligibilityService:
    """Decides whether a user may view hotel data."""

    def __init__(self, enrollment_repo):
        self.enrollment_repo = enrollment_repo

    async def validate(self, user_id: int) -> EligibilityResult:
        enrollment = await self.enrollment_repo.find_enrollment_by_user(user_id)
        if not enrollment:
            raise NotFoundError("Enrollment not found")

        ticket = await self.enrollment_repo.find_ticket_by_enrollment(enrollment.id)
        if not ticket:
            raise NotFoundError("Ticket not found")

        reason = disqualification_reason(ticket)
        if reason:
            logger.info(
                "Hotel access denied",
                extra={"user_id": user_id, "ticket_id": ticket.id, "reason": reason},
            )
            raise PaymentRequiredError()

        return EligibilityResult(enrollment=enrollment, ticket=ticket)
