"""Session lookups for bearer-token authentication."""

from typing import Optional

from models.enrollment import Session
from repositories.postgres_repo import PostgresRepository


class SessionRepository(PostgresRepository):
    """Read-only access to login sessions."""

    async def find_session_by_token(self, token: str) -> Optional[Session]:
        row = await self.fetch_one(
            """
            SELECT id, "userId" AS user_id, token, "createdAt" AS created_at
            FROM "Session"
            WHERE token = :token
            """,
            {"token": token},
        )
        return Session.model_validate(row) if row else None
