"""PostgreSQL repository base using SQLAlchemy Core on an async engine."""

from __future__ import annotations

import json
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from utils.logging_config import get_logger
from utils.secrets import get_secret_string
from utils.settings import RuntimeSettings

logger = get_logger(__name__)

# Engine is reused across warm invocations.
_engine: Optional[AsyncEngine] = None


class DatabaseNotConfiguredError(RuntimeError):
    """Raised when neither DATABASE_URL nor DB_SECRET_ARN yields a URL."""


def get_db_engine(settings: Optional[RuntimeSettings] = None) -> AsyncEngine:
    """Get or create the async engine.

    Every invocation drives its own event loop via asyncio.run, so pooled
    connections could not be shared between them; NullPool opens a fresh
    connection per checkout instead.
    """
    global _engine
    if _engine is None:
        settings = settings or RuntimeSettings.from_environment()
        db_url = settings.database_url
        if not db_url and settings.db_secret_arn:
            db_url = _secret_to_db_url(settings.db_secret_arn)
        if not db_url:
            raise DatabaseNotConfiguredError("DATABASE_URL or DB_SECRET_ARN must be set")
        _engine = create_async_engine(db_url, poolclass=NullPool)
    return _engine


def _secret_to_db_url(secret_arn: str) -> Optional[str]:
    """Build a SQLAlchemy URL from an RDS secret."""
    secret = json.loads(get_secret_string(secret_arn))
    host = secret.get("host")
    port = secret.get("port", 5432)
    username = secret.get("username")
    password = secret.get("password")
    dbname = secret.get("dbname", "postgres")
    if not (host and username and password):
        logger.warning("DB secret is missing connection fields", extra={"secret_arn": secret_arn})
        return None
    return f"postgresql+asyncpg://{username}:{password}@{host}:{port}/{dbname}"


class PostgresRepository:
    """Thin wrapper to keep SQL organized and parameterized."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def fetch_one(self, query: str, params: dict) -> Optional[dict]:
        """Execute a SELECT and return one row as dict."""
        stmt = text(query)
        async with self.engine.connect() as conn:
            result = await conn.execute(stmt, params)
            row = result.fetchone()
            return dict(row._mapping) if row else None

    async def fetch_all(self, query: str, params: Optional[dict] = None) -> List[dict]:
        """Execute a SELECT and return every row as dict."""
        stmt = text(query)
        async with self.engine.connect() as conn:
            result = await conn.execute(stmt, params or {})
            return [dict(row._mapping) for row in result.fetchall()]
