"""
Runtime settings read from the Lambda environment.

Deployment-time settings live in infrastructure.config.settings; these are the
values the function itself needs once it is running.
"""

from dataclasses import dataclass
import os
from typing import Optional


@dataclass
class RuntimeSettings:
    """Values injected by the API layer construct."""

    environment: str = "dev"
    database_url: Optional[str] = None
    db_secret_arn: Optional[str] = None
    jwt_secret: Optional[str] = None
    jwt_secret_arn: Optional[str] = None
    jwt_algorithm: str = "HS256"
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "RuntimeSettings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            database_url=os.environ.get("DATABASE_URL") or None,
            db_secret_arn=os.environ.get("DB_SECRET_ARN") or None,
            jwt_secret=os.environ.get("JWT_SECRET") or None,
            jwt_secret_arn=os.environ.get("JWT_SECRET_ARN") or None,
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )
