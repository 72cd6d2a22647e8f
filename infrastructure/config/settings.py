"""
Environment-specific configuration settings.

Small defaults for development; production bumps the database and Lambda.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region

    # Database Configuration
    db_instance_class: str = "t3.micro"  # Free tier eligible
    db_allocated_storage: int = 20  # Minimum GB

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 10
    log_level: str = "INFO"

    # Name of the Secrets Manager secret holding the JWT signing key.
    # It is shared with the service that issues tokens.
    jwt_secret_name: str = "event-platform/jwt-secret"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", cls.aws_region)
        jwt_secret_name = os.environ.get("JWT_SECRET_NAME", cls.jwt_secret_name)

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                db_instance_class="t3.small",
                db_allocated_storage=50,
                lambda_memory_mb=512,
                lambda_timeout_seconds=15,
                log_level="WARNING",
                jwt_secret_name=jwt_secret_name,
            )

        return cls(environment=env, aws_region=region, jwt_secret_name=jwt_secret_name)
