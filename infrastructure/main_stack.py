"""
Main CDK Stack for the event hotel catalog API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct

from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class EventHotelsStack(Stack):
    """Main stack wiring all constructs together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        Tags.of(self).add("Project", "event-hotels")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Network + database.
        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
            db_instance_class=settings.db_instance_class,
            db_allocated_storage=settings.db_allocated_storage,
        )

        # 2) JWT signing key shared with the service that issues sessions.
        jwt_secret = secretsmanager.Secret.from_secret_name_v2(
            self, "JwtSecret", settings.jwt_secret_name
        )

        # 3) API layer (single Lambda).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            vpc=data_construct.vpc,
            db_secret_arn=data_construct.db_secret.secret_arn,
            jwt_secret_arn=jwt_secret.secret_arn,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
            log_level=settings.log_level,
        )

        data_construct.db_secret.grant_read(api_construct.main_lambda)
        jwt_secret.grant_read(api_construct.main_lambda)
        data_construct.db_instance.connections.allow_default_port_from(api_construct.main_lambda)

        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "DatabaseEndpoint", value=data_construct.db_instance.db_instance_endpoint_address)
