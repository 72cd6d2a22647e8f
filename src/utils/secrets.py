"""Secrets Manager access for values the stack hands over by ARN."""

import boto3


def get_secret_string(secret_id: str) -> str:
    """Return the SecretString of a secret, given its ARN or name."""
    sm = boto3.client("secretsmanager")
    return sm.get_secret_value(SecretId=secret_id)["SecretString"]
