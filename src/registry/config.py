from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_access_token: str | None = None


def _resolve_access_token() -> str:
    """Fetch the shared access token, from Secrets Manager when deployed, with caching."""
    global _cached_access_token
    if _cached_access_token is not None:
        return _cached_access_token

    # Local dev: use env var directly
    direct = environ.get("ACCESS_TOKEN", "")
    if direct:
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("ACCESS_TOKEN_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager", region_name=environ.get("AWS_REGION", "us-east-1"))
    _cached_access_token = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_access_token


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    bookings_table: str = ""
    list_page_size: int = 1000
    access_token: str = ""


def _reset_config() -> None:
    """Reset cached secrets, for testing only."""
    global _cached_access_token
    _cached_access_token = None


def get_config() -> Config:
    """Build the configuration for one invocation from the environment.

    Only the Secrets Manager lookup is cached; the config itself is a fresh
    immutable value handed down to the request handlers.
    """
    return Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        bookings_table=environ.get("BOOKINGS_TABLE", ""),
        list_page_size=int(environ.get("LIST_PAGE_SIZE", "1000")),
        access_token=_resolve_access_token(),
    )
