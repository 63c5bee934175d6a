"""Static shared-secret bearer token check."""

import hmac
import logging

from registry.config import Config
from registry.errors import AuthenticationError, ConfigurationError, ErrorCode
from registry.http import HttpRequest

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an exact ``Bearer <token>`` header, or "" for anything else."""
    header = authorization or ""
    if not header.startswith(BEARER_PREFIX):
        return ""
    return header[len(BEARER_PREFIX) :]


def require_auth(request: HttpRequest, config: Config) -> None:
    if not config.access_token:
        logger.error("ACCESS_TOKEN not configured")
        raise ConfigurationError(code=ErrorCode.SERVER_MISCONFIGURED)

    token = extract_bearer_token(request.header("Authorization"))
    if not hmac.compare_digest(token.encode(), config.access_token.encode()):
        logger.warning("Rejected %s %s: invalid bearer token", request.method, request.path)
        raise AuthenticationError()
