"""HTTP API handler for GET/POST /bookings."""

import asyncio
import logging
from typing import Any

from registry.clients import get_booking_store
from registry.config import get_config
from registry.context import AppContext
from registry.errors import BookingRegistryError
from registry.http import HttpRequest, preflight_response, text_response
from registry.router import handle

logger = logging.getLogger(__name__)


def _build_context() -> AppContext:
    config = get_config()
    return AppContext(config=config, store=get_booking_store(config))


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Serve one proxy event.

    Preflight is answered before configuration is read, so it never depends on
    secrets or storage. Setup failures are rendered as 500 with CORS headers
    instead of escaping to API Gateway.
    """
    try:
        request = HttpRequest.from_event(event)
        if request.method == "OPTIONS":
            return preflight_response()
        ctx = _build_context()
    except Exception:
        logger.exception("Failed to set up request context")
        return text_response(BookingRegistryError().message, 500)

    # Store calls are async so value fetches can fan out; asyncio.run() bridges
    # them into this sync Lambda handler.
    return asyncio.run(handle(request, ctx))
