"""Method/path dispatch for the bookings API."""

import logging
from typing import Any

from registry.auth import require_auth
from registry.context import AppContext
from registry.errors import BookingRegistryError, ConfigurationError, ErrorCode, RouteNotFoundError
from registry.http import HttpRequest, json_response, preflight_response, text_response
from registry.services import create_booking, list_bookings
from registry.store import KeyValueStore

logger = logging.getLogger(__name__)

BOOKINGS_PATH = "/bookings"


def _require_store(ctx: AppContext) -> KeyValueStore:
    if ctx.store is None:
        logger.error("BOOKINGS_TABLE not configured")
        raise ConfigurationError(code=ErrorCode.STORAGE_UNAVAILABLE)
    return ctx.store


async def _list_bookings(request: HttpRequest, ctx: AppContext) -> dict[str, Any]:
    require_auth(request, ctx.config)
    bookings = await list_bookings(_require_store(ctx))
    return json_response([booking.to_wire() for booking in bookings])


async def _create_booking(request: HttpRequest, ctx: AppContext) -> dict[str, Any]:
    require_auth(request, ctx.config)
    store = _require_store(ctx)
    booking = await create_booking(request.json_body(), store)
    return json_response(booking.to_wire(), status_code=201)


async def dispatch(request: HttpRequest, ctx: AppContext) -> dict[str, Any]:
    if request.method == "OPTIONS":
        return preflight_response()

    if request.path == BOOKINGS_PATH:
        if request.method == "GET":
            return await _list_bookings(request, ctx)
        if request.method == "POST":
            return await _create_booking(request, ctx)

    raise RouteNotFoundError()


async def handle(request: HttpRequest, ctx: AppContext) -> dict[str, Any]:
    """Dispatch a request and render any failure as a plain-text response."""
    try:
        return await dispatch(request, ctx)
    except BookingRegistryError as e:
        if e.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, e.code.value)
        else:
            logger.info("%s %s rejected: %s", request.method, request.path, e.message)
        return text_response(e.message, e.status_code)
    except Exception:
        logger.exception("Unhandled error for %s %s", request.method, request.path)
        return text_response(BookingRegistryError().message, 500)
