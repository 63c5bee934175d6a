"""Booking creation and listing on top of a key-value store."""

import asyncio
import logging
import unicodedata
from collections.abc import AsyncIterator
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from registry.errors import MissingFieldError
from registry.models import REQUIRED_FIELDS, UNTRIMMED_FIELDS, Booking
from registry.store import KeyValueStore

logger = logging.getLogger(__name__)

BOOKING_KEY_PREFIX = "booking:"


def storage_key(booking_id: str) -> str:
    return f"{BOOKING_KEY_PREFIX}{booking_id}"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_booking(payload: Any) -> Booking:
    """Validate a decoded request body and build a new Booking from it.

    Raises MissingFieldError for the first required field that is absent,
    not a string, or blank.
    """
    fields = payload if isinstance(payload, dict) else {}

    values: dict[str, str] = {}
    for field in REQUIRED_FIELDS:
        value = fields.get(field)
        if not isinstance(value, str) or not value.strip():
            raise MissingFieldError(field)
        values[field] = value if field in UNTRIMMED_FIELDS else value.strip()

    notes = fields.get("notes")
    return Booking.model_validate(
        {
            "id": str(uuid4()),
            **values,
            "notes": notes.strip() if isinstance(notes, str) else "",
            "createdAt": _utc_timestamp(),
        }
    )


async def create_booking(payload: Any, store: KeyValueStore) -> Booking:
    booking = build_booking(payload)
    await store.put(storage_key(booking.id), booking.model_dump_json(by_alias=True))
    logger.info("Created booking %s for %s %s", booking.id, booking.date, booking.time)
    return booking


async def iter_key_pages(store: KeyValueStore, prefix: str) -> AsyncIterator[list[str]]:
    """Yield pages of keys under ``prefix`` until the store stops returning a cursor."""
    cursor = None
    while True:
        page = await store.list(prefix, cursor)
        yield page.keys
        cursor = page.cursor
        if not cursor:
            break


async def list_booking_keys(store: KeyValueStore) -> list[str]:
    return [key async for page in iter_key_pages(store, BOOKING_KEY_PREFIX) for key in page]


def _decode_booking(key: str, result: str | None | BaseException) -> Booking | None:
    if isinstance(result, BaseException):
        logger.warning("Dropping %s: fetch failed: %s", key, result)
        return None
    if not result:
        logger.warning("Dropping %s: no value stored", key)
        return None
    try:
        return Booking.model_validate_json(result)
    except PydanticValidationError:
        logger.warning("Dropping %s: stored value is not a valid booking", key)
        return None


async def read_all_bookings(store: KeyValueStore) -> list[Booking]:
    """Fetch every stored booking concurrently, skipping missing or corrupt records."""
    keys = await list_booking_keys(store)
    if not keys:
        return []

    results = await asyncio.gather(*(store.get(key) for key in keys), return_exceptions=True)

    bookings = []
    for key, result in zip(keys, results):
        booking = _decode_booking(key, result)
        if booking is not None:
            bookings.append(booking)
    return bookings


def collation_key(value: str) -> tuple[str, str, str]:
    """Locale-style string key: accents and case only break ties, lowercase sorts first."""
    folded = value.casefold()
    base = "".join(c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c))
    return base, folded, value.swapcase()


def sort_by_schedule(bookings: list[Booking]) -> list[Booking]:
    # String collation of "<date> <time>"; no calendar parsing.
    return sorted(bookings, key=lambda booking: collation_key(booking.schedule_key))


async def list_bookings(store: KeyValueStore) -> list[Booking]:
    bookings = sort_by_schedule(await read_all_bookings(store))
    logger.info("Listed %d bookings", len(bookings))
    return bookings
