"""
Business services for the booking registry.
"""

from registry.services.bookings import (
    BOOKING_KEY_PREFIX,
    build_booking,
    collation_key,
    create_booking,
    iter_key_pages,
    list_bookings,
    read_all_bookings,
    storage_key,
)

__all__ = [
    "BOOKING_KEY_PREFIX",
    "build_booking",
    "collation_key",
    "create_booking",
    "iter_key_pages",
    "list_bookings",
    "read_all_bookings",
    "storage_key",
]
