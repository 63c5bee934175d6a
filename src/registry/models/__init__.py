"""
Pydantic models for the booking registry.
"""

from registry.models.booking import REQUIRED_FIELDS, UNTRIMMED_FIELDS, Booking

__all__ = ["Booking", "REQUIRED_FIELDS", "UNTRIMMED_FIELDS"]
