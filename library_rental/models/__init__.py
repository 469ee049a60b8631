"""
Database models package.

WHY: Importing every model here registers them all on Base.metadata,
which is what create_all needs to build the schema.
"""

from library_rental.models.base import Base, TimestampMixin, PrimaryKeyMixin
from library_rental.models.user import User
from library_rental.models.book import Book
from library_rental.models.reservation import (
    Reservation,
    ReservationStatus,
    TERMINAL_STATUSES,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "PrimaryKeyMixin",
    "User",
    "Book",
    "Reservation",
    "ReservationStatus",
    "TERMINAL_STATUSES",
]
