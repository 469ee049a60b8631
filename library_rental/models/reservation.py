"""
Reservation models.

WHAT: SQLAlchemy model for a rental of one book by one user.

WHY: A reservation records the rental window and every amount charged,
so fees can be read back without recomputing them from the book's
current price.

HOW: Status moves from ACTIVE to RETURNED or OVERDUE on the single
return event and never changes again.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, TYPE_CHECKING

from sqlalchemy import (
    Integer,
    String,
    DateTime,
    Date,
    ForeignKey,
    Numeric,
    Index,
    CheckConstraint,
)
from sqlalchemy.orm import relationship, Mapped, mapped_column
from sqlalchemy.sql import func

from library_rental.models.base import Base

if TYPE_CHECKING:
    from library_rental.models.user import User
    from library_rental.models.book import Book


class ReservationStatus(str, Enum):
    """
    Reservation status.

    - ACTIVE: Book is out with the user
    - RETURNED: Book came back on or before the expected date
    - OVERDUE: Book came back late and a late fee was charged
    """

    ACTIVE = "ACTIVE"
    RETURNED = "RETURNED"
    OVERDUE = "OVERDUE"


TERMINAL_STATUSES = (ReservationStatus.RETURNED, ReservationStatus.OVERDUE)


class Reservation(Base):
    """Rental of a book by a user for a number of days."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False
    )
    book_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("books.id"), nullable=False
    )

    # Rental window
    rental_days: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    expected_return_date: Mapped[date] = mapped_column(Date, nullable=False)
    actual_return_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Amounts
    daily_rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    total_fee: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), default=Decimal("0"), nullable=False
    )
    late_fee: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), default=Decimal("0"), nullable=False
    )

    status: Mapped[ReservationStatus] = mapped_column(
        String(20), default=ReservationStatus.ACTIVE.value, nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    # Relationships are loaded eagerly; lazy loads are not possible on an
    # AsyncSession.
    user: Mapped["User"] = relationship("User", lazy="selectin")
    book: Mapped["Book"] = relationship("Book", lazy="selectin")

    __table_args__ = (
        Index("ix_reservations_user_id", "user_id"),
        Index("ix_reservations_book_id", "book_id"),
        Index("ix_reservations_status", "status"),
        Index("ix_reservations_expected_return_date", "expected_return_date"),
        CheckConstraint(
            "rental_days > 0",
            name="ck_reservations_positive_rental_days",
        ),
        CheckConstraint(
            "expected_return_date >= start_date",
            name="ck_reservations_valid_window",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, "
            f"user_id={self.user_id}, "
            f"book_id={self.book_id}, "
            f"status={self.status})>"
        )

    @property
    def is_active(self) -> bool:
        """Check if the book has not been returned yet."""
        return self.status == ReservationStatus.ACTIVE

    @property
    def is_returned(self) -> bool:
        """Check if the reservation reached a terminal status."""
        return self.status in TERMINAL_STATUSES
