"""
Reservation Pydantic Schemas.

WHAT: Request/Response records for the rental service.

HOW: Defines schemas for:
- Creating a reservation
- Returning a book
- Reading a reservation back with its fees and status
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from library_rental.models.reservation import ReservationStatus


# ============================================================================
# Request Schemas
# ============================================================================


class ReservationCreateRequest(BaseModel):
    """
    Request schema for renting a book.

    WHAT: Who rents which book, from when, for how long.
    """

    user_id: int = Field(..., description="Renting user ID")
    book_external_id: int = Field(..., description="Catalogue ID of the book")
    rental_days: int = Field(..., ge=1, description="Number of days rented")
    start_date: date = Field(..., description="First day of the rental")


class ReturnBookRequest(BaseModel):
    """Request schema for returning a rented book."""

    return_date: date = Field(..., description="Day the book came back")


# ============================================================================
# Response Schemas
# ============================================================================


class ReservationResponse(BaseModel):
    """
    Response schema for a single reservation.

    WHAT: Reservation fields plus the user and book display attributes.
    """

    id: int = Field(..., description="Reservation ID")

    # Parties
    user_id: Optional[int] = Field(None, description="User ID")
    user_name: Optional[str] = Field(None, description="User name")
    book_external_id: Optional[int] = Field(None, description="Catalogue ID of the book")
    book_title: Optional[str] = Field(None, description="Book title")

    # Rental window
    rental_days: int = Field(..., description="Number of days rented")
    start_date: date = Field(..., description="First day of the rental")
    expected_return_date: date = Field(..., description="Day the book is due")
    actual_return_date: Optional[date] = Field(None, description="Day the book came back")

    # Amounts
    daily_rate: Optional[Decimal] = Field(None, description="Price per day")
    total_fee: Decimal = Field(..., description="Rental fee")
    late_fee: Decimal = Field(default=Decimal("0"), description="Late return fee")

    status: ReservationStatus = Field(..., description="Reservation status")
    created_at: Optional[datetime] = Field(None, description="Created timestamp")

    class Config:
        from_attributes = True
