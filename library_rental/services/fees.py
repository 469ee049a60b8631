"""
Rental fee calculation.

WHAT: Pure functions for the rental and late fees charged on a reservation.

HOW: All arithmetic is done on Decimal and rounded once, at the end, to
cents with ROUND_HALF_UP. A missing rate or day count produces a zero fee
rather than an error.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


# Late fee charged per day, as a fraction of the book's daily price
LATE_FEE_PERCENTAGE = Decimal("0.15")

CENTS = Decimal("0.01")
ZERO = Decimal("0")


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_total_fee(daily_rate: Optional[Decimal], rental_days: Optional[int]) -> Decimal:
    """
    Calculate the fee for a rental period.

    Args:
        daily_rate: Price per day
        rental_days: Number of days rented

    Returns:
        daily_rate * rental_days rounded half-up to cents, or 0 if either is missing

    Example:
        >>> calculate_total_fee(Decimal("15.99"), 7)
        Decimal('111.93')
    """
    if daily_rate is None or rental_days is None:
        return ZERO
    return _to_cents(Decimal(daily_rate) * Decimal(rental_days))


def calculate_late_fee(book_price: Optional[Decimal], days_late: int) -> Decimal:
    """
    Calculate the penalty for returning a book late.

    Args:
        book_price: Daily price of the book
        days_late: Days past the expected return date

    Returns:
        book_price * 0.15 * days_late rounded half-up to cents,
        or 0 if the price is missing or the book is not late

    Example:
        >>> calculate_late_fee(Decimal("15.99"), 3)
        Decimal('7.20')
    """
    if book_price is None or days_late <= 0:
        return ZERO
    per_day = Decimal(book_price) * LATE_FEE_PERCENTAGE
    return _to_cents(per_day * Decimal(days_late))


def days_between(start: date, end: date) -> int:
    """Signed number of days from start to end."""
    return (end - start).days
