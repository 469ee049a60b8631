"""
Reservation Service.

WHAT: Business logic for renting and returning books.

WHY: The service layer:
1. Checks that the user, the book and a free copy exist before renting
2. Charges the rental fee up front and the late fee on return
3. Keeps the book's available copies in step with open reservations
4. Maps reservations to response records for callers

HOW: Orchestrates ReservationDAO, UserService and BookService on one
session. Nothing here commits; the caller owns the transaction.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from library_rental.core.exceptions import AppException
from library_rental.dao.book import BookDAO
from library_rental.dao.reservation import ReservationDAO
from library_rental.models.reservation import Reservation, ReservationStatus
from library_rental.schemas.reservation import (
    ReservationCreateRequest,
    ReservationResponse,
    ReturnBookRequest,
)
from library_rental.services.book_service import BookService
from library_rental.services.fees import (
    ZERO,
    calculate_late_fee,
    calculate_total_fee,
    days_between,
)
from library_rental.services.user_service import UserService

logger = logging.getLogger(__name__)


class ReservationService:
    """
    Service for book reservations.

    WHAT: Creates reservations, processes returns and answers queries.

    HOW: A reservation starts ACTIVE and is closed exactly once by
    return_book, which moves it to RETURNED or OVERDUE.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize ReservationService.

        Args:
            session: Async database session
        """
        self.session = session
        self.reservation_dao = ReservationDAO(session)
        self.book_dao = BookDAO(session)
        self.book_service = BookService(session)
        self.user_service = UserService(session)

    async def create_reservation(self, request: ReservationCreateRequest) -> ReservationResponse:
        """
        Rent a book to a user.

        WHAT: Persists an ACTIVE reservation and takes one copy out of
        circulation.

        Args:
            request: User, book, start date and rental days

        Returns:
            The created reservation

        Raises:
            AppException: If the user or book doesn't exist, or no copy is available
        """
        user = await self.user_service.get_user_entity(request.user_id)

        book = await self.book_dao.get_by_external_id(request.book_external_id)
        if not book:
            raise AppException(
                message=f"Book not found with external ID: {request.book_external_id}",
                book_external_id=request.book_external_id,
            )

        if not book.is_available:
            logger.warning(
                f"Reservation rejected, no copies left of book {book.external_id}",
                extra={"book_external_id": book.external_id, "user_id": user.id},
            )
            raise AppException(
                message="No copies of this book are available to reserve right now",
                book_external_id=book.external_id,
            )

        reservation = await self.reservation_dao.create(
            user=user,
            book=book,
            rental_days=request.rental_days,
            start_date=request.start_date,
            expected_return_date=request.start_date + timedelta(days=request.rental_days),
            daily_rate=book.price,
            total_fee=calculate_total_fee(book.price, request.rental_days),
            late_fee=ZERO,
            status=ReservationStatus.ACTIVE.value,
        )

        await self.book_service.decrease_available_quantity(book.external_id)

        logger.info(
            f"Created reservation {reservation.id} for book {book.external_id}",
            extra={
                "reservation_id": reservation.id,
                "user_id": user.id,
                "book_external_id": book.external_id,
            },
        )
        return self.to_response(reservation)

    async def return_book(
        self,
        reservation_id: int,
        request: ReturnBookRequest,
    ) -> ReservationResponse:
        """
        Close a reservation when the book comes back.

        WHAT: Records the return date, charges a late fee when the book
        is returned after the expected date, and puts the copy back.

        Args:
            reservation_id: Reservation ID
            request: Actual return date

        Returns:
            The closed reservation

        Raises:
            AppException: If the reservation doesn't exist or is no longer active
        """
        reservation = await self.reservation_dao.get_by_id(reservation_id)
        if not reservation:
            raise AppException(
                message=f"Reservation not found with ID: {reservation_id}",
                reservation_id=reservation_id,
            )

        if reservation.status != ReservationStatus.ACTIVE:
            logger.warning(
                f"Return rejected, reservation {reservation_id} is {reservation.status}",
                extra={"reservation_id": reservation_id},
            )
            raise AppException(
                message="This reservation has already been returned",
                reservation_id=reservation_id,
                status=reservation.status,
            )

        return_date = request.return_date
        reservation.actual_return_date = return_date

        if return_date > reservation.expected_return_date:
            days_late = days_between(reservation.expected_return_date, return_date)
            reservation.late_fee = calculate_late_fee(reservation.book.price, days_late)
            reservation.status = ReservationStatus.OVERDUE.value
        else:
            reservation.late_fee = ZERO
            reservation.status = ReservationStatus.RETURNED.value

        await self.book_service.increase_available_quantity(reservation.book.external_id)

        reservation = await self.reservation_dao.save(reservation)

        logger.info(
            f"Reservation {reservation.id} returned as {reservation.status}",
            extra={
                "reservation_id": reservation.id,
                "late_fee": str(reservation.late_fee),
            },
        )
        return self.to_response(reservation)

    # ========================================================================
    # Queries
    # ========================================================================

    async def get_reservation_by_id(self, reservation_id: int) -> ReservationResponse:
        """
        Get a reservation by ID.

        Raises:
            AppException: If the reservation doesn't exist
        """
        reservation = await self.reservation_dao.get_by_id(reservation_id)
        if not reservation:
            raise AppException(
                message=f"Reservation not found with ID: {reservation_id}",
                reservation_id=reservation_id,
            )
        return self.to_response(reservation)

    async def get_all_reservations(self) -> List[ReservationResponse]:
        """Get every reservation, oldest first."""
        reservations = await self.reservation_dao.get_all()
        return [self.to_response(r) for r in reservations]

    async def get_reservations_by_user_id(self, user_id: int) -> List[ReservationResponse]:
        """Get every reservation made by a user."""
        reservations = await self.reservation_dao.get_by_user(user_id)
        return [self.to_response(r) for r in reservations]

    async def get_reservations_by_status(
        self, status: ReservationStatus
    ) -> List[ReservationResponse]:
        """Get reservations in a given status."""
        reservations = await self.reservation_dao.get_by_status(status)
        return [self.to_response(r) for r in reservations]

    async def get_active_reservations(self) -> List[ReservationResponse]:
        """Get reservations whose book is still out."""
        return await self.get_reservations_by_status(ReservationStatus.ACTIVE)

    async def get_overdue_reservations(
        self, as_of: Optional[date] = None
    ) -> List[ReservationResponse]:
        """
        Get active reservations past their expected return date.

        Args:
            as_of: Reference date (defaults to today)

        Returns:
            Overdue reservations, earliest due date first
        """
        reservations = await self.reservation_dao.get_overdue(as_of or date.today())
        return [self.to_response(r) for r in reservations]

    @staticmethod
    def to_response(reservation: Reservation) -> ReservationResponse:
        """
        Convert a Reservation model to its response record.

        User and book attributes are left empty when the relationship
        isn't set.
        """
        return ReservationResponse(
            id=reservation.id,
            user_id=reservation.user.id if reservation.user else None,
            user_name=reservation.user.name if reservation.user else None,
            book_external_id=reservation.book.external_id if reservation.book else None,
            book_title=reservation.book.title if reservation.book else None,
            rental_days=reservation.rental_days,
            start_date=reservation.start_date,
            expected_return_date=reservation.expected_return_date,
            actual_return_date=reservation.actual_return_date,
            daily_rate=reservation.daily_rate,
            total_fee=reservation.total_fee,
            late_fee=reservation.late_fee,
            status=ReservationStatus(reservation.status),
            created_at=reservation.created_at,
        )
