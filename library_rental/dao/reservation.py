"""
Reservation Data Access Object (DAO).

WHAT: Database operations for the Reservation model.

HOW: Extends BaseDAO with the lookups the rental service exposes:
by user, by status and still-active reservations past their due date.
"""

from datetime import date
from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from library_rental.dao.base import BaseDAO
from library_rental.models.reservation import Reservation, ReservationStatus


class ReservationDAO(BaseDAO[Reservation]):
    """Data Access Object for Reservation model."""

    def __init__(self, session: AsyncSession):
        """
        Initialize ReservationDAO.

        Args:
            session: Async database session
        """
        super().__init__(Reservation, session)

    async def get_by_user(self, user_id: int) -> List[Reservation]:
        """
        Get all reservations made by a user.

        Args:
            user_id: User ID

        Returns:
            List of reservations, oldest first
        """
        return await self.get_all(user_id=user_id)

    async def get_by_status(self, status: ReservationStatus) -> List[Reservation]:
        """
        Get reservations in a given status.

        Args:
            status: Reservation status

        Returns:
            List of reservations, oldest first
        """
        return await self.get_all(status=ReservationStatus(status).value)

    async def get_overdue(self, as_of: date) -> List[Reservation]:
        """
        Get active reservations whose expected return date has passed.

        Args:
            as_of: Reference date; reservations due strictly before it match

        Returns:
            List of overdue reservations, earliest due date first
        """
        result = await self.session.execute(
            select(Reservation)
            .where(
                Reservation.status == ReservationStatus.ACTIVE.value,
                Reservation.expected_return_date < as_of,
            )
            .order_by(Reservation.expected_return_date, Reservation.id)
        )
        return list(result.scalars().all())
